"""Direction of travel along a linear migration chain."""

from enum import StrEnum


class MigrationDirection(StrEnum):
    """Direction for a linear migration."""

    FORWARD = "forward"  # towards a newer version
    BACKWARD = "backward"  # towards an older version

    def opposite(self) -> "MigrationDirection":
        """Return the direction opposite to this one."""
        if self is MigrationDirection.FORWARD:
            return MigrationDirection.BACKWARD
        return MigrationDirection.FORWARD
