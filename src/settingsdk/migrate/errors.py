"""Errors raised by migrators.

Chain validation errors (`MigrationChainError` subclasses) are raised once, when an
extension is constructed. The remaining errors are raised per migration request.
`NoDefinedMigrationError` and `DowncastSettingError` indicate a bug in route selection
rather than bad input.
"""

from settingsdk.migrate.direction import MigrationDirection


class MigratorError(Exception):
    """Base class for all migrator errors."""


class LinearMigratorError(MigratorError):
    """Error raised by the linear migrator."""


class MigrationChainError(LinearMigratorError):
    """The set of models does not form a single reversible linear chain."""


class DisjointMigrationChainError(MigrationChainError):
    """Some models cannot be reached from the rest of the chain."""

    def __init__(self, unreachable_versions: list[str], visited_versions: list[str]):
        self.unreachable_versions = unreachable_versions
        self.visited_versions = visited_versions
        super().__init__(
            "Detected disjoint migration chains while validating migrations: versions "
            f"'{', '.join(unreachable_versions)}' are not reachable from versions "
            f"'{', '.join(visited_versions)}'"
        )


class IrreversibleMigrationChainError(MigrationChainError):
    """A model's neighbour does not point back to it."""

    def __init__(
        self,
        lhs_version: str,
        fulcrum: str,
        rhs_version: str | None,
        direction: MigrationDirection,
    ):
        self.lhs_version = lhs_version
        self.fulcrum = fulcrum
        self.rhs_version = rhs_version
        self.direction = direction
        super().__init__(
            f"Detected an irreversible migration chain: {lhs_version} points {direction} to "
            f"{fulcrum}, which points {direction.opposite()} to "
            f"{rhs_version or 'no migration'}."
        )


class MigrationLoopError(MigrationChainError):
    """A version was reached twice while walking the chain."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            "Detected a migration loop. Multiple models use version "
            f"'{version}' as a migration target."
        )


class DowncastSettingError(LinearMigratorError):
    """A migrated value is not an instance of the model expected at that version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Failed to downcast migrated value as setting version '{version}'")


class NoDefinedMigrationError(LinearMigratorError):
    """A model has no migration in the requested direction."""

    def __init__(self, direction: MigrationDirection, version: str):
        self.direction = direction
        self.version = version
        super().__init__(f"No '{direction}' migration for setting version '{version}'")


class NoMigrationRouteError(LinearMigratorError):
    """No chain of migrations connects the two versions."""

    def __init__(self, starting_version: str, target_version: str):
        self.starting_version = starting_version
        self.target_version = target_version
        super().__init__(
            f"No migration route found for '{starting_version}' to '{target_version}'"
        )


class NoSuchModelError(LinearMigratorError):
    """No model is registered for the version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Could not find model for version '{version}'")


class SerializeMigrationResultError(LinearMigratorError):
    """A migrated value could not be serialized to JSON."""

    def __init__(self, version: str, reason: str):
        self.version = version
        super().__init__(f"Failed to serialize migration result: {reason}")


class SubMigrationError(LinearMigratorError):
    """A user-defined migration raised; the original exception is the ``__cause__``."""

    def __init__(
        self,
        from_version: str,
        to_version: str,
        direction: MigrationDirection,
        reason: str,
    ):
        self.from_version = from_version
        self.to_version = to_version
        self.direction = direction
        super().__init__(
            f"Failed to perform sub-migration of setting {direction} from '{from_version}' "
            f"to '{to_version}': {reason}"
        )


class NullMigratorError(MigratorError):
    """Error raised by the null migrator."""


class NoMigrationError(NullMigratorError):
    """The null migrator never migrates."""

    def __init__(self):
        super().__init__("No migration to perform")


class TooManyModelVersionsError(NullMigratorError):
    """The null migrator was given more than one model."""

    def __init__(self):
        super().__init__("NullMigrator cannot be used with models with multiple versions")
