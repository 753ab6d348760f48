"""Models that take part in linear migrations.

Authors declare the neighbours of each settings model by version and implement the
transform in each direction:

    class MySettingV2(BaseModel, LinearlyMigrateable):
        version: ClassVar[str] = "v2"
        migrates_forward_to: ClassVar[str | None] = "v3"
        migrates_backward_to: ClassVar[str | None] = "v1"

        def migrate_forward(self) -> "MySettingV3": ...
        def migrate_backward(self) -> "MySettingV1": ...

The linear migrator only ever sees models through the `MigrationCapability` protocol,
implemented by `LinearMigratorModel`.
"""

from typing import Any, ClassVar, Protocol

from settingsdk.migrate.direction import MigrationDirection
from settingsdk.migrate.errors import (
    DowncastSettingError,
    NoDefinedMigrationError,
    SerializeMigrationResultError,
    SubMigrationError,
)
from settingsdk.model import SerializeValueError, SettingsModel, VersionedSetting


class MigrationCapability(Protocol):
    """What the chain validator, router and executors need from a model."""

    @property
    def version(self) -> str: ...

    def migrates_to(self, direction: MigrationDirection) -> str | None: ...

    def migrate(self, value: Any, direction: MigrationDirection) -> Any: ...

    def serialize(self, value: Any) -> Any: ...


class LinearlyMigrateable(SettingsModel):
    """Mixin for settings models with at most one neighbour in each direction."""

    migrates_forward_to: ClassVar[str | None] = None
    migrates_backward_to: ClassVar[str | None] = None

    def migrate_forward(self) -> SettingsModel:
        """Convert this value into the model named by `migrates_forward_to`."""
        raise NotImplementedError(f"{type(self).__name__} does not migrate forward")

    def migrate_backward(self) -> SettingsModel:
        """Convert this value into the model named by `migrates_backward_to`."""
        raise NotImplementedError(f"{type(self).__name__} does not migrate backward")


class LinearMigratorModel(VersionedSetting):
    """Type-erased `LinearlyMigrateable` model used by the linear migrator."""

    def __init__(self, model_class: type[LinearlyMigrateable]):
        if not isinstance(model_class, type) or not issubclass(model_class, LinearlyMigrateable):
            raise TypeError(f"{model_class!r} is not LinearlyMigrateable")
        super().__init__(model_class)

    def migrates_to(self, direction: MigrationDirection) -> str | None:
        """Version this model migrates to in the given direction, if any."""
        if direction is MigrationDirection.FORWARD:
            return self.model_class.migrates_forward_to
        return self.model_class.migrates_backward_to

    def _downcast(self, value: Any) -> Any:
        if not self.is_instance(value):
            raise DowncastSettingError(self.version)
        return value

    def migrate(self, value: Any, direction: MigrationDirection) -> Any:
        """Apply this model's transform in ``direction`` to a value of this model.

        Raises:
            DowncastSettingError: If the value is not an instance of this model
            NoDefinedMigrationError: If there is no migration in that direction
            SubMigrationError: If the transform raises
        """
        current = self._downcast(value)
        to_version = self.migrates_to(direction)
        if to_version is None:
            raise NoDefinedMigrationError(direction, self.version)

        try:
            if direction is MigrationDirection.FORWARD:
                return current.migrate_forward()
            return current.migrate_backward()
        except Exception as e:
            raise SubMigrationError(self.version, to_version, direction, str(e)) from e

    def serialize(self, value: Any) -> Any:
        """Serialize a value of this model.

        Raises:
            DowncastSettingError: If the value is not an instance of this model
            SerializeMigrationResultError: If serialization fails
        """
        try:
            return super().serialize(self._downcast(value))
        except SerializeValueError as e:
            raise SerializeMigrationResultError(self.version, str(e)) from e
