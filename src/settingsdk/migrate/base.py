"""Interface shared by migrators."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from settingsdk.model import VersionedSetting


class MigrationResult(BaseModel):
    """A value serialized at one version, produced by a flood migration."""

    model_config = ConfigDict(frozen=True)

    version: str
    value: Any


class Migrator(ABC):
    """Validates a set of models and migrates values between their versions.

    `model_kind` is the wrapper class the extension uses for models managed by this
    migrator.
    """

    model_kind: ClassVar[type[VersionedSetting]] = VersionedSetting

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @abstractmethod
    def validate_migrations(self, models: Mapping[str, Any]) -> None:
        """Check that migrations between the models are well formed."""

    @abstractmethod
    def perform_migration(
        self,
        models: Mapping[str, Any],
        starting_value: Any,
        starting_version: str,
        target_version: str,
    ) -> Any:
        """Migrate a parsed value to ``target_version``, returning its JSON."""

    @abstractmethod
    def perform_flood_migrations(
        self,
        models: Mapping[str, Any],
        starting_value: Any,
        starting_version: str,
    ) -> list[MigrationResult]:
        """Migrate a parsed value to every known version."""
