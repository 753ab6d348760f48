"""Migrator for settings that only ever have one version."""

from collections.abc import Mapping
from typing import Any

from settingsdk.migrate.base import MigrationResult, Migrator
from settingsdk.migrate.errors import NoMigrationError, TooManyModelVersionsError


class NullMigrator(Migrator):
    """Refuses every migration; valid only for a single model."""

    def validate_migrations(self, models: Mapping[str, Any]) -> None:
        """Raises TooManyModelVersionsError unless exactly one model is given."""
        if len(models) != 1:
            raise TooManyModelVersionsError()

    def perform_migration(
        self,
        models: Mapping[str, Any],
        starting_value: Any,
        starting_version: str,
        target_version: str,
    ) -> Any:
        raise NoMigrationError()

    def perform_flood_migrations(
        self,
        models: Mapping[str, Any],
        starting_value: Any,
        starting_version: str,
    ) -> list[MigrationResult]:
        raise NoMigrationError()
