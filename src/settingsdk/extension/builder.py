"""Builders for settings extensions.

    extension = (
        LinearMigratorExtensionBuilder.with_name("motd")
        .with_models([MotdV1, MotdV2])
        .build()
    )
"""

from collections.abc import Iterable
from typing import Any

from settingsdk.extension.extension import SettingsExtension
from settingsdk.migrate import LinearMigrator, Migrator, NullMigrator


class SettingsExtensionBuilder:
    """Collects the parts of a `SettingsExtension`."""

    def __init__(self, name: str, migrator: Migrator):
        self.name = name
        self.migrator = migrator
        self.models: list[Any] = []

    def with_models(self, models: Iterable[Any]) -> "SettingsExtensionBuilder":
        """Set the settings models served by the extension."""
        self.models = list(models)
        return self

    def build(self) -> SettingsExtension:
        """Build the extension, validating its models' migrations.

        Raises:
            SettingsExtensionError: If the models are invalid
        """
        return SettingsExtension(self.name, self.models, self.migrator)


class LinearMigratorExtensionBuilder(SettingsExtensionBuilder):
    """Builds an extension whose models form a linear migration chain."""

    @classmethod
    def with_name(cls, name: str) -> "LinearMigratorExtensionBuilder":
        return cls(name, LinearMigrator())


class NullMigratorExtensionBuilder(SettingsExtensionBuilder):
    """Builds an extension for a setting with a single version."""

    @classmethod
    def with_name(cls, name: str) -> "NullMigratorExtensionBuilder":
        return cls(name, NullMigrator())
