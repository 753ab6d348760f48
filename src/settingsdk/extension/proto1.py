"""Settings extension CLI protocol proto1.

The protocol is provided as a mixin so that later protocols can define operations with
the same names.
"""

import json
from collections.abc import Mapping
from typing import Any

import structlog

from settingsdk.cli.proto1 import (
    FloodMigrateCommand,
    GenerateCommand,
    MigrateCommand,
    Proto1Command,
    SetCommand,
    TemplateHelperCommand,
    ValidateCommand,
)
from settingsdk.extension.errors import (
    GenerateError,
    MigrateError,
    ModelParseError,
    NoSuchModelVersionError,
    SerializeResultError,
    SetError,
    TemplateHelperError,
    ValidateError,
)
from settingsdk.migrate import Migrator, MigratorError
from settingsdk.model import SettingError, VersionedSetting

logger = structlog.get_logger(__name__)


class Proto1:
    """proto1 operations, implemented over an extension's models and migrator.

    Classes using this mixin provide ``models`` and ``migrator``.
    """

    models: Mapping[str, VersionedSetting]
    migrator: Migrator

    def _require_model(self, setting_version: str) -> VersionedSetting:
        model = self.models.get(setting_version)
        if model is None:
            raise NoSuchModelVersionError(setting_version)
        return model

    def _parse_value(self, model: VersionedSetting, value: Any) -> Any:
        try:
            return model.parse(value)
        except SettingError as e:
            raise ModelParseError(model.version, str(e)) from e

    def set(self, command: SetCommand) -> None:
        """Check that a setting may be changed to a new value.

        Raises:
            NoSuchModelVersionError: If the setting version is unknown
            SetError: If the value is rejected
        """
        model = self._require_model(command.setting_version)
        try:
            model.set(command.current_value, command.value)
        except SettingError as e:
            raise SetError(str(e)) from e

    def generate(self, command: GenerateCommand) -> Any:
        """Generate a value for the setting, complete or partial.

        Raises:
            NoSuchModelVersionError: If the setting version is unknown
            GenerateError: If generation fails
        """
        model = self._require_model(command.setting_version)
        try:
            return model.generate(command.existing_partial, command.required_settings)
        except SettingError as e:
            raise GenerateError(str(e)) from e

    def validate(self, command: ValidateCommand) -> None:
        """Validate a value, possibly against other settings.

        Raises:
            NoSuchModelVersionError: If the setting version is unknown
            ValidateError: If the value is invalid
        """
        model = self._require_model(command.setting_version)
        try:
            model.validate(command.value, command.required_settings)
        except SettingError as e:
            raise ValidateError(str(e)) from e

    def migrate(self, command: MigrateCommand) -> Any:
        """Migrate a value from one version to another.

        Raises:
            NoSuchModelVersionError: If the starting version is unknown
            ModelParseError: If the value does not parse at the starting version
            MigrateError: If the migration fails
        """
        model = self._require_model(command.from_version)
        starting_value = self._parse_value(model, command.value)
        try:
            return self.migrator.perform_migration(
                self.models, starting_value, command.from_version, command.target_version
            )
        except MigratorError as e:
            raise MigrateError(str(e)) from e

    def flood_migrate(self, command: FloodMigrateCommand) -> list[dict[str, Any]]:
        """Migrate a value to every known version.

        Returns:
            ``{"version": ..., "value": ...}`` for each version, sorted by version

        Raises:
            NoSuchModelVersionError: If the starting version is unknown
            ModelParseError: If the value does not parse at the starting version
            MigrateError: If any migration fails
        """
        model = self._require_model(command.from_version)
        starting_value = self._parse_value(model, command.value)
        try:
            results = self.migrator.perform_flood_migrations(
                self.models, starting_value, command.from_version
            )
        except MigratorError as e:
            raise MigrateError(str(e)) from e
        return [result.model_dump(mode="json") for result in results]

    def template_helper(self, command: TemplateHelperCommand) -> Any:
        """Run a template helper.

        Raises:
            NoSuchModelVersionError: If the setting version is unknown
            TemplateHelperError: If the helper is unknown or fails
        """
        model = self._require_model(command.setting_version)
        try:
            return model.execute_template_helper(command.helper_name, command.args)
        except SettingError as e:
            raise TemplateHelperError(str(e)) from e


def try_run_extension(extension: Proto1, command: Proto1Command) -> str:
    """Run a proto1 command against an extension, returning its output.

    Returns:
        Pretty-printed JSON, or an empty string for commands that produce no value

    Raises:
        SettingsExtensionError: If the command fails
    """
    logger.debug("Running proto1 command", command=type(command).__name__)

    if isinstance(command, SetCommand):
        extension.set(command)
        return ""
    if isinstance(command, ValidateCommand):
        extension.validate(command)
        return ""

    if isinstance(command, GenerateCommand):
        result = extension.generate(command)
    elif isinstance(command, MigrateCommand):
        result = extension.migrate(command)
    elif isinstance(command, FloodMigrateCommand):
        result = extension.flood_migrate(command)
    elif isinstance(command, TemplateHelperCommand):
        result = extension.template_helper(command)
    else:
        raise TypeError(f"Unknown proto1 command: {command!r}")

    try:
        return json.dumps(result, indent=2)
    except (TypeError, ValueError) as e:
        raise SerializeResultError(str(e)) from e
