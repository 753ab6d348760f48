"""Errors raised when building or running a settings extension.

Errors wrapping a lower-level failure are raised ``from`` it, and include its message.
"""


class SettingsExtensionError(Exception):
    """Base class for settings extension errors."""


class GenerateError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Generate operation failed: {reason}")


class MigrateError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Migrate operation failed: {reason}")


class MigrationValidationError(SettingsExtensionError):
    """The extension's models do not form a valid set of migrations."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to validate model migrations: {reason}")


class ModelParseError(SettingsExtensionError):
    def __init__(self, setting_version: str, reason: str):
        self.setting_version = setting_version
        super().__init__(
            f"Failed to parse input as requested model version '{setting_version}': {reason}"
        )


class ModelVersionCollisionError(SettingsExtensionError):
    """Two models were given the same version."""

    def __init__(self, setting_version: str):
        self.setting_version = setting_version
        super().__init__(f"Multiple models use version '{setting_version}'")


class NoSuchModelVersionError(SettingsExtensionError):
    def __init__(self, setting_version: str):
        self.setting_version = setting_version
        super().__init__(f"Requested model version '{setting_version}' not found")


class ParseCLICommandError(SettingsExtensionError):
    """The command line did not select a proto1 command."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to parse CLI command: {reason}")


class ParseCLIArgsError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to parse CLI arguments: {reason}")


class SerializeResultError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to write settings extension output as JSON: {reason}")


class SetError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Set operation failed: {reason}")


class TemplateHelperError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Template helper operation failed: {reason}")


class ValidateError(SettingsExtensionError):
    def __init__(self, reason: str):
        super().__init__(f"Validate operation failed: {reason}")
