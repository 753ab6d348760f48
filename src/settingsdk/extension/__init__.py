"""Settings extensions and the builders that assemble them."""

from .builder import (
    LinearMigratorExtensionBuilder,
    NullMigratorExtensionBuilder,
    SettingsExtensionBuilder,
)
from .errors import (
    GenerateError,
    MigrateError,
    MigrationValidationError,
    ModelParseError,
    ModelVersionCollisionError,
    NoSuchModelVersionError,
    ParseCLIArgsError,
    ParseCLICommandError,
    SerializeResultError,
    SetError,
    SettingsExtensionError,
    TemplateHelperError,
    ValidateError,
)
from .extension import SettingsExtension
from .proto1 import Proto1, try_run_extension

__all__ = [
    "GenerateError",
    "LinearMigratorExtensionBuilder",
    "MigrateError",
    "MigrationValidationError",
    "ModelParseError",
    "ModelVersionCollisionError",
    "NoSuchModelVersionError",
    "NullMigratorExtensionBuilder",
    "ParseCLIArgsError",
    "ParseCLICommandError",
    "Proto1",
    "SerializeResultError",
    "SetError",
    "SettingsExtension",
    "SettingsExtensionBuilder",
    "SettingsExtensionError",
    "TemplateHelperError",
    "ValidateError",
    "try_run_extension",
]
