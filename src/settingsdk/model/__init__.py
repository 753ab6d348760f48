"""Settings model interface and its type-erased wrapper."""

from .errors import (
    GenerateValueError,
    HelperExecutionError,
    NoSuchHelperError,
    ParseValueError,
    SerializeValueError,
    SetValueError,
    SettingError,
    ValidateValueError,
)
from .settings_model import Complete, GenerateResult, Partial, SettingsModel
from .versioned_setting import VersionedSetting

__all__ = [
    "Complete",
    "GenerateResult",
    "GenerateValueError",
    "HelperExecutionError",
    "NoSuchHelperError",
    "ParseValueError",
    "Partial",
    "SerializeValueError",
    "SetValueError",
    "SettingError",
    "SettingsModel",
    "ValidateValueError",
    "VersionedSetting",
]
