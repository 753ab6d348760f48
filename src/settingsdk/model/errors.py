"""Errors raised by type-erased settings models."""


class SettingError(Exception):
    """Base class for errors raised while operating on a settings model."""

    def __init__(self, version: str, message: str):
        self.version = version
        super().__init__(message)


class ParseValueError(SettingError):
    """Input JSON does not parse as the model."""

    def __init__(self, version: str, reason: str):
        super().__init__(version, f"Failed to parse value as setting version '{version}': {reason}")


class SerializeValueError(SettingError):
    """A model value could not be converted to JSON."""

    def __init__(self, version: str, reason: str):
        super().__init__(
            version, f"Failed to serialize value of setting version '{version}': {reason}"
        )


class SetValueError(SettingError):
    """The model rejected a set operation."""

    def __init__(self, version: str, reason: str):
        super().__init__(version, f"Failed to set value for setting version '{version}': {reason}")


class GenerateValueError(SettingError):
    """The model failed to generate a value."""

    def __init__(self, version: str, reason: str):
        super().__init__(
            version, f"Failed to generate value for setting version '{version}': {reason}"
        )


class ValidateValueError(SettingError):
    """The model rejected a value during validation."""

    def __init__(self, version: str, reason: str):
        super().__init__(version, f"Failed to validate setting version '{version}': {reason}")


class NoSuchHelperError(SettingError):
    """The model provides no helper with the requested name."""

    def __init__(self, version: str, helper_name: str):
        self.helper_name = helper_name
        super().__init__(
            version, f"Setting version '{version}' has no template helper '{helper_name}'"
        )


class HelperExecutionError(SettingError):
    """A template helper failed."""

    def __init__(self, version: str, helper_name: str, reason: str):
        self.helper_name = helper_name
        super().__init__(
            version,
            f"Template helper '{helper_name}' of setting version '{version}' failed: {reason}",
        )
