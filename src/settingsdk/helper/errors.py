"""Errors raised while executing template helpers."""


class HelperError(Exception):
    """Base class for template helper errors."""


class HelperArityError(HelperError):
    """A helper was called with the wrong number of arguments."""

    def __init__(self, expected_args: int, provided_args: int):
        self.expected_args = expected_args
        self.provided_args = provided_args
        super().__init__(
            f"Helper called with incorrect arity: expected {expected_args} args, "
            f"but {provided_args} provided"
        )


class HelperExecuteError(HelperError):
    """The helper function itself raised."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to execute helper: {reason}")


class HelperJSONParseError(HelperError):
    """An incoming argument could not be parsed into the helper's parameter type."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to parse incoming value from JSON: {reason}")


class HelperJSONSerializeError(HelperError):
    """The helper's return value could not be converted to JSON."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to parse outgoing value to JSON: {reason}")
