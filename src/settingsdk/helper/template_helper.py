"""Template helpers for rendering settings into configuration files.

Helpers are called by the templating system with a list of JSON arguments and must
return a JSON value. `template_helper` adapts an ordinary typed function to that
calling convention:

    @template_helper
    def exclaim(s: str) -> str:
        return s + "!"

    exclaim.helper_fn(["Hello"])  # -> "Hello!"
    exclaim("Hello")  # the function remains directly callable
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, Protocol, get_type_hints

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from settingsdk.helper.errors import (
    HelperArityError,
    HelperExecuteError,
    HelperJSONParseError,
    HelperJSONSerializeError,
)


class HelperDef(Protocol):
    """Protocol for template helpers."""

    def helper_fn(self, args: list[Any]) -> Any:
        """Execute the helper with JSON arguments, returning a JSON value."""
        ...


class TemplateHelper:
    """A typed function exposed through the JSON helper calling convention."""

    def __init__(self, func: Callable[..., Any]):
        """Wrap a function as a template helper.

        Args:
            func: Function whose parameters and return value are JSON (de)serializable
                according to their type annotations.

        Raises:
            TypeError: If the function takes a variable number of arguments
        """
        functools.update_wrapper(self, func)
        self._func = func

        parameters = list(inspect.signature(func).parameters.values())
        for parameter in parameters:
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                raise TypeError(
                    f"template helper '{func.__name__}' must take a fixed number of arguments"
                )

        hints = get_type_hints(func)
        self._arg_adapters = [TypeAdapter(hints.get(p.name, Any)) for p in parameters]
        self._return_adapter = TypeAdapter(hints.get("return", Any))

    @property
    def arity(self) -> int:
        """Number of arguments the helper expects."""
        return len(self._arg_adapters)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._func(*args, **kwargs)

    def helper_fn(self, args: list[Any]) -> Any:
        """Execute the helper with a list of JSON arguments.

        Raises:
            HelperArityError: If the wrong number of arguments is given
            HelperJSONParseError: If an argument does not match its parameter type
            HelperExecuteError: If the wrapped function raises
            HelperJSONSerializeError: If the result cannot be converted to JSON
        """
        if len(args) != self.arity:
            raise HelperArityError(expected_args=self.arity, provided_args=len(args))

        parsed_args = []
        for adapter, arg in zip(self._arg_adapters, args, strict=True):
            try:
                parsed_args.append(adapter.validate_python(arg))
            except ValidationError as e:
                raise HelperJSONParseError(str(e)) from e

        try:
            result = self._func(*parsed_args)
        except Exception as e:
            raise HelperExecuteError(str(e)) from e

        try:
            return self._return_adapter.dump_python(result, mode="json")
        except PydanticSerializationError as e:
            raise HelperJSONSerializeError(str(e)) from e


def template_helper(func: Callable[..., Any]) -> TemplateHelper:
    """Turn a typed function into a template helper."""
    return TemplateHelper(func)
