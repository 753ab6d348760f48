"""Type-erased wrapper around a settings model class.

Settings extensions hold models of different types in one registry. `VersionedSetting`
gives every model the same JSON-in, JSON-out interface so the extension and migrators
never need to know the concrete model types.
"""

from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from settingsdk.model.errors import (
    GenerateValueError,
    HelperExecutionError,
    NoSuchHelperError,
    ParseValueError,
    SerializeValueError,
    SetValueError,
    ValidateValueError,
)
from settingsdk.model.settings_model import GenerateResult, SettingsModel

logger = structlog.get_logger(__name__)


class VersionedSetting:
    """A settings model class behind a uniform, JSON-based interface."""

    def __init__(self, model_class: type[SettingsModel]):
        """Wrap a settings model class.

        Args:
            model_class: Pydantic model class that also inherits `SettingsModel`

        Raises:
            TypeError: If the class is not a settings model or declares no version
        """
        if not isinstance(model_class, type) or not issubclass(model_class, SettingsModel):
            raise TypeError(f"{model_class!r} is not a SettingsModel")
        if not isinstance(getattr(model_class, "version", None), str):
            raise TypeError(f"{model_class.__name__} must declare 'version: ClassVar[str]'")

        self._model_class = model_class
        self._adapter: TypeAdapter[Any] = TypeAdapter(model_class)
        partial_kind = model_class.partial_kind or model_class
        self._partial_adapter: TypeAdapter[Any] = TypeAdapter(partial_kind)

    @classmethod
    def model(cls, model_class: type[SettingsModel]) -> "VersionedSetting":
        """Wrap a settings model class."""
        return cls(model_class)

    @property
    def version(self) -> str:
        return self._model_class.get_version()

    @property
    def model_class(self) -> type[SettingsModel]:
        return self._model_class

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}(version={self.version!r}, model={self._model_class.__name__})"

    def is_instance(self, value: Any) -> bool:
        """Check whether a value is an instance of the wrapped model."""
        return isinstance(value, self._model_class)

    def parse(self, value: Any) -> Any:
        """Parse a JSON value into an instance of the model.

        Raises:
            ParseValueError: If the value does not match the model
        """
        try:
            return self._adapter.validate_python(value)
        except ValidationError as e:
            raise ParseValueError(self.version, str(e)) from e

    def serialize(self, value: Any) -> Any:
        """Convert a model instance to a JSON value.

        Raises:
            SerializeValueError: If the value cannot be serialized
        """
        try:
            return self._adapter.dump_python(value, mode="json")
        except PydanticSerializationError as e:
            raise SerializeValueError(self.version, str(e)) from e

    def set(self, current_value: Any | None, target: Any) -> None:
        """Check that the setting may be changed to ``target``.

        Args:
            current_value: JSON of the value currently stored, if any
            target: JSON of the requested value

        Raises:
            ParseValueError: If either value does not parse as the model
            SetValueError: If the model rejects the change
        """
        current = self.parse(current_value) if current_value is not None else None
        parsed_target = self.parse(target)
        try:
            self._model_class.set(current, parsed_target)
        except Exception as e:
            raise SetValueError(self.version, str(e)) from e

    def generate(self, existing_partial: Any | None, required_settings: Any | None) -> Any:
        """Generate a value, returning the externally tagged JSON result.

        Returns:
            ``{"Complete": value}`` or ``{"Partial": value}``

        Raises:
            ParseValueError: If the existing partial does not parse
            GenerateValueError: If generation fails
        """
        partial = None
        if existing_partial is not None:
            try:
                partial = self._partial_adapter.validate_python(existing_partial)
            except ValidationError as e:
                raise ParseValueError(self.version, str(e)) from e

        try:
            result = self._model_class.generate(partial, required_settings)
        except Exception as e:
            raise GenerateValueError(self.version, str(e)) from e

        if not isinstance(result, GenerateResult):
            raise GenerateValueError(
                self.version, f"expected a GenerateResult, got {type(result).__name__}"
            )

        adapter = self._adapter if result.is_complete else self._partial_adapter
        try:
            value = adapter.dump_python(result.value, mode="json")
        except PydanticSerializationError as e:
            raise SerializeValueError(self.version, str(e)) from e

        logger.debug("Generated setting value", version=self.version, result=result.tag)
        return {result.tag: value}

    def validate(self, value: Any, required_settings: Any | None) -> None:
        """Validate a value, possibly against other settings.

        Raises:
            ParseValueError: If the value does not parse as the model
            ValidateValueError: If the model rejects the value
        """
        parsed = self.parse(value)
        try:
            self._model_class.validate_value(parsed, required_settings)
        except Exception as e:
            raise ValidateValueError(self.version, str(e)) from e

    def execute_template_helper(self, helper_name: str, args: list[Any]) -> Any:
        """Run one of the model's template helpers.

        Raises:
            NoSuchHelperError: If the model provides no such helper
            HelperExecutionError: If the helper fails
        """
        helper = self._model_class.template_helpers().get(helper_name)
        if helper is None:
            raise NoSuchHelperError(self.version, helper_name)

        try:
            return helper.helper_fn(args)
        except Exception as e:
            raise HelperExecutionError(self.version, helper_name, str(e)) from e

