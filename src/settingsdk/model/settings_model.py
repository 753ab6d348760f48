"""Interface implemented by settings models.

A settings model is a pydantic model that also inherits `SettingsModel`:

    class MotdV1(RootModel[str | None], SettingsModel):
        version: ClassVar[str] = "v1"

        @classmethod
        def generate(cls, existing_partial, dependent_settings):
            return Complete(existing_partial or cls(None))

Class variables must be annotated with `ClassVar` so pydantic does not treat them as
fields.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from settingsdk.helper import HelperDef


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of generating a settings value."""

    value: Any

    tag: ClassVar[str] = ""

    @property
    def is_complete(self) -> bool:
        """Whether generation produced a complete value."""
        return isinstance(self, Complete)


@dataclass(frozen=True)
class Complete(GenerateResult):
    """A fully generated settings value."""

    tag: ClassVar[str] = "Complete"


@dataclass(frozen=True)
class Partial(GenerateResult):
    """A partially generated value; generation must be resumed with more settings."""

    tag: ClassVar[str] = "Partial"


class SettingsModel:
    """Mixin describing one version of a setting."""

    version: ClassVar[str]
    # Type used to parse partially generated values; defaults to the model itself
    partial_kind: ClassVar[type | None] = None

    @classmethod
    def get_version(cls) -> str:
        """Get the version string of this model."""
        return cls.version

    @classmethod
    def set(cls, current_value: Any | None, target: Any) -> None:
        """Check that the setting may transition from ``current_value`` to ``target``.

        Raise to reject the new value. Any parsed value is accepted by default.
        """
        return None

    @classmethod
    def generate(
        cls, existing_partial: Any | None, dependent_settings: Any | None
    ) -> GenerateResult:
        """Generate a value, possibly from other settings."""
        raise NotImplementedError(f"{cls.__name__} does not generate values")

    @classmethod
    def validate_value(cls, value: Any, validated_settings: Any | None) -> None:
        """Cross-validate a value; raise to reject it."""
        return None

    @classmethod
    def template_helpers(cls) -> dict[str, HelperDef]:
        """Template helpers provided by this model, keyed by helper name."""
        return {}
