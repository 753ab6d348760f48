"""Template helpers used by the templating system to render settings."""

from .errors import (
    HelperArityError,
    HelperError,
    HelperExecuteError,
    HelperJSONParseError,
    HelperJSONSerializeError,
)
from .template_helper import HelperDef, TemplateHelper, template_helper

__all__ = [
    "HelperArityError",
    "HelperDef",
    "HelperError",
    "HelperExecuteError",
    "HelperJSONParseError",
    "HelperJSONSerializeError",
    "TemplateHelper",
    "template_helper",
]
