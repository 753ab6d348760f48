"""Runtime configuration for settings extensions."""

from .manager import ConfigManager
from .models import ExtensionConfig, LoggingConfig

__all__ = ["ConfigManager", "ExtensionConfig", "LoggingConfig"]
