"""Configuration loading for settings extensions."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from settingsdk.config.models import ExtensionConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "SETTINGSDK_CONFIG"
LOG_LEVEL_ENV = "SETTINGSDK_LOG_LEVEL"


class ConfigManager:
    """Loads extension configuration from an optional YAML file and the environment."""

    def __init__(self, config_path: Path | None = None):
        """Initialize ConfigManager.

        Args:
            config_path: Optional path to the YAML file. If None, uses $SETTINGSDK_CONFIG.
        """
        if config_path is None and os.getenv(CONFIG_PATH_ENV):
            config_path = Path(os.environ[CONFIG_PATH_ENV])
        self.config_path = config_path

    def load(self) -> ExtensionConfig:
        """Load and validate configuration.

        A missing file yields the defaults.

        Returns:
            ExtensionConfig: Loaded and validated configuration

        Raises:
            ValueError: If the file is not valid YAML or fails validation
        """
        raw_config = self._read_yaml()

        level_override = os.getenv(LOG_LEVEL_ENV)
        if level_override:
            raw_config.setdefault("logging", {})["level"] = level_override

        try:
            return ExtensionConfig.model_validate(raw_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e

    def _read_yaml(self) -> dict[str, Any]:
        """Read the YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        if self.config_path is None or not self.config_path.exists():
            logger.debug("No configuration file found, using defaults")
            return {}

        try:
            raw_config = yaml.safe_load(self.config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid configuration file {self.config_path}: {e}") from e

        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")
        return raw_config
