"""Structlog-based logging configuration for settings extensions.

Settings extensions write protocol output to stdout, so all log output goes to stderr.
Logs are JSON by default; set SETTINGSDK_ENV=development for human-readable output.
"""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import structlog

from settingsdk.config.models import ExtensionConfig

ENVIRONMENT_ENV = "SETTINGSDK_ENV"


def is_development_environment() -> bool:
    """Check if running in a development environment."""
    return os.environ.get(ENVIRONMENT_ENV, "production") == "development"


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _configure_processors(
    config: ExtensionConfig, extension_name: str, is_development: bool
) -> list:
    """Configure structlog processors based on environment."""
    extra_fields = {
        "extension": extension_name,
        **config.logging.extra_fields,  # Allow config to override/add fields
    }

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    # Add caller info if requested
    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    # Determine JSON vs human-readable output
    use_json = config.logging.json_logs
    if use_json is None:
        use_json = not is_development

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    return processors


def _configure_handlers(config: ExtensionConfig) -> None:
    """Send log records to stderr."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.WARNING)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(log_level)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(stderr_handler)


def configure_structlog(config: ExtensionConfig, extension_name: str) -> None:
    """Configure structlog-based logging for a settings extension.

    Args:
        config: The ExtensionConfig instance containing logging settings.
        extension_name: Name of the extension, added to every log entry.
    """
    is_development = is_development_environment()
    processors = _configure_processors(config, extension_name, is_development)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        log_level=config.logging.level,
        development=is_development,
        json_output=config.logging.json_logs,
    )
