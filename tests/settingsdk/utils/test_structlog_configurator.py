"""Tests for structlog configuration."""

import logging
import os
import sys

import pytest
import structlog

from settingsdk.config import ExtensionConfig, LoggingConfig
from settingsdk.utils.structlog_configurator import (
    _add_static_context,
    _configure_processors,
    configure_structlog,
    is_development_environment,
)


@pytest.fixture
def root_handlers():
    """Restore the root logger's handlers and level after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def make_config(**logging_fields) -> ExtensionConfig:
    return ExtensionConfig(logging=LoggingConfig(**logging_fields))


class TestEnvironment:
    """Test environment detection."""

    @pytest.mark.parametrize(
        "value,expected", [("development", True), ("production", False), ("staging", False)]
    )
    def test_is_development_environment(self, mocker, value, expected):
        """Should only treat 'development' as a development environment."""
        mocker.patch.dict(os.environ, {"SETTINGSDK_ENV": value})

        assert is_development_environment() is expected

    def test_defaults_to_production(self, mocker):
        """Should default to production."""
        mocker.patch.dict(os.environ, clear=True)

        assert is_development_environment() is False


class TestProcessors:
    """Test processor selection."""

    def test_static_context(self):
        """Should add fields to every event."""
        processor = _add_static_context({"extension": "motd"})

        event = processor(None, "info", {"event": "hello"})

        assert event == {"event": "hello", "extension": "motd"}

    def test_json_in_production(self):
        """Should render JSON outside development."""
        processors = _configure_processors(make_config(), "motd", is_development=False)

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_in_development(self):
        """Should render for humans in development."""
        processors = _configure_processors(make_config(), "motd", is_development=True)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_explicit_json_setting(self):
        """Should honour an explicit json_logs setting over the environment."""
        processors = _configure_processors(
            make_config(json_logs=True), "motd", is_development=True
        )

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_include_caller(self):
        """Should add callsite information only when requested."""
        without = _configure_processors(make_config(), "motd", is_development=False)
        with_caller = _configure_processors(
            make_config(include_caller=True), "motd", is_development=False
        )

        assert len(with_caller) == len(without) + 1
        assert any(
            isinstance(p, structlog.processors.CallsiteParameterAdder) for p in with_caller
        )

    def test_extra_fields_override_extension(self):
        """Should let configured fields override the extension name."""
        processors = _configure_processors(
            make_config(extra_fields={"extension": "renamed", "host": "pi"}),
            "motd",
            is_development=False,
        )

        event = processors[1](None, "info", {"event": "hello"})

        assert event["extension"] == "renamed"
        assert event["host"] == "pi"


class TestConfigureStructlog:
    """Test configure_structlog."""

    def test_configures_structlog(self, mocker, root_handlers):
        """Should configure structlog with the level filter and stdlib loggers."""
        configure = mocker.patch("settingsdk.utils.structlog_configurator.structlog.configure")

        configure_structlog(make_config(level="ERROR"), "motd")

        kwargs = configure.call_args.kwargs
        assert kwargs["cache_logger_on_first_use"] is True
        assert isinstance(kwargs["logger_factory"], structlog.stdlib.LoggerFactory)
        assert kwargs["wrapper_class"] is structlog.make_filtering_bound_logger(logging.ERROR)

    def test_logs_to_stderr(self, mocker, root_handlers):
        """Should leave stdout to protocol output."""
        mocker.patch("settingsdk.utils.structlog_configurator.structlog.configure")

        configure_structlog(make_config(level="INFO"), "motd")

        assert root_handlers.level == logging.INFO
        assert len(root_handlers.handlers) == 1
        handler = root_handlers.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
