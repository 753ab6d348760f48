import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest
import structlog

from settingsdk.example.motd import motd_settings_extension
from settingsdk.extension import SettingsExtension
from settingsdk.migrate import MigrationDirection, ModelRegistry


@dataclass(frozen=True)
class ChainLink:
    """Migration capability with fixed links and identity transforms."""

    version: str
    forward: str | None = None
    backward: str | None = None

    def migrates_to(self, direction: MigrationDirection) -> str | None:
        if direction is MigrationDirection.FORWARD:
            return self.forward
        return self.backward

    def migrate(self, value: Any, direction: MigrationDirection) -> Any:
        return value

    def serialize(self, value: Any) -> Any:
        return value


@pytest.fixture(autouse=True)
def quiet_structlog():
    """Keep log events out of captured protocol output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_chain() -> Callable[..., ModelRegistry]:
    """Build a registry from ``(version, forward, backward)`` tuples, in order."""

    def _make_chain(*links: tuple[str, str | None, str | None]) -> ModelRegistry:
        return ModelRegistry({link[0]: ChainLink(*link) for link in links})

    return _make_chain


@pytest.fixture
def basic_chain(make_chain) -> ModelRegistry:
    """A valid chain v1 <-> v2 <-> v3 <-> v4 <-> v5."""
    return make_chain(
        ("v1", "v2", None),
        ("v2", "v3", "v1"),
        ("v3", "v4", "v2"),
        ("v4", "v5", "v3"),
        ("v5", None, "v4"),
    )


@pytest.fixture
def motd_extension() -> SettingsExtension:
    """The example motd settings extension."""
    return motd_settings_extension()
