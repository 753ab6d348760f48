"""Immutable registry of settings models keyed by version."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

M = TypeVar("M")


class ModelRegistry(Mapping[str, M], Generic[M]):
    """Read-only mapping of version -> model used to resolve migration neighbours.

    The registry is the sole owner of its models. Neighbour links are stored as
    version strings and always resolved back through the registry.
    Iteration order is unspecified; callers must not depend on it.
    """

    def __init__(self, models: Mapping[str, M] | None = None):
        """Initialize the registry.

        Args:
            models: Mapping of version string to model. The mapping is copied.
        """
        self._models: Mapping[str, M] = MappingProxyType(dict(models or {}))

    def __getitem__(self, version: str) -> M:
        return self._models[version]

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        return f"ModelRegistry(versions={sorted(self._models)!r})"

    def get_model(self, version: str) -> M | None:
        """Get the model registered for a version, or None if there is none."""
        return self._models.get(version)
