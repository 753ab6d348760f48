"""Route finding along a linear migration chain."""

import itertools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

import structlog

from settingsdk.migrate.capability import MigrationCapability
from settingsdk.migrate.direction import MigrationDirection

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MigrationRoute:
    """A number of hops in a single direction.

    Iterating yields the direction once per hop, and may be repeated.
    """

    direction: MigrationDirection
    hops: int

    def __iter__(self) -> Iterator[MigrationDirection]:
        return itertools.repeat(self.direction, self.hops)

    def __len__(self) -> int:
        return self.hops


def migration_iter(
    models: Mapping[str, MigrationCapability],
    starting_version: str,
    direction: MigrationDirection,
) -> Iterator[MigrationCapability]:
    """Yield models by following links in one direction, starting model included.

    Stops at the end of the chain or at a link to an unknown version. Never yields
    more models than the registry holds, so a looping chain still terminates.
    """

    def follow_links() -> Iterator[MigrationCapability]:
        current = models.get(starting_version)
        while current is not None:
            yield current
            next_version = current.migrates_to(direction)
            current = models.get(next_version) if next_version is not None else None

    return itertools.islice(follow_links(), len(models))


def find_migration_route(
    models: Mapping[str, MigrationCapability],
    starting_version: str,
    target_version: str,
) -> MigrationRoute | None:
    """Find the hops needed to migrate from one version to another.

    Args:
        models: Registry of version -> model
        starting_version: Version of the value being migrated
        target_version: Desired version

    Returns:
        The route, or None if the versions are not connected
    """
    logger.debug(
        "Finding migration route",
        starting_version=starting_version,
        target_version=target_version,
    )

    if starting_version == target_version:
        return MigrationRoute(MigrationDirection.FORWARD, 0)

    for direction in MigrationDirection:
        for hops, model in enumerate(migration_iter(models, starting_version, direction)):
            if model.version == target_version:
                logger.debug(
                    "Migration route found",
                    starting_version=starting_version,
                    target_version=target_version,
                    direction=str(direction),
                    hops=hops,
                )
                return MigrationRoute(direction, hops)

    logger.debug(
        "No migration route found",
        starting_version=starting_version,
        target_version=target_version,
    )
    return None
