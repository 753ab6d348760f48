"""Static validation of a linear migration chain.

Migrations must form one simple path: every model is reachable from every other model,
no version is reached twice, and each link is mirrored by its neighbour's link in the
opposite direction.
"""

from collections.abc import Mapping

import structlog

from settingsdk.migrate.capability import MigrationCapability
from settingsdk.migrate.direction import MigrationDirection
from settingsdk.migrate.errors import (
    DisjointMigrationChainError,
    IrreversibleMigrationChainError,
    MigrationLoopError,
)

logger = structlog.get_logger(__name__)


def validate_migrations(models: Mapping[str, MigrationCapability]) -> None:
    """Check that the models form a single reversible chain with no loops.

    Walks forward and then backward from an arbitrary starting model, then checks that
    every known version was visited.

    Args:
        models: Registry of version -> model

    Raises:
        IrreversibleMigrationChainError: If a neighbour does not link back
        MigrationLoopError: If a version is reached twice
        DisjointMigrationChainError: If some versions cannot be reached
    """
    if not models:
        logger.debug("No models to validate")
        return

    starting_version = next(iter(models))
    visited = {starting_version}

    for direction in MigrationDirection:
        _walk_chain(models, starting_version, direction, visited)

    unreachable = set(models) ^ visited
    if unreachable:
        raise DisjointMigrationChainError(
            unreachable_versions=sorted(unreachable),
            visited_versions=sorted(visited),
        )

    logger.debug("Validated migration chain", versions=len(models))


def _walk_chain(
    models: Mapping[str, MigrationCapability],
    starting_version: str,
    direction: MigrationDirection,
    visited: set[str],
) -> None:
    current = models[starting_version]

    while (next_version := current.migrates_to(direction)) is not None:
        next_model = models.get(next_version)
        back_link = (
            next_model.migrates_to(direction.opposite()) if next_model is not None else None
        )
        if back_link != current.version:
            raise IrreversibleMigrationChainError(
                lhs_version=current.version,
                fulcrum=next_version,
                rhs_version=back_link,
                direction=direction,
            )

        if next_version in visited:
            raise MigrationLoopError(next_version)
        visited.add(next_version)

        current = next_model
