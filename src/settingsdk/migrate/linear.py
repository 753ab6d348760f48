"""Migrator for settings whose versions form a single linear chain."""

from collections.abc import Mapping
from typing import Any, ClassVar

import structlog

from settingsdk.migrate.base import MigrationResult, Migrator
from settingsdk.migrate.capability import LinearMigratorModel, MigrationCapability
from settingsdk.migrate.direction import MigrationDirection
from settingsdk.migrate.errors import (
    NoDefinedMigrationError,
    NoMigrationRouteError,
    NoSuchModelError,
)
from settingsdk.migrate.router import find_migration_route, migration_iter
from settingsdk.migrate.validator import validate_migrations

logger = structlog.get_logger(__name__)


class LinearMigrator(Migrator):
    """Migrates values by walking a chain of `LinearlyMigrateable` models."""

    model_kind: ClassVar[type[LinearMigratorModel]] = LinearMigratorModel

    def validate_migrations(self, models: Mapping[str, MigrationCapability]) -> None:
        """Check that the models form one reversible chain without loops.

        Raises:
            MigrationChainError: If the chain is broken
        """
        validate_migrations(models)

    def perform_migration(
        self,
        models: Mapping[str, MigrationCapability],
        starting_value: Any,
        starting_version: str,
        target_version: str,
    ) -> Any:
        """Migrate a value along the chain and serialize it at the target version.

        Args:
            models: Validated registry of version -> model
            starting_value: Parsed value of the starting model
            starting_version: Version of ``starting_value``
            target_version: Version to migrate to

        Returns:
            JSON of the value at ``target_version``

        Raises:
            NoSuchModelError: If ``starting_version`` is unknown
            NoMigrationRouteError: If no route reaches ``target_version``
            SubMigrationError: If a migration step fails
        """
        logger.debug(
            "Starting migration",
            starting_version=starting_version,
            target_version=target_version,
        )

        current_model = models.get(starting_version)
        if current_model is None:
            raise NoSuchModelError(starting_version)

        route = find_migration_route(models, starting_version, target_version)
        if route is None:
            raise NoMigrationRouteError(starting_version, target_version)

        current_value = starting_value
        for direction in route:
            next_version = current_model.migrates_to(direction)
            next_model = models.get(next_version) if next_version is not None else None
            if next_model is None:
                raise NoDefinedMigrationError(direction, current_model.version)

            logger.debug(
                "Performing submigration",
                current_version=current_model.version,
                next_version=next_version,
                direction=str(direction),
            )
            current_value = current_model.migrate(current_value, direction)
            current_model = next_model

        result = current_model.serialize(current_value)
        logger.debug(
            "Migration complete",
            starting_version=starting_version,
            target_version=target_version,
        )
        return result

    def perform_flood_migrations(
        self,
        models: Mapping[str, MigrationCapability],
        starting_value: Any,
        starting_version: str,
    ) -> list[MigrationResult]:
        """Migrate a value to every version in the chain.

        The forward and backward walks both begin from ``starting_value``.

        Returns:
            One result per known version, sorted by version

        Raises:
            NoSuchModelError: If ``starting_version`` is unknown
            SubMigrationError: If a migration step fails
        """
        logger.debug("Starting flood migration", starting_version=starting_version)

        starting_model = models.get(starting_version)
        if starting_model is None:
            raise NoSuchModelError(starting_version)

        results = [
            MigrationResult(
                version=starting_model.version,
                value=starting_model.serialize(starting_value),
            )
        ]

        for direction in MigrationDirection:
            current_model, current_value = starting_model, starting_value
            chain = migration_iter(models, starting_version, direction)
            next(chain)  # the starting model
            for next_model in chain:
                logger.debug(
                    "Performing flood submigration",
                    current_version=current_model.version,
                    next_version=next_model.version,
                    direction=str(direction),
                )
                current_value = current_model.migrate(current_value, direction)
                results.append(
                    MigrationResult(
                        version=next_model.version,
                        value=next_model.serialize(current_value),
                    )
                )
                current_model = next_model

        results.sort(key=lambda result: result.version)
        logger.debug(
            "Flood migration complete",
            starting_version=starting_version,
            results=len(results),
        )
        return results
