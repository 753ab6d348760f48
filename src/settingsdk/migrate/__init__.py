"""Validation and execution of migrations between settings model versions."""

from .base import MigrationResult, Migrator
from .capability import LinearlyMigrateable, LinearMigratorModel, MigrationCapability
from .direction import MigrationDirection
from .errors import (
    DisjointMigrationChainError,
    DowncastSettingError,
    IrreversibleMigrationChainError,
    LinearMigratorError,
    MigrationChainError,
    MigrationLoopError,
    MigratorError,
    NoDefinedMigrationError,
    NoMigrationError,
    NoMigrationRouteError,
    NoSuchModelError,
    NullMigratorError,
    SerializeMigrationResultError,
    SubMigrationError,
    TooManyModelVersionsError,
)
from .linear import LinearMigrator
from .null import NullMigrator
from .registry import ModelRegistry
from .router import MigrationRoute, find_migration_route, migration_iter
from .validator import validate_migrations

__all__ = [
    "DisjointMigrationChainError",
    "DowncastSettingError",
    "IrreversibleMigrationChainError",
    "LinearMigrator",
    "LinearMigratorError",
    "LinearMigratorModel",
    "LinearlyMigrateable",
    "MigrationCapability",
    "MigrationChainError",
    "MigrationDirection",
    "MigrationLoopError",
    "MigrationResult",
    "MigrationRoute",
    "Migrator",
    "MigratorError",
    "ModelRegistry",
    "NoDefinedMigrationError",
    "NoMigrationError",
    "NoMigrationRouteError",
    "NoSuchModelError",
    "NullMigrator",
    "NullMigratorError",
    "SerializeMigrationResultError",
    "SubMigrationError",
    "TooManyModelVersionsError",
    "find_migration_route",
    "migration_iter",
    "validate_migrations",
]
