"""Settings extensions: executables that answer the settings extension CLI protocol.

A `SettingsExtension` ties a set of settings model classes to a migrator. The models'
migrations are validated once, when the extension is built; an extension that
constructs successfully is ready to serve requests.
"""

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import click
import structlog

from settingsdk.cli.proto1 import PROTO1_COMMANDS, cli
from settingsdk.config.manager import ConfigManager
from settingsdk.extension.errors import (
    MigrationValidationError,
    ModelVersionCollisionError,
    ParseCLIArgsError,
    ParseCLICommandError,
    SettingsExtensionError,
)
from settingsdk.extension.proto1 import Proto1, try_run_extension
from settingsdk.migrate import Migrator, MigratorError, ModelRegistry
from settingsdk.model import VersionedSetting
from settingsdk.utils.structlog_configurator import configure_structlog

logger = structlog.get_logger(__name__)


class SettingsExtension(Proto1):
    """A named set of settings models served over the CLI protocol."""

    def __init__(self, name: str, models: Iterable[Any], migrator: Migrator):
        """Build the extension and validate its migrations.

        Args:
            name: Name of the extension
            models: Settings model classes, or models already wrapped in
                ``migrator.model_kind``
            migrator: Migrator used to move values between model versions

        Raises:
            ModelVersionCollisionError: If two models share a version
            MigrationValidationError: If the migrator rejects the models
        """
        self.name = name
        self.migrator = migrator

        erased_models: dict[str, VersionedSetting] = {}
        for model in models:
            erased = model if isinstance(model, migrator.model_kind) else migrator.model_kind(model)
            if erased.version in erased_models:
                raise ModelVersionCollisionError(erased.version)
            erased_models[erased.version] = erased
        self.models = ModelRegistry(erased_models)

        self.validate_registry()
        logger.debug("Built settings extension", extension=name, versions=sorted(self.models))

    def __repr__(self) -> str:
        return (
            f"SettingsExtension(name={self.name!r}, model_versions={sorted(self.models)!r}, "
            f"migrator={self.migrator!r})"
        )

    def model(self, version: str) -> VersionedSetting | None:
        """Get the model with the given version, if there is one."""
        return self.models.get(version)

    def iter_models(self) -> Iterator[tuple[str, VersionedSetting]]:
        """Iterate over ``(version, model)`` pairs in no particular order."""
        return iter(self.models.items())

    def validate_registry(self) -> None:
        """Check the models' migrations with the migrator.

        Raises:
            MigrationValidationError: If the migrations are invalid
        """
        try:
            self.migrator.validate_migrations(self.models)
        except MigratorError as e:
            raise MigrationValidationError(str(e)) from e

    def try_run_with_args(self, args: Sequence[str]) -> str:
        """Parse a command line and run it against this extension.

        Args:
            args: Full command line, program name first

        Returns:
            The command's output. Empty if the command produces none, or if the command
            line only requested help.

        Raises:
            ParseCLICommandError: If the command line does not select a command
            ParseCLIArgsError: If the arguments are invalid
            SettingsExtensionError: If the command fails
        """
        if not args:
            raise ParseCLICommandError("no program name given")

        prog_name, *cli_args = args
        try:
            command = cli.main(args=cli_args, prog_name=prog_name, standalone_mode=False)
        except click.ClickException as e:
            raise ParseCLIArgsError(e.format_message()) from e

        if not isinstance(command, PROTO1_COMMANDS):
            # click returns an exit code after printing help
            if command == 0:
                return ""
            raise ParseCLICommandError(f"expected a proto1 command in {cli_args!r}")

        logger.info(
            "Starting settings extension",
            extension=self.name,
            command=type(command).__name__,
        )
        return try_run_extension(self, command)

    def run(self, args: Sequence[str] | None = None) -> int:
        """Run the extension against the process command line.

        Output goes to stdout; errors and logs go to stderr.

        Returns:
            Process exit code
        """
        try:
            configure_structlog(ConfigManager().load(), self.name)
        except ValueError as e:
            click.echo(str(e), err=True)
            return 1

        try:
            output = self.try_run_with_args(sys.argv if args is None else args)
        except SettingsExtensionError as e:
            logger.debug("Settings extension command failed", error=str(e))
            click.echo(str(e), err=True)
            return 1

        if output:
            click.echo(output)
        return 0
