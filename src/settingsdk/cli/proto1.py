"""Settings extension command line protocol, version 1.

    <extension> proto1 set --setting-version v1 --value '"hello"'
    <extension> proto1 migrate --value '"hello"' --from-version v1 --target-version v2

Each command parses its options into a frozen command object and returns it; running
the command against an extension is left to the caller. JSON options are parsed as
strict JSON.
"""

import json
from dataclasses import dataclass
from typing import Any

import click


@dataclass(frozen=True)
class SetCommand:
    """Validates that a new setting value can be persisted."""

    setting_version: str
    value: Any
    current_value: Any | None = None


@dataclass(frozen=True)
class GenerateCommand:
    """Dynamically generates a value for this setting, possibly from other settings."""

    setting_version: str
    existing_partial: Any | None = None
    required_settings: Any | None = None


@dataclass(frozen=True)
class ValidateCommand:
    """Validates an incoming setting, possibly cross-validated with other settings."""

    setting_version: str
    value: Any
    required_settings: Any | None = None


@dataclass(frozen=True)
class MigrateCommand:
    """Migrates a setting value from one version to another."""

    value: Any
    from_version: str
    target_version: str


@dataclass(frozen=True)
class FloodMigrateCommand:
    """Migrates a setting value from one version to all other known versions."""

    value: Any
    from_version: str


@dataclass(frozen=True)
class TemplateHelperCommand:
    """Executes a template helper to assist in rendering values to a configuration file."""

    setting_version: str
    helper_name: str
    args: list[Any]


Proto1Command = (
    SetCommand
    | GenerateCommand
    | ValidateCommand
    | MigrateCommand
    | FloodMigrateCommand
    | TemplateHelperCommand
)

PROTO1_COMMANDS = (
    SetCommand,
    GenerateCommand,
    ValidateCommand,
    MigrateCommand,
    FloodMigrateCommand,
    TemplateHelperCommand,
)


def parse_json(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Parse a JSON option value; repeated options yield a list."""
    if value is None:
        return None
    if isinstance(value, tuple):
        return [parse_json(ctx, param, item) for item in value]
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        message = f"{value!r} is not valid JSON: {e}"
        raise click.BadParameter(message, ctx=ctx, param=param) from e


@click.group()
def cli() -> None:
    """Settings extension command line interface."""


@cli.group()
def proto1() -> None:
    """Use settings extension CLI protocol proto1."""


@proto1.command("set")
@click.option("--setting-version", required=True, help="Version of the setting to use")
@click.option(
    "--value", required=True, callback=parse_json, help="Requested value for the setting"
)
@click.option(
    "--current-value", callback=parse_json, help="Current value of this settings tree"
)
def set_command(setting_version: str, value: Any, current_value: Any | None) -> SetCommand:
    """Modify values owned by this setting."""
    return SetCommand(setting_version, value, current_value)


@proto1.command("generate")
@click.option("--setting-version", required=True, help="Version of the setting to use")
@click.option(
    "--existing-partial",
    callback=parse_json,
    help="Any partially generated data for this setting",
)
@click.option(
    "--required-settings",
    callback=parse_json,
    help="Settings needed to generate this one",
)
def generate_command(
    setting_version: str, existing_partial: Any | None, required_settings: Any | None
) -> GenerateCommand:
    """Generate default values for this setting."""
    return GenerateCommand(setting_version, existing_partial, required_settings)


@proto1.command("validate")
@click.option("--setting-version", required=True, help="Version of the setting to use")
@click.option("--value", required=True, callback=parse_json, help="Value to validate")
@click.option(
    "--required-settings",
    callback=parse_json,
    help="Settings needed to validate this one",
)
def validate_command(
    setting_version: str, value: Any, required_settings: Any | None
) -> ValidateCommand:
    """Validate values created by external settings."""
    return ValidateCommand(setting_version, value, required_settings)


@proto1.command("migrate")
@click.option("--value", required=True, callback=parse_json, help="Current value of the setting")
@click.option("--from-version", required=True, help="Version of the data being migrated")
@click.option("--target-version", required=True, help="Desired version of the data")
def migrate_command(value: Any, from_version: str, target_version: str) -> MigrateCommand:
    """Migrate this setting from one given version to another."""
    return MigrateCommand(value, from_version, target_version)


@proto1.command("flood-migrate")
@click.option("--value", required=True, callback=parse_json, help="Current value of the setting")
@click.option("--from-version", required=True, help="Version of the data being migrated")
def flood_migrate_command(value: Any, from_version: str) -> FloodMigrateCommand:
    """Migrate this setting from one given version to all other known versions."""
    return FloodMigrateCommand(value, from_version)


@proto1.command("helper")
@click.option("--setting-version", required=True, help="Version of the setting to use")
@click.option("--helper-name", required=True, help="Name of the helper to call")
@click.option(
    "--arg", "args", multiple=True, callback=parse_json, help="Argument for the helper"
)
def helper_command(
    setting_version: str, helper_name: str, args: list[Any]
) -> TemplateHelperCommand:
    """Execute a helper. Typically this is used to render config templates."""
    return TemplateHelperCommand(setting_version, helper_name, list(args or []))
