"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from dto_schema_sync.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_TARGET,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from dto_schema_sync.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_schema_generation_run,
)
from dto_schema_sync.helper_scaffold import HelperScaffoldError, write_helper_modules

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="dto-schema-sync")
def cli() -> None:
    """Generate runtime-validation schemas from DTO descriptors."""


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON generation configuration file",
)
def generate(config_path: str) -> None:
    """Prepare the output directory and write one schema file per DTO."""
    logging.basicConfig(format=_LOG_FORMAT)
    try:
        outcome = execute_schema_generation_run(GenerationRequest(config_path=config_path))
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    for path in outcome.written_paths:
        click.echo(str(path))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-helpers")
@click.option(
    "--output-dir",
    "output_dir",
    required=True,
    type=click.Path(path_type=str),
    help="Directory receiving the shared validator helper modules",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional generation configuration whose target settings name the helpers",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite helper modules that already exist.",
)
def generate_helpers(output_dir: str, config_path: str | None, force: bool) -> None:
    """Write the shared date, time and day-of-week validator helpers."""
    try:
        target = load_configuration(config_path).target if config_path else DEFAULT_TARGET
        written = write_helper_modules(output_dir, target, overwrite=force)
    except (ConfigurationError, HelperScaffoldError) as exc:
        raise CliError(str(exc)) from exc
    for path in written:
        click.echo(str(path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
