"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from typename_tagger.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from typename_tagger.run_execution import RunExecutionError, RunRequest, execute_annotation_run


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-typename-tagger")
@click.option("--verbose", is_flag=True, default=False, help="Log type resolution decisions.")
def cli(verbose: bool) -> None:
    """Stamp __typename onto plain fixture data using a GraphQL schema."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)


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


@cli.command(name="annotate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON/YAML fixture to annotate",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the annotated JSON/YAML fixture to write",
)
@click.option(
    "--parent-type",
    "parent_type_name",
    required=False,
    help="Object type declaring the property that holds the fixture root",
)
@click.option(
    "--property",
    "property_of_parent",
    required=False,
    help="Property of --parent-type that holds the fixture root",
)
def annotate_fixture(
    config_path: str,
    input_path: str,
    output_path: str,
    parent_type_name: str | None,
    property_of_parent: str | None,
) -> None:
    """Annotate every object in a fixture file with its __typename."""
    try:
        outcome = execute_annotation_run(
            RunRequest(
                config_path=config_path,
                input_path=input_path,
                output_path=output_path,
                parent_type_name=parent_type_name,
                property_of_parent=property_of_parent,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


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
