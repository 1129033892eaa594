"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_doc_tree.configuration import (
    DEFAULT_CONFIG_FILENAME,
    OutputFormat,
    write_placeholder_configuration,
)
from schema_doc_tree.render_execution import (
    RenderExecutionError,
    RenderRequest,
    execute_schema_render,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-doc-tree")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Render JSON Schema documents as field reference trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


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


@cli.command(name="render")
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a JSON or YAML schema file",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML configuration file",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([member.value for member in OutputFormat], case_sensitive=False),
    help="Rendering to produce (default: markdown)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write; text formats print to stdout when omitted",
)
@click.option("--title", required=False, help="Top-level heading for markdown output")
@click.option(
    "--include-root-metadata",
    is_flag=True,
    default=False,
    help="Show the root object's description and keyword table",
)
@click.option(
    "--no-detect-cycles",
    is_flag=True,
    default=False,
    help="Skip the self-reference check while building the tree",
)
# pylint: disable=too-many-arguments
def render(
    schema_path: str | None,
    config_path: str | None,
    output_format: str | None,
    output_path: str | None,
    title: str | None,
    include_root_metadata: bool,
    no_detect_cycles: bool,
) -> None:
    """Render the document tree of a schema."""
    try:
        outcome = execute_schema_render(
            RenderRequest(
                config_path=config_path,
                schema_path=schema_path,
                output_format=output_format,
                output_path=output_path,
                title=title,
                include_root_metadata=True if include_root_metadata else None,
                detect_cycles=False if no_detect_cycles else None,
            )
        )
    except RenderExecutionError as exc:
        raise CliError(str(exc)) from exc

    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    elif outcome.content is not None:
        click.echo(outcome.content, nl=False)


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
