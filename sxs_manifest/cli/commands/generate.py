"""Generate command - Render a manifest description into SxS manifest XML.

This module is a thin adapter between the Click CLI framework and the
application layer's GenerateManifestUseCase. It is responsible for:
1. Loading the writer configuration and the manifest description
2. Creating the GenerateManifestRequest
3. Calling the use case
4. Printing the XML or reporting where it was written
"""

from pathlib import Path

import click
from rich.console import Console

from ...application.models import GenerateManifestRequest
from ...config import ConfigLoader
from ...infrastructure.container import create_default_container
from ...infrastructure.io.exceptions import ManifestDescriptionError

# Diagnostics go to stderr; stdout carries only the manifest
console = Console(stderr=True)


@click.command()
@click.argument("description", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the manifest to this file (default: print to stdout)",
)
@click.option(
    "--indent/--no-indent",
    "perform_indent",
    default=None,
    help="Pretty-print the XML (default: from config, otherwise compact)",
)
@click.option(
    "--indent-string",
    help="Indentation unit used with --indent (spaces and tabs only)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a sxs_manifest.toml config file (default: ./sxs_manifest.toml)",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity level (-v for verbose, -vv for debug)",
)
def generate_command(
    description: Path,
    output_path: Path | None,
    perform_indent: bool | None,
    indent_string: str | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Generate an SxS assembly manifest from a TOML description.

    Examples:

    \b
        # Print a compact manifest
        sxs-manifest generate app.manifest.toml

    \b
        # Write an indented manifest next to the executable
        sxs-manifest generate app.manifest.toml --indent -o app.exe.manifest
    """
    try:
        writer_config = ConfigLoader.load(config_file).with_overrides(
            perform_indent=perform_indent, indent_string=indent_string
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    container = create_default_container(verbose=verbose, console=console)
    try:
        manifest = container.create_description_repository().load(description)
    except ManifestDescriptionError as exc:
        raise click.ClickException(str(exc)) from exc

    use_case = container.create_generate_manifest_use_case()
    response = use_case.execute(
        GenerateManifestRequest(
            manifest=manifest,
            output_path=output_path,
            writer_config=writer_config,
            name=description.name,
        )
    )
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(response.error or "Manifest generation failed")
    if output_path is None and response.xml is not None:
        click.echo(response.xml)
