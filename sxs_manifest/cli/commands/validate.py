"""Validate command - Check a manifest description without writing XML."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...domain.services.validation_rules import validate_manifest
from ...infrastructure.io.exceptions import ManifestDescriptionError
from ...infrastructure.repositories.manifest_description import (
    load_manifest_description,
)

console = Console()


@click.command()
@click.argument("description", type=click.Path(exists=True, path_type=Path))
def validate_command(description: Path) -> None:
    """Validate a TOML manifest description.

    The description is parsed and every manifest rule is checked. The command
    exits with a non-zero status when anything is wrong.
    """
    try:
        manifest = load_manifest_description(description)
    except ManifestDescriptionError as exc:
        raise click.ClickException(str(exc)) from exc

    issues = validate_manifest(manifest)
    if issues:
        for issue in issues:
            console.print(f"[red]✗[/red] {escape(str(issue))}")
        raise click.ClickException(
            f"Validation failed with {len(issues)} issue(s) in {description.name}"
        )

    dependency_count = len(manifest.dependency.dependent_assemblies)
    console.print(
        f"[green]✓[/green] {description.name} is valid "
        f"({len(manifest.compatibility.supported_os)} supported OS, "
        f"{dependency_count} dependencies)"
    )
