import click
from rich.console import Console
from rich.table import Table

from ...domain.entities.compatibility import SupportedOS, WindowsVersions

console = Console()


@click.command()
def os_list_command() -> None:
    table = Table(title="Supported Operating Systems")
    table.add_column("Name", style="cyan")
    table.add_column("Id")
    for os_entry in SupportedOS:
        table.add_row(os_entry.name.lower(), os_entry.render())
    console.print(table)

    versions = Table(title="Predefined maxversiontested Values")
    versions.add_column("Key", style="cyan")
    versions.add_column("Version")
    for key in WindowsVersions.KEYS:
        version = WindowsVersions.get(key)
        if version is not None:
            versions.add_row(key.lower(), version.render())
    console.print(versions)
