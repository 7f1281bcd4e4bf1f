import click

from .commands.generate import generate_command
from .commands.os_list import os_list_command
from .commands.validate import validate_command


@click.group()
def app() -> None:
    pass


app.add_command(generate_command, name="generate")
app.add_command(validate_command, name="validate")
app.add_command(os_list_command, name="os-list")
__all__ = ["app"]
