"""Command-line interface for pythagoras."""

import click

from .complete import complete_command


@click.group()
def main() -> None:
    """Pythagoras: complete right triangles from partial measurements."""


main.add_command(complete_command)

__all__ = ['main']
