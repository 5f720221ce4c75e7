"""Subcommand modules for romanparse.

Provides register_commands() which uses deferred imports to keep
``romanparse --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from romanparse.commands.compute import compute
    from romanparse.commands.demo import demo
    from romanparse.commands.parse import parse
    from romanparse.commands.validate import validate

    cli.add_command(parse)
    cli.add_command(validate)
    cli.add_command(compute)
    cli.add_command(demo)
