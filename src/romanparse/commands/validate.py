"""Command: check a numeral against the form rules only."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanparse.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanparse.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanparse validate XIV
  romanparse validate IIII""",
)
@click.argument("numeral")
@click.pass_obj
def validate(app: AppContext, numeral: str) -> None:
    """Check NUMERAL against the syntactic rules without computing it."""
    app.emit(app.service.validate(numeral))
