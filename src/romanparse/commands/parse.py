"""Command: parse a numeral with an optional vinculum part."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanparse.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanparse.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanparse parse XXIX
  romanparse parse XXIX --vinculum CXVII
  romanparse --json parse MCMXCIV""",
)
@click.argument("numeral")
@click.option(
    "-V",
    "--vinculum",
    default=None,
    help="Numeral written under the bar (multiplied by 1000).",
)
@click.pass_obj
def parse(app: AppContext, numeral: str, vinculum: str | None) -> None:
    """Validate NUMERAL and compute its integer value."""
    app.emit(app.service.parse(numeral, vinculum=vinculum))
