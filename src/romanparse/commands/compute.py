"""Command: compute a numeral without form validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from romanparse.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanparse.commands._context import AppContext


@click.command(
    cls=RomanCommand,
    examples="""\
  romanparse compute CXVII
  romanparse compute IM""",
)
@click.argument("numeral")
@click.pass_obj
def compute(app: AppContext, numeral: str) -> None:
    """Compute NUMERAL directly, skipping the form rules."""
    app.emit(app.service.compute(numeral))
