"""Command: parse the configured sample numeral and log the result."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from romanparse.commands._base import RomanCommand

if TYPE_CHECKING:
    from romanparse.commands._context import AppContext

log = structlog.get_logger("romanparse.demo")


@click.command(
    cls=RomanCommand,
    examples="""\
  romanparse demo
  romanparse -v demo
  ROMANPARSE_DEMO__NUMERAL=XIV romanparse demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Parse the sample from the [demo] config section (XXIX / CXVII)."""
    sample = app.settings.demo
    log.info("demo started", numeral=sample.numeral, vinculum=sample.vinculum)
    result = app.service.parse(sample.numeral, vinculum=sample.vinculum)
    log.info("demo finished", ok=result.ok, value=result.data.get("value"))
    app.emit(result)
