"""Orchestrator — validate, compute, and combine a numeral with its vinculum.

The vinculum numeral is the part written under a horizontal bar; its value
is multiplied by 1000 and added to the base numeral.
"""

from __future__ import annotations

import logging

from romanparse.domain.result import ParseResult
from romanparse.domain.symbols import REASON_SEPARATOR, VINCULUM_MULTIPLIER
from romanparse.services.evaluation import compute_without_vinculum
from romanparse.services.validation import validate

logger = logging.getLogger(__name__)


def parse(numeral: str, vinculum_numeral: str | None = None) -> ParseResult:
    """Validate and compute *numeral*, optionally combined with a vinculum.

    Each step short-circuits on failure:

    1. validate *numeral*;
    2. validate *vinculum_numeral* (if given), discarding the base result;
    3. compute *numeral* and return it when there is no vinculum;
    4. compute the vinculum and combine as ``base + vinculum * 1000``.

    Raises:
        ValueError: If *numeral* is None.
    """
    if numeral is None:
        msg = "numeral is required"
        raise ValueError(msg)

    logger.debug("Parsing %s (vinculum=%s)", numeral, vinculum_numeral)
    base_validation = validate(numeral)
    if base_validation is not None:
        return base_validation

    if vinculum_numeral is not None:
        vinculum_validation = validate(vinculum_numeral)
        if vinculum_validation is not None:
            return vinculum_validation

    base = compute_without_vinculum(numeral)
    if vinculum_numeral is None:
        return base

    vinculum = compute_without_vinculum(vinculum_numeral)
    return _combine(base, vinculum)


def _combine(base: ParseResult, vinculum: ParseResult) -> ParseResult:
    """Combine base and vinculum results; invalid if either part is."""
    if base.is_valid and vinculum.is_valid:
        assert base.value is not None and vinculum.value is not None
        return ParseResult.valid(base.value + vinculum.value * VINCULUM_MULTIPLIER)
    reasons = [part.invalidity_reason for part in (base, vinculum) if part.invalidity_reason]
    return ParseResult.invalid(REASON_SEPARATOR.join(reasons))
