"""Validator — syntactic rule checking of a single numeral."""

from __future__ import annotations

import logging

from romanparse.domain.result import ParseResult
from romanparse.domain.rules import violated_rules
from romanparse.domain.symbols import REASON_SEPARATOR

logger = logging.getLogger(__name__)


def validate(numeral: str) -> ParseResult | None:
    """Run every form rule against *numeral*.

    Returns None when no rule is violated, so the caller can go on to
    computation. Otherwise returns an invalid :class:`ParseResult` whose
    reason joins the description of every violated rule.
    """
    logger.debug("%s form validation", numeral)
    violations = violated_rules(numeral)
    if not violations:
        return None
    logger.debug("%s violates %d rule(s)", numeral, len(violations))
    return ParseResult.invalid(REASON_SEPARATOR.join(violations))
