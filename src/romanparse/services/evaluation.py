"""Evaluator — left-to-right summation with subtractive pairs.

INVARIANT: Assumes the numeral already passed :func:`validate`. The only
check performed here is the numeric-adjacency guard, which rejects a
symbol more than ten times larger than its predecessor (e.g. ``IM``).
"""

from __future__ import annotations

import logging

from romanparse.domain.result import ParseResult
from romanparse.domain.symbols import COMPUTATION_RULE, MAX_SUBTRACTIVE_RATIO, SYMBOL_VALUES

logger = logging.getLogger(__name__)


def compute_without_vinculum(numeral: str) -> ParseResult:
    """Compute the integer value of *numeral*, ignoring any vinculum.

    A subtractive pair such as ``IV`` is handled when its second symbol is
    reached: the first symbol was already added in full, so ``cur - 2 * prev``
    is added to net ``cur - prev``.

    Stops at the first impossible adjacency and returns an invalid result
    naming the offending pair.
    """
    total = 0
    previous: int | None = None
    for index, char in enumerate(numeral):
        current = SYMBOL_VALUES[char]
        if previous is not None and current > MAX_SUBTRACTIVE_RATIO * previous:
            pair = numeral[index - 1 : index + 1]
            logger.debug("%s rejected on adjacency %s", numeral, pair)
            return ParseResult.invalid(COMPUTATION_RULE + pair)
        if previous is not None and current > previous:
            total += current - 2 * previous
        else:
            total += current
        previous = current
    return ParseResult.valid(total)
