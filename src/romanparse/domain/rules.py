"""Syntactic rule predicates for Roman numerals.

Each rule is a plain predicate over the numeral string so it can be
tested on its own. Violations are reported in the fixed order of
:data:`RULES`.

Known limitation: the repetition rule for (I, X, C, M) only flags a
numeral made *entirely* of four or more copies of one symbol. Embedded
runs such as ``VIIIIV`` are not caught.

Known limitation: the (V, L, D) rule is broader than its description. It
flags any two adjacent symbols from that class, not only repeats of one. Mixed runs such as the
``LV`` in ``XLV`` or ``DL`` (550) are rejected, which covers 384 of the
canonical numerals from 1 to 3999.
"""

from __future__ import annotations

from collections.abc import Callable

from romanparse.domain.symbols import (
    CHARACTERS_RULE,
    FORBIDDEN_PAIRS,
    MAX_CONSECUTIVE_REPEATS,
    NO_REPETITION_RULE,
    NON_REPEATABLE_SYMBOLS,
    REPEATABLE_SYMBOLS,
    SYMBOL_VALUES,
    THREE_CONSECUTIVE_REPETITION_RULE,
)


def uses_allowed_symbols(numeral: str) -> bool:
    """Check the numeral uses only the seven symbols and no forbidden pair.

    Examples:
        >>> uses_allowed_symbols("XIV")
        True
        >>> uses_allowed_symbols("MDMX")
        False
        >>> uses_allowed_symbols("XIIA")
        False
    """
    if any(char not in SYMBOL_VALUES for char in numeral):
        return False
    return not any(numeral[i : i + 2] in FORBIDDEN_PAIRS for i in range(len(numeral) - 1))


def is_overlong_run(numeral: str) -> bool:
    """Check whether the whole numeral is 4+ copies of one of (I, X, C, M)."""
    if len(numeral) <= MAX_CONSECUTIVE_REPEATS:
        return False
    first = numeral[0]
    return first in REPEATABLE_SYMBOLS and numeral == first * len(numeral)


def has_repeated_non_repeatable(numeral: str) -> bool:
    """Check for the shape ``[IXCM]* [VLD]{2,} [IXCM]*`` over the whole numeral.

    The leading and trailing (I, X, C, M) runs are peeled off; what remains
    must be two or more (V, L, D) symbols and nothing else.
    """
    core = numeral.strip("".join(sorted(REPEATABLE_SYMBOLS)))
    return len(core) >= 2 and all(char in NON_REPEATABLE_SYMBOLS for char in core)


# (violation check, description) in reporting order.
RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (lambda numeral: not uses_allowed_symbols(numeral), CHARACTERS_RULE),
    (is_overlong_run, THREE_CONSECUTIVE_REPETITION_RULE),
    (has_repeated_non_repeatable, NO_REPETITION_RULE),
)


def violated_rules(numeral: str) -> list[str]:
    """Return the descriptions of every rule *numeral* violates, in order."""
    return [description for violates, description in RULES if violates(numeral)]
