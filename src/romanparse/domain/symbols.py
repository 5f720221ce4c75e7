"""Roman symbol table, symbol classes, and rule descriptions.

The symbol table is process-wide and read-only: it is exposed as a
``MappingProxyType`` so there is no mutation path after import.

INVARIANT: Only the seven classical symbols are known. A single vinculum
level multiplies by 1000.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

SYMBOL_VALUES: Mapping[str, int] = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)

VINCULUM_MULTIPLIER = 1000

# Symbols that may repeat (up to three times) and symbols that may not.
REPEATABLE_SYMBOLS = frozenset("IXCM")
NON_REPEATABLE_SYMBOLS = frozenset("VLD")

FORBIDDEN_PAIRS: frozenset[str] = frozenset({"VX", "LC", "DM"})

MAX_CONSECUTIVE_REPEATS = 3

# Adjacent symbols whose ratio exceeds this can never form a numeral.
MAX_SUBTRACTIVE_RATIO = 10

# --- Rule descriptions ---

CHARACTERS_RULE = (
    "The Roman numerals should contain only these characters :  "
    "(I, V, X, L, C, D, M) and (VX, LC, DM) are forbidden combinations"
)
THREE_CONSECUTIVE_REPETITION_RULE = (
    "The Roman numerals can not have more than 3 consecutive repetitions "
    "of these characters : (I, X, C, M)"
)
NO_REPETITION_RULE = (
    "The Roman numerals can not have more than 1 repetition on these characters : (V, L, D)"
)
COMPUTATION_RULE = "The Roman numerals can not have these two symbols in this order : "

REASON_SEPARATOR = ", "
