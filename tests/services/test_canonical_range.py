"""Every canonical numeral from 1 to 3999 through the validator and evaluator."""

from __future__ import annotations

import pytest

from romanparse.domain.rules import has_repeated_non_repeatable
from romanparse.domain.symbols import NO_REPETITION_RULE
from romanparse.services.evaluation import compute_without_vinculum
from romanparse.services.parsing import parse
from romanparse.services.validation import validate

_PLACES = (
    ("M", 1000), ("CM", 900), ("D", 500), ("CD", 400), ("C", 100), ("XC", 90),
    ("L", 50), ("XL", 40), ("X", 10), ("IX", 9), ("V", 5), ("IV", 4), ("I", 1),
)


def _to_roman(number: int) -> str:
    out = ""
    for symbols, value in _PLACES:
        count, number = divmod(number, value)
        out += symbols * count
    return out


CANONICAL = {number: _to_roman(number) for number in range(1, 4000)}
REJECTED = {n: r for n, r in CANONICAL.items() if validate(r) is not None}


def test_compute_matches_every_canonical_value() -> None:
    wrong = {n: r for n, r in CANONICAL.items() if compute_without_vinculum(r).value != n}
    assert wrong == {}


def test_compute_never_trips_adjacency_guard() -> None:
    assert all(compute_without_vinculum(r).is_valid for r in CANONICAL.values())


def test_validate_rejects_only_adjacent_v_l_d() -> None:
    """V/L/D pairs like the LV in XLV count as a repetition; nothing else fires."""
    assert len(REJECTED) == 384
    assert sorted(REJECTED)[:8] == [45, 46, 47, 48, 55, 56, 57, 58]
    for numeral in REJECTED.values():
        assert has_repeated_non_repeatable(numeral)
        assert validate(numeral).invalidity_reason == NO_REPETITION_RULE  # type: ignore[union-attr]


def test_accepted_canonical_numerals_parse() -> None:
    for number, numeral in CANONICAL.items():
        if number in REJECTED:
            continue
        assert parse(numeral).value == number


@pytest.mark.parametrize("numeral", ["XLV", "LV", "DL", "MDLV", "CDL"])
def test_mixed_v_l_d_runs_rejected(numeral: str) -> None:
    assert validate(numeral) is not None
