"""Tests for the Evaluator."""

import pytest

from romanparse.domain.result import Validity
from romanparse.domain.symbols import COMPUTATION_RULE
from romanparse.services.evaluation import compute_without_vinculum


class TestComputeWithoutVinculum:
    @pytest.mark.parametrize(
        "numeral, expected",
        [
            ("", 0),
            ("I", 1),
            ("III", 3),
            ("IV", 4),
            ("IX", 9),
            ("XIV", 14),
            ("XXIX", 29),
            ("XL", 40),
            ("XC", 90),
            ("CXVII", 117),
            ("CD", 400),
            ("CM", 900),
            ("MCMXCIV", 1994),
            ("MMXXV", 2025),
            ("MMMDCCCLXXXVIII", 3888),
        ],
    )
    def test_values(self, numeral: str, expected: int) -> None:
        result = compute_without_vinculum(numeral)
        assert result.validity is Validity.VALID
        assert result.value == expected
        assert result.invalidity_reason is None

    def test_adjacency_guard(self) -> None:
        result = compute_without_vinculum("IM")
        assert result.is_valid is False
        assert result.value is None
        assert result.invalidity_reason == COMPUTATION_RULE + "IM"

    @pytest.mark.parametrize(
        "numeral, pair",
        [("IC", "IC"), ("IL", "IL"), ("XD", "XD"), ("MCXM", "XM"), ("VIIIM", "IM")],
    )
    def test_guard_names_first_offending_pair(self, numeral: str, pair: str) -> None:
        result = compute_without_vinculum(numeral)
        assert result.is_valid is False
        assert result.invalidity_reason is not None
        assert result.invalidity_reason.endswith(pair)

    def test_ten_times_is_allowed(self) -> None:
        """CM is 1000 after 100: exactly ten times, not more."""
        assert compute_without_vinculum("CM").value == 900

    def test_stops_at_first_failure(self) -> None:
        result = compute_without_vinculum("IMIC")
        assert result.invalidity_reason == COMPUTATION_RULE + "IM"

    def test_embedded_run_is_summed(self) -> None:
        assert compute_without_vinculum("IIIIV").value == 7

    def test_idempotent(self) -> None:
        assert compute_without_vinculum("XXIX") == compute_without_vinculum("XXIX")
