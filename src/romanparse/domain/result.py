"""ParseResult — the single output type of validation, evaluation, and parsing.

Validity is an explicit three-way outcome so that "not yet classified"
can never be confused with "known invalid".

INVARIANT: ``invalidity_reason`` is set iff the result is INVALID,
and ``value`` is set iff the result is VALID.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator


class Validity(StrEnum):
    """Classification outcome of a numeral."""

    VALID = "valid"
    INVALID = "invalid"
    UNDETERMINED = "undetermined"


class ParseResult(BaseModel):
    """Immutable outcome of validating or computing a Roman numeral.

    Attributes:
        value: Integer value, present only when the numeral is valid.
        validity: Three-way classification of the numeral.
        invalidity_reason: Comma-separated descriptions of every violated
            rule, present only when the numeral is invalid.
    """

    model_config = {"frozen": True}

    value: int | None = None
    validity: Validity = Validity.UNDETERMINED
    invalidity_reason: str | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> ParseResult:
        if (self.invalidity_reason is not None) != (self.validity is Validity.INVALID):
            msg = "invalidity_reason must be set exactly when validity is INVALID"
            raise ValueError(msg)
        if (self.value is not None) != (self.validity is Validity.VALID):
            msg = "value must be set exactly when validity is VALID"
            raise ValueError(msg)
        return self

    @classmethod
    def valid(cls, value: int) -> ParseResult:
        return cls(value=value, validity=Validity.VALID)

    @classmethod
    def invalid(cls, reason: str) -> ParseResult:
        return cls(validity=Validity.INVALID, invalidity_reason=reason)

    @classmethod
    def undetermined(cls) -> ParseResult:
        return cls()

    @property
    def is_valid(self) -> bool | None:
        """Boolean view of :attr:`validity`; None while undetermined."""
        if self.validity is Validity.UNDETERMINED:
            return None
        return self.validity is Validity.VALID

    def __str__(self) -> str:
        return (
            f"ParseResult(value={self.value}, validity={self.validity}, "
            f"invalidity_reason={self.invalidity_reason})"
        )
