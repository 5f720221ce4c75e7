"""NumeralService — wraps validation, evaluation, and parsing in ServiceResult.

The core functions return :class:`ParseResult` values and never raise for
a bad numeral. This service adapts those values to the ServiceResult
contract consumed by the CLI, and maps the missing-argument precondition
to an error result.
"""

from __future__ import annotations

import logging
from typing import Any

from romanparse.config.models import ParserConfig
from romanparse.domain.result import ParseResult
from romanparse.services.evaluation import compute_without_vinculum
from romanparse.services.parsing import parse
from romanparse.services.result import ServiceError, ServiceResult
from romanparse.services.telemetry import trace_span, traced
from romanparse.services.validation import validate

logger = logging.getLogger(__name__)


class NumeralService:
    """Service-layer entry point for Roman numeral operations.

    Usage::

        svc = NumeralService()
        result = svc.parse("XXIX", vinculum="CXVII")
        assert result.data["value"] == 117029
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()

    def _normalize(self, numeral: str | None) -> str | None:
        if numeral is None or not self._config.case_insensitive:
            return numeral
        return numeral.upper()

    @traced
    def parse(self, numeral: str | None, vinculum: str | None = None) -> ServiceResult:
        """Parse *numeral* combined with an optional *vinculum* numeral."""
        op = "parse"
        numeral = self._normalize(numeral)
        vinculum = self._normalize(vinculum)
        try:
            with trace_span("parse_numeral") as span:
                outcome = parse(numeral, vinculum)  # type: ignore[arg-type]
                if span:
                    span.annotate("validity", str(outcome.validity))
        except ValueError as exc:
            return _missing_numeral(op, str(exc))
        return _to_service_result(op, outcome, numeral=numeral, vinculum=vinculum)

    @traced
    def validate(self, numeral: str | None) -> ServiceResult:
        """Check *numeral* against the form rules only."""
        numeral = self._normalize(numeral)
        if numeral is None:
            return _missing_numeral("validate")
        with trace_span("validate_numeral"):
            outcome = validate(numeral)
        if outcome is None:
            # Passing validation says nothing about the value yet.
            return ServiceResult(
                ok=True,
                op="validate",
                data={"numeral": numeral, "validity": "valid", "invalidity_reason": None},
            )
        return _to_service_result("validate", outcome, numeral=numeral)

    @traced
    def compute(self, numeral: str | None) -> ServiceResult:
        """Compute *numeral* without form validation or vinculum."""
        op = "compute"
        numeral = self._normalize(numeral)
        if numeral is None:
            return _missing_numeral(op)
        try:
            with trace_span("compute_numeral"):
                outcome = compute_without_vinculum(numeral)
        except KeyError as exc:
            logger.debug("Unknown symbol in %s", numeral, exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                data={"numeral": numeral},
                error=ServiceError(
                    code="UNKNOWN_SYMBOL",
                    message=f"Unknown Roman symbol: {exc.args[0]}",
                    detail={"symbol": exc.args[0]},
                ),
            )
        return _to_service_result(op, outcome, numeral=numeral)


def _missing_numeral(op: str, message: str = "numeral is required") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="MISSING_ARGUMENT", message=message),
    )


def _to_service_result(op: str, outcome: ParseResult, **inputs: Any) -> ServiceResult:
    """Map a ParseResult onto the ServiceResult contract."""
    data: dict[str, Any] = {
        **inputs,
        "value": outcome.value,
        "validity": str(outcome.validity),
        "invalidity_reason": outcome.invalidity_reason,
    }
    if outcome.is_valid:
        return ServiceResult(ok=True, op=op, data=data)
    return ServiceResult(
        ok=False,
        op=op,
        data=data,
        error=ServiceError(
            code="INVALID_NUMERAL",
            message=outcome.invalidity_reason or "Invalid numeral",
        ),
    )
