"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: All NumeralService methods return ServiceResult.
A parse outcome keeps its full ParseResult fields in ``data`` whether
or not the numeral is valid.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the numeral was valid (or the operation succeeded).
        op: Name of the operation (``"parse"``, ``"validate"``, ``"compute"``).
        data: Operation-specific payload.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
