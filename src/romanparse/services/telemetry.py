"""Timing for ``romanparse -v``.

Each NumeralService call becomes a root span; the validate / compute /
parse step inside it becomes a child span annotated with the outcome.
The finished tree lands in ``ServiceResult.meta["telemetry"]`` and is
rendered by the formatter as ``duration_ms``.

Disabled (the default), every hook is a single ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec

import structlog

from romanparse.services.result import ServiceResult

log = structlog.get_logger("romanparse.telemetry")

_enabled: ContextVar[bool] = ContextVar("romanparse_telemetry", default=False)
_current_span: ContextVar[Span | None] = ContextVar("romanparse_span", default=None)


@dataclass
class Span:
    """One timed step of a numeral operation."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        return 0.0 if self.finished is None else (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


@contextmanager
def _open_span(name: str) -> Iterator[Span]:
    """Make a new span current, nested under the active one if any."""
    span = Span(name=name)
    parent = _current_span.get()
    if parent is not None:
        parent.children.append(span)
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a step inside a traced service call.

    Yields None when telemetry is off or no service call is being traced,
    so callers guard annotations with ``if span:``.
    """
    if not _enabled.get() or _current_span.get() is None:
        yield None
        return
    with _open_span(name) as span:
        yield span


_P = ParamSpec("_P")


def traced(func: Callable[_P, ServiceResult]) -> Callable[_P, ServiceResult]:
    """Decorator for NumeralService methods: attach the span tree to ``meta``."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return func(*args, **kwargs)

        with _open_span(func.__qualname__) as span:
            result = func(*args, **kwargs)
        log.debug(
            "numeral.timed",
            op=result.op,
            ok=result.ok,
            duration_ms=round(span.duration_ms, 3),
        )
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper


def enable_telemetry() -> None:
    """Turn timing on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
