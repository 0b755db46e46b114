"""Timing telemetry — TimingSpan, @traced, trace_span.

Disabled by default; a single ContextVar lookup per call.  When enabled
via ``--verbose``, service calls build a span tree that is attached to
``ServiceResult.meta["telemetry"]`` and logged as ``span.complete``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from notelinks.services.result import ServiceResult

log = structlog.get_logger("notelinks.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_active: ContextVar[TimingSpan | None] = ContextVar("_active", default=None)


@dataclass
class TimingSpan:
    """One timed step, possibly with nested child steps."""

    name: str
    children: list[TimingSpan] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = self.annotations
        if self.children:
            out["children"] = [c.to_dict() for c in self.children]
        return out


@contextmanager
def trace_span(name: str) -> Generator[TimingSpan | None]:
    """Time a child step under the active span.

    Yields None when telemetry is disabled or no span is active.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = TimingSpan(name=name)
    parent.children.append(child)
    token = _active.set(child)
    try:
        yield child
    finally:
        child.end()
        _active.reset(token)


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: time a service method and attach the span tree to its result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = TimingSpan(name=func.__qualname__)
        token = _active.set(span)
        ok = False
        try:
            result = func(*args, **kwargs)
            ok = True
        finally:
            span.end()
            _active.reset(token)
            log.debug(
                "span.complete",
                span_name=span.name,
                duration_ms=round(span.duration_ms, 2),
                ok=ok,
                children=len(span.children),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": span.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Enable verbose telemetry (called by AppContext at startup)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    """Disable verbose telemetry."""
    _enabled.set(False)
