"""Operation timing for TimeService: Span, @traced, trace_span, annotate.

Disabled by default: each traced call then costs one ContextVar lookup.
With ``--verbose`` every service operation records a span tree.  The root
span is named after the method (``TimeService.shift``), and carries the
resolved unit or field and the outcome.  The tree lands in
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog

from wallclock.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("wallclock_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("wallclock_active_span", default=None)


@dataclass
class Span:
    """One timed step of a service operation."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def finish(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, **values: Any) -> None:
        self.annotations.update(values)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def enable_telemetry() -> None:
    """Record spans for service calls made from this context."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def annotate(**values: Any) -> None:
    """Attach *values* to the active span; a no-op when nothing is traced."""
    span = _active.get() if _enabled.get() else None
    if span is not None:
        span.annotate(**values)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a step inside a traced operation.

    Yields None when telemetry is off or no operation is being traced.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name)
    parent.children.append(child)
    token = _active.set(child)
    try:
        yield child
    finally:
        child.finish()
        _active.reset(token)


def traced[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Record a root span around a service method.

    A returned :class:`ServiceResult` gets the span tree in ``meta`` and the
    root span is tagged with the op name and, on failure, the error code.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        token = _active.set(root)
        try:
            result = func(*args, **kwargs)
        finally:
            root.finish()
            _active.reset(token)

        if isinstance(result, ServiceResult):
            root.annotate(op=result.op)
            if result.error is not None:
                root.annotate(code=result.error.code)
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            result = result.model_copy(update={"meta": meta})  # type: ignore[assignment]

        structlog.get_logger("wallclock.telemetry").debug(
            "service.op",
            span=root.name,
            duration_ms=round(root.duration_ms, 3),
            **root.annotations,
        )
        return result

    return wrapper
