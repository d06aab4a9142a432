"""Render tracing: start/end notifications recorded as RenderEvent.

Every notification is also logged at DEBUG level on this module's logger.
Thread-safe: one lock protects the event buffer.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from types import MappingProxyType
from typing import TYPE_CHECKING

from attrfirst.domain.model.enums import RenderEventType
from attrfirst.domain.model.trace import RenderEvent, TraceLog

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from attrfirst.domain.model.position import Position
    from attrfirst.domain.ports.interpreter import InterpreterProtocol

LOGGER = logging.getLogger(__name__)


class RenderTracer:
    """Records render notifications.

    Contracts:
      - Notification order preserved
      - At most max_events recorded; the rest are counted as dropped
      - enabled=False keeps logging, skips recording
    """

    __slots__ = ("_dropped", "_enabled", "_events", "_lock", "_max_events")

    def __init__(self, *, enabled: bool = True, max_events: int | None = None) -> None:
        """Initialize tracer.

        Args:
            enabled: Record events. Logging happens regardless.
            max_events: Max recorded events. None = unlimited.
        """
        if max_events is not None and max_events < 1:
            raise ValueError(f"max_events must be >= 1, got {max_events}")
        self._enabled = enabled
        self._max_events = max_events
        self._events: list[RenderEvent] = []
        self._dropped = 0
        self._lock = threading.Lock()

    def start(self, name: str, position: Position | None = None) -> None:
        """Record START notification."""
        LOGGER.debug("render start %s at %s", name, position)
        self._record(RenderEvent(RenderEventType.START, name, position=position))

    def end(
        self,
        name: str,
        summary: Mapping[str, object],
        position: Position | None = None,
    ) -> None:
        """Record END notification with invocation summary."""
        LOGGER.debug("render end %s at %s: %s", name, position, summary)
        frozen = MappingProxyType(dict(summary))
        self._record(RenderEvent(RenderEventType.END, name, summary=frozen, position=position))

    def snapshot(self) -> TraceLog:
        """Immutable copy of everything recorded so far."""
        with self._lock:
            return TraceLog(events=tuple(self._events), dropped=self._dropped)

    def clear(self) -> None:
        """Forget recorded events."""
        with self._lock:
            self._events.clear()
            self._dropped = 0

    def _record(self, event: RenderEvent) -> None:
        if not self._enabled:
            return
        with self._lock:
            if self._max_events is not None and len(self._events) >= self._max_events:
                self._dropped += 1
                return
            self._events.append(event)


@contextmanager
def render_scope(
    interpreter: InterpreterProtocol,
    name: str,
    summary: Mapping[str, object] | None = None,
) -> Iterator[None]:
    """Wrap a block in start/end render notifications.

    END fires exactly once, on normal exit and on exceptions.

    Usage:
        with render_scope(interpreter, "myfilter", {"attr": "x"}):
            ...
    """
    interpreter.start_render(name)
    try:
        yield
    finally:
        interpreter.end_render(name, summary if summary is not None else {})
