"""Render trace value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from attrfirst.domain.model.enums import RenderEventType
from attrfirst.domain.model.position import Position


@dataclass(frozen=True, slots=True)
class RenderEvent:
    """One start/end render notification.

    Attributes:
        event_type: START or END
        name: Rendered operation name (filter name)
        summary: Invocation summary, END only
        position: Evaluation position at notification time
    """

    event_type: RenderEventType
    name: str
    summary: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))
    position: Position | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.event_type is RenderEventType.START and self.summary:
            raise ValueError("START event must not carry a summary")


@dataclass(frozen=True, slots=True)
class TraceLog:
    """Snapshot of recorded render events.

    Attributes:
        events: Recorded events in notification order
        dropped: Events not recorded because of the configured limit
    """

    events: tuple[RenderEvent, ...] = ()
    dropped: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.dropped < 0:
            raise ValueError(f"dropped must be >= 0, got {self.dropped}")

    def named(self, name: str) -> tuple[RenderEvent, ...]:
        """Events for one operation name."""
        return tuple(e for e in self.events if e.name == name)

    def count(self, event_type: RenderEventType, name: str | None = None) -> int:
        """Count events of a type, optionally for one name."""
        return sum(
            1
            for e in self.events
            if e.event_type is event_type and (name is None or e.name == name)
        )

    @property
    def balanced(self) -> bool:
        """Check if every START has a matching END, properly nested."""
        stack: list[str] = []
        for event in self.events:
            if event.event_type is RenderEventType.START:
                stack.append(event.name)
            elif not stack or stack.pop() != event.name:
                return False
        return not stack
