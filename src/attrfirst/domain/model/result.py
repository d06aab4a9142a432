"""Filter invocation outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from attrfirst.domain.model.enums import FilterState

if TYPE_CHECKING:
    from attrfirst.domain.exceptions import FilterError
    from attrfirst.domain.model.enums import ErrorKind
    from attrfirst.domain.model.position import Position


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Terminal outcome of one filter invocation.

    MATCHED carries the first matching element, EXHAUSTED carries None,
    FAILED carries the error. "No match" is a success, never an error.

    Attributes:
        state: Terminal state
        value: Matching element (MATCHED) or None
        error: Failure (FAILED only)
        position: Evaluation position at invocation time
        scanned: Number of elements resolved and tested
    """

    state: FilterState
    value: object = None
    error: FilterError | None = None
    position: Position | None = None
    scanned: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.state.is_terminal:
            raise ValueError(f"state must be terminal, got {self.state.name}")
        if self.scanned < 0:
            raise ValueError(f"scanned must be >= 0, got {self.scanned}")
        if self.state is FilterState.FAILED:
            if self.error is None:
                raise ValueError("FAILED result requires an error")
        elif self.error is not None:
            raise ValueError(f"{self.state.name} result must not carry an error")
        if self.state is FilterState.EXHAUSTED and self.value is not None:
            raise ValueError("EXHAUSTED result must carry None")

    @classmethod
    def matched(cls, value: object, *, scanned: int, position: Position | None = None) -> FilterResult:
        """Create MATCHED result."""
        return cls(FilterState.MATCHED, value=value, position=position, scanned=scanned)

    @classmethod
    def exhausted(cls, *, scanned: int, position: Position | None = None) -> FilterResult:
        """Create EXHAUSTED result."""
        return cls(FilterState.EXHAUSTED, position=position, scanned=scanned)

    @classmethod
    def failed(cls, error: FilterError, *, scanned: int = 0, position: Position | None = None) -> FilterResult:
        """Create FAILED result. Error gets the position if it has none."""
        return cls(
            FilterState.FAILED,
            error=error.locate(position),
            position=position,
            scanned=scanned,
        )

    @property
    def ok(self) -> bool:
        """Check if invocation succeeded (match or no match)."""
        return self.state.is_success

    @property
    def error_kind(self) -> ErrorKind | None:
        """Failure tag, None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> object:
        """Return value on success, raise carried error on failure.

        Raises:
            FilterError: If state is FAILED.
        """
        if self.error is not None:
            raise self.error
        return self.value
