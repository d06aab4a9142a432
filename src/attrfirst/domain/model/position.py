"""Evaluation position value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Position of the expression being rendered.

    Attached to every filter outcome for user-facing diagnostics.

    Attributes:
        line: Template line number (1-based, must be > 0)
        column: Start column within the line (0-based, must be >= 0)
    """

    line: int
    column: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Format as 'line N' or 'line N, column M'."""
        if self.column:
            return f"line {self.line}, column {self.column}"
        return f"line {self.line}"
