"""Filter engine configuration.

Immutable DTO consumed by the interpreter. None = feature disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Interpreter configuration with FAIL-FIRST validation.

    Attributes:
        default_exp_test: Test used when a filter gets no test name.
        strict_properties: Missing attributes raise instead of resolving
            to UNDEFINED.
        trace: Record start/end render notifications.
        max_trace_events: Max recorded events. None = unlimited.
    """

    default_exp_test: str = "truthy"
    strict_properties: bool = False
    trace: bool = True
    max_trace_events: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.default_exp_test, str) or not self.default_exp_test:
            raise ValueError("default_exp_test must be a non-empty string")
        if self.max_trace_events is not None and self.max_trace_events < 1:
            raise ValueError(f"max_trace_events must be >= 1, got {self.max_trace_events}")
