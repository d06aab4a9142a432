"""Domain enums."""

from enum import Enum, auto


class ErrorKind(Enum):
    """Tag carried by every filter failure.

    Lets callers branch on the failure category without isinstance chains.
    """

    MISSING_ARGUMENT = auto()
    INVALID_ARGUMENT_TYPE = auto()
    UNKNOWN_EXP_TEST = auto()
    NOT_ITERABLE = auto()
    ATTRIBUTE_RESOLUTION = auto()


class FilterState(Enum):
    """States of a single filter invocation.

    Strict order: VALIDATING -> RESOLVING -> SCANNING -> terminal.
    MATCHED and EXHAUSTED are successes, FAILED is reachable from
    each of the three working states.
    """

    VALIDATING = "VALIDATING"
    RESOLVING = "RESOLVING"
    SCANNING = "SCANNING"
    MATCHED = "MATCHED"
    EXHAUSTED = "EXHAUSTED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is possible."""
        return self in _TERMINAL_STATES

    @property
    def is_success(self) -> bool:
        """Check if state is a non-error terminal state."""
        return self in (FilterState.MATCHED, FilterState.EXHAUSTED)


_TERMINAL_STATES = frozenset({FilterState.MATCHED, FilterState.EXHAUSTED, FilterState.FAILED})


class RenderEventType(Enum):
    """Render trace notification types."""

    START = "START"
    END = "END"
