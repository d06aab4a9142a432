"""Base filter class.

Provides default implementation of FilterProtocol.
Concrete filters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from attrfirst.domain.model.doc import FilterDoc
    from attrfirst.domain.ports.interpreter import InterpreterProtocol


class BaseFilter(ABC):
    """Base class for filters implementing FilterProtocol.

    Concrete filters must:
    1. Set `name` and `doc` class attributes
    2. Implement `filter()` method

    Filters are stateless: one instance serves every render.
    """

    name: ClassVar[str]
    """Name used in templates."""

    doc: ClassVar[FilterDoc]
    """Published documentation."""

    @abstractmethod
    def filter(
        self,
        var: object,
        interpreter: InterpreterProtocol,
        args: Sequence[object],
        kwargs: Mapping[str, object],
    ) -> object:
        """Apply filter to var.

        Args:
            var: Value left of the pipe
            interpreter: Current interpreter
            args: Positional filter arguments
            kwargs: Named filter arguments

        Returns:
            Filtered value
        """

    @property
    def label(self) -> str:
        """Owner label used in error messages."""
        return f"{self.name} filter"

    @staticmethod
    def summarize(args: Sequence[object], kwargs: Mapping[str, object]) -> dict[str, object]:
        """Invocation summary for end-of-render notifications.

        Positional arguments rendered as one bracketed, comma-separated string.
        """
        return {
            "attr": "[" + ", ".join(str(arg) for arg in args) + "]",
            "kwargs": dict(kwargs),
        }

    def __repr__(self) -> str:
        """Format as ClassName('name')."""
        return f"{type(self).__name__}({self.name!r})"
