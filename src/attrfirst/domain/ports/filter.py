"""Filter protocol: contract for template filters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from attrfirst.domain.model.doc import FilterDoc
    from attrfirst.domain.ports.interpreter import InterpreterProtocol


class FilterProtocol(Protocol):
    """Contract for filters invoked by the host engine.

    Filters receive positional arguments as written in the template and
    named arguments as a mapping. Errors are raised as FilterError.
    """

    @property
    def name(self) -> str:
        """Name used in templates."""
        ...

    @property
    def doc(self) -> FilterDoc:
        """Published documentation."""
        ...

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
        ...
