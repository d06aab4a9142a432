"""Interpreter protocol: host collaborators consumed by filters.

The template engine provides attribute resolution, test lookup,
render tracing and the current evaluation position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from attrfirst.domain.model.position import Position
    from attrfirst.domain.ports.exp_test import ExpTestProtocol


class InterpreterProtocol(Protocol):
    """Contract for the host interpreter.

    Filters never construct tests or walk object graphs themselves;
    everything goes through this interface.
    """

    @property
    def position(self) -> Position | None:
        """Position of the expression being rendered."""
        ...

    def resolve_property(self, obj: object, attr: str) -> object:
        """Resolve attribute path on obj.

        Raises:
            AttributeResolutionError: If resolution fails.
        """
        ...

    def get_exp_test(self, name: str) -> ExpTestProtocol | None:
        """Look up expression test by exact name. None if unregistered."""
        ...

    def default_exp_test(self) -> str:
        """Name of the test used when a filter gets none."""
        ...

    def start_render(self, name: str) -> None:
        """Notify start of a traced render region."""
        ...

    def end_render(self, name: str, summary: Mapping[str, object]) -> None:
        """Notify end of a traced render region."""
        ...
