"""Base expression test class.

Provides default implementation of ExpTestProtocol.
Concrete tests inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from attrfirst.domain.exceptions import MissingArgumentError

if TYPE_CHECKING:
    from attrfirst.domain.ports.interpreter import InterpreterProtocol


class BaseExpTest(ABC):
    """Base class for tests implementing ExpTestProtocol.

    Concrete tests must:
    1. Set `name` class attribute
    2. Implement `evaluate()` method

    Example:
        class IsPositive(BaseExpTest):
            name = "positive"

            def evaluate(self, value, interpreter, *args):
                return isinstance(value, int | float) and value > 0
    """

    __slots__ = ()

    name: str
    """Registry key."""

    @abstractmethod
    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        """Evaluate test on a resolved value.

        Args:
            value: Resolved attribute value
            interpreter: Current interpreter
            *args: Extra arguments, verbatim and in order

        Returns:
            True if value passes the test
        """

    def _operand(self, args: tuple[object, ...], interpreter: InterpreterProtocol) -> object:
        """Single required extra argument.

        Raises:
            MissingArgumentError: If no argument given.
        """
        if not args:
            raise MissingArgumentError(f"{self.name} test", "other", position=interpreter.position)
        return args[0]

    def __repr__(self) -> str:
        """Format as ClassName('name')."""
        return f"{type(self).__name__}({self.name!r})"
