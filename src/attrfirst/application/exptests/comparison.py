"""Comparison and membership tests.

Every test here takes exactly one extra argument (the operand),
passed through the filter's trailing arguments.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Container
from typing import TYPE_CHECKING, ClassVar

from attrfirst.application.exptests._base import BaseExpTest
from attrfirst.domain.exceptions import InvalidArgumentTypeError
from attrfirst.domain.model.undefined import UNDEFINED

if TYPE_CHECKING:
    from attrfirst.domain.ports.interpreter import InterpreterProtocol


class _OrderingTest(BaseExpTest):
    """Binary comparison against the operand.

    Incomparable types fail with InvalidArgumentTypeError instead of
    silently evaluating to False. An UNDEFINED value (missing attribute in
    lenient mode) never satisfies an ordering.
    """

    op: ClassVar[Callable[[object, object], bool]]

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        other = self._operand(args, interpreter)
        try:
            return bool(type(self).op(value, other))
        except TypeError as exc:
            if value is UNDEFINED:
                return False
            raise InvalidArgumentTypeError(
                f"{self.name} test",
                "other",
                expected=f"value comparable with {type(value).__name__}",
                got=type(other),
                position=interpreter.position,
            ) from exc


class IsEqualTo(_OrderingTest):
    name = "equalto"
    op = operator.eq


class IsNotEqualTo(_OrderingTest):
    name = "ne"
    op = operator.ne


class IsLessThan(_OrderingTest):
    name = "lt"
    op = operator.lt


class IsLessThanOrEqual(_OrderingTest):
    name = "le"
    op = operator.le


class IsGreaterThan(_OrderingTest):
    name = "gt"
    op = operator.gt


class IsGreaterThanOrEqual(_OrderingTest):
    name = "ge"
    op = operator.ge


class IsSameAs(BaseExpTest):
    """Identity, not equality."""

    name = "sameas"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return value is self._operand(args, interpreter)


class IsContaining(BaseExpTest):
    """Value contains operand. Non-containers never match."""

    name = "containing"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        other = self._operand(args, interpreter)
        if not isinstance(value, Container):
            return False
        if isinstance(value, str) and not isinstance(other, str):
            return False
        return other in value


class IsIn(BaseExpTest):
    """Value is a member of operand."""

    name = "in"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        other = self._operand(args, interpreter)
        if not isinstance(other, Container):
            raise InvalidArgumentTypeError(
                f"{self.name} test",
                "other",
                expected="container",
                got=type(other),
                position=interpreter.position,
            )
        if isinstance(other, str) and not isinstance(value, str):
            return False
        return value in other


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class IsDivisibleBy(BaseExpTest):
    name = "divisibleby"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        other = self._operand(args, interpreter)
        if not _is_int(other) or other == 0:
            raise InvalidArgumentTypeError(
                f"{self.name} test",
                "other",
                expected="non-zero integer",
                got=type(other),
                position=interpreter.position,
            )
        return _is_int(value) and value % other == 0  # type: ignore[operator]


class IsEven(BaseExpTest):
    name = "even"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return _is_int(value) and value % 2 == 0  # type: ignore[operator]


class IsOdd(BaseExpTest):
    name = "odd"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return _is_int(value) and value % 2 == 1  # type: ignore[operator]
