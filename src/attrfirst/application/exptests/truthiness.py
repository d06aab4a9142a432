"""Truthiness and definedness tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrfirst.application.exptests._base import BaseExpTest
from attrfirst.domain.model.undefined import UNDEFINED

if TYPE_CHECKING:
    from attrfirst.domain.ports.interpreter import InterpreterProtocol


class IsTruthy(BaseExpTest):
    """Python truthiness. Default test of attribute filters."""

    name = "truthy"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return bool(value)


class IsFalsy(BaseExpTest):
    """Negated truthiness. UNDEFINED is falsy."""

    name = "falsy"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return not value


class IsDefined(BaseExpTest):
    """Value resolved to something other than UNDEFINED. None counts as defined."""

    name = "defined"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return value is not UNDEFINED


class IsUndefined(BaseExpTest):
    name = "undefined"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return value is UNDEFINED


class IsNone(BaseExpTest):
    name = "none"

    def evaluate(self, value: object, interpreter: InterpreterProtocol, *args: object) -> bool:
        return value is None
