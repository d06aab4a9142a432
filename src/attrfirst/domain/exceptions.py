"""Domain exceptions: all public errors of attrfirst.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from attrfirst.domain.model.enums import ErrorKind

if TYPE_CHECKING:
    from attrfirst.domain.model.position import Position


class AttrFirstError(Exception):
    """Base for all attrfirst error exceptions.

    Allows: except AttrFirstError to catch all library errors.
    """


class FilterError(AttrFirstError):
    """Failure that aborts a filter invocation.

    Never downgraded to a "no match" result. Carries a kind tag and the
    evaluation position of the expression being rendered.

    Attributes:
        kind: Failure category.
        message: Message without position suffix.
        position: Where the failing expression sits. None until located.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        """Initialize with message and optional position."""
        self.message = message
        self.position = position
        super().__init__(message)

    def locate(self, position: Position | None) -> Self:
        """Attach position if none is known yet. Returns self for raise chaining."""
        if self.position is None:
            self.position = position
        return self

    def __str__(self) -> str:
        """Message with position suffix when known."""
        if self.position is None:
            return self.message
        return f"{self.message} ({self.position})"


class MissingArgumentError(FilterError, TypeError):
    """Required positional argument absent.

    Attributes:
        name: Filter or test that requires the argument.
        argument: Missing argument name.
    """

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, name: str, argument: str, *, position: Position | None = None) -> None:
        """Initialize with owner name and argument name."""
        self.name = name
        self.argument = argument
        super().__init__(f"{name} requires the {argument!r} argument", position=position)


class InvalidArgumentTypeError(FilterError, TypeError):
    """Argument present but of the wrong type.

    Attributes:
        name: Filter or test that received the argument.
        argument: Argument name.
        expected: Description of expected type.
        got: Actual type received.
    """

    kind = ErrorKind.INVALID_ARGUMENT_TYPE

    def __init__(
        self,
        name: str,
        argument: str,
        *,
        expected: str,
        got: type,
        position: Position | None = None,
    ) -> None:
        """Initialize with owner, argument, expected and actual type."""
        self.name = name
        self.argument = argument
        self.expected = expected
        self.got = got
        super().__init__(
            f"{name} requires the {argument} arg to be a {expected}, got {got.__name__}",
            position=position,
        )


class UnknownExpTestError(FilterError, LookupError):
    """No expression test registered under the requested name.

    Attributes:
        test_name: Requested name.
    """

    kind = ErrorKind.UNKNOWN_EXP_TEST

    def __init__(self, test_name: str, *, position: Position | None = None) -> None:
        """Initialize with requested test name."""
        self.test_name = test_name
        super().__init__(f"No expression test defined with name '{test_name}'", position=position)


class NotIterableError(FilterError, TypeError):
    """Input cannot be adapted to a sequence.

    Attributes:
        got: Type of the rejected input.
    """

    kind = ErrorKind.NOT_ITERABLE

    def __init__(self, got: type, *, position: Position | None = None) -> None:
        """Initialize with rejected input type."""
        self.got = got
        super().__init__(f"Cannot iterate over value of type {got.__name__}", position=position)


class AttributeResolutionError(FilterError, LookupError):
    """Attribute lookup failed on a specific element.

    Attributes:
        attr: Attribute path being resolved.
        element_type: Type of the element the lookup started from.
        reason: Why resolution failed.
    """

    kind = ErrorKind.ATTRIBUTE_RESOLUTION

    def __init__(
        self,
        attr: str,
        element_type: type,
        reason: str,
        *,
        position: Position | None = None,
    ) -> None:
        """Initialize with attribute path, element type and reason."""
        self.attr = attr
        self.element_type = element_type
        self.reason = reason
        super().__init__(
            f"Cannot resolve '{attr}' on {element_type.__name__}: {reason}",
            position=position,
        )


class DuplicateExpTestError(AttrFirstError, ValueError):
    """Expression test name already registered.

    Attributes:
        test_name: Duplicated name.
    """

    def __init__(self, test_name: str) -> None:
        """Initialize with duplicated name."""
        self.test_name = test_name
        super().__init__(f"expression test {test_name!r} already registered")


class FrozenRegistryError(AttrFirstError, RuntimeError):
    """Registry is frozen, registration happens before rendering only."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("registry is frozen, cannot register")


class DuplicateFilterError(AttrFirstError, ValueError):
    """Filter name already registered.

    Attributes:
        filter_name: Duplicated name.
    """

    def __init__(self, filter_name: str) -> None:
        """Initialize with duplicated name."""
        self.filter_name = filter_name
        super().__init__(f"filter {filter_name!r} already registered")


class UnknownFilterError(AttrFirstError, LookupError):
    """No filter registered under the requested name.

    Attributes:
        filter_name: Requested name.
    """

    def __init__(self, filter_name: str) -> None:
        """Initialize with requested name."""
        self.filter_name = filter_name
        super().__init__(f"No filter defined with name '{filter_name}'")
