"""Expression test registry.

Name-keyed lookup shared by all renders of an interpreter.
Registration happens before rendering; freeze() makes it read-only.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from attrfirst.application.exptests.comparison import (
    IsContaining,
    IsDivisibleBy,
    IsEqualTo,
    IsEven,
    IsGreaterThan,
    IsGreaterThanOrEqual,
    IsIn,
    IsLessThan,
    IsLessThanOrEqual,
    IsNotEqualTo,
    IsOdd,
    IsSameAs,
)
from attrfirst.application.exptests.truthiness import (
    IsDefined,
    IsFalsy,
    IsNone,
    IsTruthy,
    IsUndefined,
)
from attrfirst.application.exptests.type_tests import (
    IsIterable,
    IsLower,
    IsMapping,
    IsNumber,
    IsSequence,
    IsString,
    IsUpper,
)
from attrfirst.domain.exceptions import DuplicateExpTestError, FrozenRegistryError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from attrfirst.domain.ports.exp_test import ExpTestProtocol

LOGGER = logging.getLogger(__name__)


# Registry - tuple for immutability
# (test, aliases) in registration order
_BUILTIN_TESTS: tuple[tuple[ExpTestProtocol, tuple[str, ...]], ...] = (
    (IsTruthy(), ()),
    (IsFalsy(), ()),
    (IsDefined(), ()),
    (IsUndefined(), ()),
    (IsNone(), ()),
    (IsString(), ()),
    (IsNumber(), ()),
    (IsMapping(), ()),
    (IsIterable(), ()),
    (IsSequence(), ()),
    (IsLower(), ()),
    (IsUpper(), ()),
    (IsEqualTo(), ("eq", "==")),
    (IsNotEqualTo(), ("!=",)),
    (IsLessThan(), ("<", "lessthan")),
    (IsLessThanOrEqual(), ("<=",)),
    (IsGreaterThan(), (">", "greaterthan")),
    (IsGreaterThanOrEqual(), (">=",)),
    (IsSameAs(), ()),
    (IsContaining(), ()),
    (IsIn(), ()),
    (IsDivisibleBy(), ()),
    (IsEven(), ()),
    (IsOdd(), ()),
)


class ExpTestRegistry:
    """Mutable-until-frozen mapping of test names to tests.

    Lookup is by exact name. Aliases map to the same test instance.
    After freeze() the registry is safe to share across concurrent renders.
    """

    __slots__ = ("_frozen", "_tests")

    def __init__(self) -> None:
        """Initialize empty, unfrozen registry."""
        self._tests: dict[str, ExpTestProtocol] = {}
        self._frozen = False

    def register(self, test: ExpTestProtocol, *aliases: str) -> None:
        """Register test under its name and optional aliases.

        Raises:
            FrozenRegistryError: If registry is frozen.
            DuplicateExpTestError: If any name is already taken.
        """
        if self._frozen:
            raise FrozenRegistryError
        names = (test.name, *aliases)
        for name in names:
            if not name:
                raise ValueError("test name must not be empty")
            if name in self._tests:
                raise DuplicateExpTestError(name)
        for name in names:
            self._tests[name] = test
        LOGGER.debug("Registered expression test %s as %s", type(test).__name__, names)

    def get(self, name: str) -> ExpTestProtocol | None:
        """Look up test by exact name. None if unregistered."""
        return self._tests.get(name)

    def names(self) -> tuple[str, ...]:
        """All registered names, sorted."""
        return tuple(sorted(self._tests))

    def freeze(self) -> ExpTestRegistry:
        """Forbid further registration. Returns self."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        """Check if registration is closed."""
        return self._frozen

    def as_mapping(self) -> Mapping[str, ExpTestProtocol]:
        """Read-only view of name -> test."""
        return MappingProxyType(self._tests)

    def __contains__(self, name: object) -> bool:
        return name in self._tests

    def __len__(self) -> int:
        return len(self._tests)


def default_exp_tests(*, frozen: bool = True) -> ExpTestRegistry:
    """Registry with all built-in tests.

    Args:
        frozen: Freeze before returning. Pass False to add custom tests.

    Returns:
        ExpTestRegistry
    """
    registry = ExpTestRegistry()
    for test, aliases in _BUILTIN_TESTS:
        registry.register(test, *aliases)
    if frozen:
        registry.freeze()
    return registry
