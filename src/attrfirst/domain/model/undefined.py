"""UNDEFINED sentinel for lenient property resolution."""

from __future__ import annotations

from typing import Final, final


@final
class Undefined:
    """Value of a missing attribute in lenient mode.

    Singleton. Falsy, so the truthy test treats it as no match.
    Distinct from None: None is a present value.
    """

    __slots__ = ()
    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        """Return the single instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        """Always falsy."""
        return False

    def __repr__(self) -> str:
        """Fixed representation."""
        return "UNDEFINED"


UNDEFINED: Final = Undefined()
