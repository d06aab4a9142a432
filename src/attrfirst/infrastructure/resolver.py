"""Property resolution: dot-path traversal over host objects.

Each path segment is tried, in order, as:
  1. mapping key
  2. integer index (sequences only, negative allowed)
  3. public attribute (names starting with "_" are never resolved)

A missing segment resolves to UNDEFINED (lenient) or raises
AttributeResolutionError (strict). Errors raised by property getters
always abort, wrapped in AttributeResolutionError with __cause__ kept.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from attrfirst.domain.exceptions import AttributeResolutionError
from attrfirst.domain.model.undefined import UNDEFINED


class _Missing(Exception):  # noqa: N818
    """Internal signal: segment not found on current object."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class PropertyResolver:
    """Resolve attribute paths on arbitrary objects.

    Stateless apart from the strict flag; safe to share across renders.
    """

    __slots__ = ("_strict",)

    def __init__(self, *, strict: bool = False) -> None:
        """Initialize resolver.

        Args:
            strict: Missing segments raise instead of resolving to UNDEFINED.
        """
        self._strict = strict

    @property
    def strict(self) -> bool:
        """Check if missing segments raise."""
        return self._strict

    def resolve(self, obj: object, attr: str) -> object:
        """Resolve attr path on obj.

        Args:
            obj: Root object (sequence element)
            attr: Dot-separated path, e.g. "author.name" or "tags.0"

        Returns:
            Resolved value, or UNDEFINED for a missing segment in lenient mode.

        Raises:
            AttributeResolutionError: Empty path, missing segment in strict
                mode, or getter failure.
        """
        if not attr:
            raise AttributeResolutionError(attr, type(obj), "empty attribute name")

        segments = attr.split(".")
        if any(not segment for segment in segments):
            raise AttributeResolutionError(attr, type(obj), "empty path segment")

        current = obj
        for segment in segments:
            try:
                current = self._step(current, segment)
            except _Missing as missing:
                if self._strict:
                    raise AttributeResolutionError(attr, type(obj), missing.reason) from None
                return UNDEFINED
            except AttributeResolutionError:
                raise
            # Getter failure: re-raised with the getter's exception as __cause__.
            except Exception as exc:  # noqa: BLE001
                reason = f"{type(exc).__name__} in {segment!r}: {exc}"
                raise AttributeResolutionError(attr, type(obj), reason) from exc
        return current

    def _step(self, current: object, segment: str) -> object:
        """Resolve one segment. Raises _Missing if absent."""
        if current is None or current is UNDEFINED:
            raise _Missing(f"{segment!r} looked up on {current!r}")

        if isinstance(current, Mapping):
            if segment in current:
                return current[segment]
            raise _Missing(f"no key {segment!r} in {type(current).__name__}")

        if isinstance(current, Sequence) and not isinstance(current, str | bytes):
            index = _parse_index(segment)
            if index is not None:
                try:
                    return current[index]
                except IndexError:
                    raise _Missing(f"index {index} out of range") from None

        if segment.startswith("_"):
            raise _Missing(f"private attribute {segment!r} is not resolvable")

        try:
            return getattr(current, segment)
        except AttributeError:
            raise _Missing(f"no attribute {segment!r} on {type(current).__name__}") from None


def _parse_index(segment: str) -> int | None:
    """Integer index from segment, None if not an integer."""
    digits = segment[1:] if segment.startswith("-") else segment
    if not digits.isdecimal():
        return None
    return int(segment)
