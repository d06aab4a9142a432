"""Filter library: name -> filter lookup for the host engine.

Central registry of built-in filters with a factory function.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from attrfirst.application.filters.select_attr_first import SelectAttrFirstFilter
from attrfirst.domain.exceptions import DuplicateFilterError, UnknownFilterError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from attrfirst.domain.model.doc import FilterDoc
    from attrfirst.domain.ports.filter import FilterProtocol


# Registry - tuple for immutability
_ALL_FILTERS: tuple[type[SelectAttrFirstFilter], ...] = (SelectAttrFirstFilter,)


class FilterLibrary:
    """Filters available to templates, keyed by name."""

    __slots__ = ("_filters",)

    def __init__(self) -> None:
        """Initialize empty library."""
        self._filters: dict[str, FilterProtocol] = {}

    def register(self, flt: FilterProtocol) -> None:
        """Add filter under its name.

        Raises:
            DuplicateFilterError: Name already taken.
        """
        if flt.name in self._filters:
            raise DuplicateFilterError(flt.name)
        self._filters[flt.name] = flt

    def get(self, name: str) -> FilterProtocol:
        """Filter by exact name.

        Raises:
            UnknownFilterError: Name not registered.
        """
        try:
            return self._filters[name]
        except KeyError:
            raise UnknownFilterError(name) from None

    def names(self) -> tuple[str, ...]:
        """All registered names, sorted."""
        return tuple(sorted(self._filters))

    def docs(self) -> tuple[FilterDoc, ...]:
        """Documentation of every filter, sorted by name."""
        return tuple(self._filters[name].doc for name in self.names())

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __iter__(self) -> Iterator[FilterProtocol]:
        return iter(self._filters.values())

    def __len__(self) -> int:
        return len(self._filters)


def default_filters() -> FilterLibrary:
    """Library with all built-in filters.

    Returns:
        FilterLibrary
    """
    library = FilterLibrary()
    for filter_cls in _ALL_FILTERS:
        library.register(filter_cls())
    return library
