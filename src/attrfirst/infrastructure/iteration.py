"""Sequence adaptation: arbitrary filter input -> single-pass iterator.

A fresh iterator is produced per call, never cached.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from attrfirst.domain.exceptions import NotIterableError


def iterate(var: object) -> Iterator[object]:
    """Adapt var into a lazy iterator.

    Rules:
      - None -> empty
      - Mapping -> its values
      - str/bytes -> rejected (text is not a sequence of records)
      - any other iterable -> iter(var)

    Raises:
        NotIterableError: If var cannot be adapted.
    """
    match var:
        case None:
            return iter(())
        case Mapping():
            return iter(var.values())
        case str() | bytes() | bytearray():
            raise NotIterableError(type(var))
        case Iterable():
            return iter(var)
        case _:
            raise NotIterableError(type(var))
