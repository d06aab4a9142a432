"""Reporter protocol for filter documentation output.

NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from attrfirst.domain.model.doc import FilterDoc


class DocReporterProtocol(Protocol):
    """Contract for documentation reporters.

    attrfirst provides ConsoleDocReporter (rich) and JSONDocReporter.
    """

    def report(self, docs: Iterable[FilterDoc]) -> object:
        """Render documentation of the given filters.

        Implementation decides output format and destination.
        """
        ...
