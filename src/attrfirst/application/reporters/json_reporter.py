"""JSON reporter for machine-readable filter documentation.

Stdlib-only reporter for documentation generators.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterable

    from attrfirst.domain.model.doc import FilterDoc


class JSONDocReporter:
    """JSON reporter for filter documentation.

    Writes {"filters": [...]} to the output stream.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, docs: Iterable[FilterDoc]) -> None:
        """Write documentation as JSON.

        Args:
            docs: Filter documentation, written in the given order
        """
        data = {"filters": [self._doc_to_dict(doc) for doc in docs]}
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _doc_to_dict(self, doc: FilterDoc) -> dict[str, object]:
        """Convert FilterDoc to JSON-serializable dict."""
        return {
            "name": doc.name,
            "description": doc.description,
            "params": [
                {
                    "name": param.name,
                    "type": param.type,
                    "description": param.description,
                    "default": param.default,
                    "required": param.required,
                }
                for param in doc.params
            ],
            "snippets": [
                {"code": snippet.code, "description": snippet.description}
                for snippet in doc.snippets
            ],
        }
