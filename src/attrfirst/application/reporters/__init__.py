"""Reporters for filter documentation.

ConsoleDocReporter renders with rich; JSONDocReporter uses stdlib only.
"""

from attrfirst.application.reporters.console import ConsoleConfig, ConsoleDocReporter
from attrfirst.application.reporters.json_reporter import JSONDocReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleDocReporter",
    "JSONDocReporter",
]
