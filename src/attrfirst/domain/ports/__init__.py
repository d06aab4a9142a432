"""Domain ports: Protocols implemented by hosts and adapters."""

from attrfirst.domain.ports.exp_test import ExpTestProtocol
from attrfirst.domain.ports.filter import FilterProtocol
from attrfirst.domain.ports.interpreter import InterpreterProtocol
from attrfirst.domain.ports.reporter import DocReporterProtocol

__all__ = [
    "DocReporterProtocol",
    "ExpTestProtocol",
    "FilterProtocol",
    "InterpreterProtocol",
]
