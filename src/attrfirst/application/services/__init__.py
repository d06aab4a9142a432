"""Application services.

Interpreter is the concrete evaluation context handed to filters.
"""

from attrfirst.application.services.interpreter import Interpreter

__all__ = [
    "Interpreter",
]
