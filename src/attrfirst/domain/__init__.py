"""attrfirst domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

from attrfirst.domain.exceptions import (
    AttributeResolutionError,
    AttrFirstError,
    DuplicateExpTestError,
    DuplicateFilterError,
    FilterError,
    FrozenRegistryError,
    InvalidArgumentTypeError,
    MissingArgumentError,
    NotIterableError,
    UnknownExpTestError,
    UnknownFilterError,
)
from attrfirst.domain.model import (
    UNDEFINED,
    ErrorKind,
    FilterArguments,
    FilterConfig,
    FilterDoc,
    FilterParam,
    FilterResult,
    FilterSnippet,
    FilterState,
    Position,
    RenderEvent,
    RenderEventType,
    TraceLog,
    Undefined,
)
from attrfirst.domain.ports import (
    DocReporterProtocol,
    ExpTestProtocol,
    FilterProtocol,
    InterpreterProtocol,
)

__all__ = [
    # Exceptions
    "AttrFirstError",
    "FilterError",
    "MissingArgumentError",
    "InvalidArgumentTypeError",
    "UnknownExpTestError",
    "NotIterableError",
    "AttributeResolutionError",
    "DuplicateExpTestError",
    "FrozenRegistryError",
    "DuplicateFilterError",
    "UnknownFilterError",
    # Enums
    "ErrorKind",
    "FilterState",
    "RenderEventType",
    # Value objects
    "Position",
    "FilterArguments",
    "FilterConfig",
    "FilterResult",
    "RenderEvent",
    "TraceLog",
    "FilterDoc",
    "FilterParam",
    "FilterSnippet",
    "UNDEFINED",
    "Undefined",
    # Ports
    "DocReporterProtocol",
    "ExpTestProtocol",
    "FilterProtocol",
    "InterpreterProtocol",
]
