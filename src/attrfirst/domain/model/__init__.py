"""Domain model: immutable value objects."""

from attrfirst.domain.model.arguments import FilterArguments
from attrfirst.domain.model.configuration import FilterConfig
from attrfirst.domain.model.doc import FilterDoc, FilterParam, FilterSnippet
from attrfirst.domain.model.enums import ErrorKind, FilterState, RenderEventType
from attrfirst.domain.model.position import Position
from attrfirst.domain.model.result import FilterResult
from attrfirst.domain.model.trace import RenderEvent, TraceLog
from attrfirst.domain.model.undefined import UNDEFINED, Undefined

__all__ = [
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
    # Documentation
    "FilterDoc",
    "FilterParam",
    "FilterSnippet",
    # Sentinel
    "UNDEFINED",
    "Undefined",
]
