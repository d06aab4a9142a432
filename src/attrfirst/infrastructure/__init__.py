"""Infrastructure layer: adapters for iteration, property resolution, tracing, config."""

from attrfirst.infrastructure.config import load_config
from attrfirst.infrastructure.iteration import iterate
from attrfirst.infrastructure.resolver import PropertyResolver
from attrfirst.infrastructure.tracing import RenderTracer, render_scope

__all__ = [
    "PropertyResolver",
    "RenderTracer",
    "iterate",
    "load_config",
    "render_scope",
]
