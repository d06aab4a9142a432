"""Concrete interpreter: the host side of InterpreterProtocol.

Composition-based: accepts config, test registry, property resolver
and tracer as dependencies, with defaults for each.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import TYPE_CHECKING, Self

from attrfirst.application.exptests import ExpTestRegistry, default_exp_tests
from attrfirst.domain.exceptions import AttributeResolutionError
from attrfirst.domain.model.configuration import FilterConfig
from attrfirst.domain.model.position import Position
from attrfirst.infrastructure.resolver import PropertyResolver
from attrfirst.infrastructure.tracing import RenderTracer

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from attrfirst.domain.model.trace import TraceLog
    from attrfirst.domain.ports.exp_test import ExpTestProtocol


class Interpreter:
    """Evaluation context handed to filters.

    May be shared between threads and tasks: the evaluation position is
    held per thread/task, everything else is read-only or lock-protected.

    Example:
        interpreter = Interpreter.from_config(FilterConfig(strict_properties=True))
        with interpreter.at(line=3):
            result = SelectAttrFirstFilter().filter(posts, interpreter, ("image",), {})
        print(interpreter.trace.events)
    """

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        exp_tests: ExpTestRegistry | None = None,
        resolver: PropertyResolver | None = None,
        tracer: RenderTracer | None = None,
    ) -> None:
        """Initialize interpreter with dependencies.

        Args:
            config: Engine configuration. Uses defaults if None.
            exp_tests: Test registry. Uses frozen built-ins if None.
            resolver: Property resolver. Built from config if None.
            tracer: Render tracer. Built from config if None.
        """
        self._config = config or FilterConfig()
        self._exp_tests = exp_tests if exp_tests is not None else default_exp_tests()
        self._resolver = resolver or PropertyResolver(strict=self._config.strict_properties)
        self._tracer = tracer or RenderTracer(
            enabled=self._config.trace,
            max_events=self._config.max_trace_events,
        )
        # Per-task/thread evaluation position using contextvars
        self._position: contextvars.ContextVar[Position | None] = contextvars.ContextVar(
            "attrfirst_position",
            default=None,
        )

    @classmethod
    def from_config(cls, config: FilterConfig) -> Self:
        """Create interpreter with built-in tests and adapters for config."""
        return cls(config)

    @property
    def config(self) -> FilterConfig:
        """Engine configuration."""
        return self._config

    @property
    def exp_tests(self) -> ExpTestRegistry:
        """Expression test registry."""
        return self._exp_tests

    @property
    def position(self) -> Position | None:
        """Position of the expression being rendered."""
        return self._position.get()

    @property
    def trace(self) -> TraceLog:
        """Snapshot of recorded render notifications."""
        return self._tracer.snapshot()

    @contextmanager
    def at(self, line: int, column: int = 0) -> Iterator[Position]:
        """Set evaluation position for a block, restore afterwards.

        Usage:
            with interpreter.at(12):
                flt.filter(...)
        """
        position = Position(line, column)
        token = self._position.set(position)
        try:
            yield position
        finally:
            self._position.reset(token)

    def resolve_property(self, obj: object, attr: str) -> object:
        """Resolve attribute path on obj.

        Raises:
            AttributeResolutionError: If resolution fails (with position).
        """
        try:
            return self._resolver.resolve(obj, attr)
        except AttributeResolutionError as exc:
            exc.locate(self.position)
            raise

    def get_exp_test(self, name: str) -> ExpTestProtocol | None:
        """Look up expression test by exact name."""
        return self._exp_tests.get(name)

    def default_exp_test(self) -> str:
        """Name of the test used when a filter gets none."""
        return self._config.default_exp_test

    def start_render(self, name: str) -> None:
        """Forward start notification to the tracer."""
        self._tracer.start(name, self.position)

    def end_render(self, name: str, summary: Mapping[str, object]) -> None:
        """Forward end notification to the tracer."""
        self._tracer.end(name, summary, self.position)
