"""selectattrfirst: first element whose attribute passes an expression test.

Short-circuiting, single-result variant of selectattr. Pipeline:

    parse_arguments -> resolve_exp_test -> scan -> FilterResult

Each stage returns early on failure; scan also returns early on the
first match, so no element after the match is resolved or tested.
The whole invocation is wrapped in start/end render notifications.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from attrfirst.application.filters._base import BaseFilter
from attrfirst.application.services.interpreter import Interpreter
from attrfirst.domain.exceptions import (
    FilterError,
    InvalidArgumentTypeError,
    MissingArgumentError,
    UnknownExpTestError,
)
from attrfirst.domain.model.arguments import FilterArguments
from attrfirst.domain.model.doc import FilterDoc, FilterParam, FilterSnippet
from attrfirst.domain.model.enums import FilterState
from attrfirst.domain.model.result import FilterResult
from attrfirst.infrastructure.iteration import iterate
from attrfirst.infrastructure.tracing import render_scope

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from attrfirst.domain.ports.exp_test import ExpTestProtocol
    from attrfirst.domain.ports.interpreter import InterpreterProtocol

LOGGER = logging.getLogger(__name__)

FILTER_NAME = "selectattrfirst"
_LABEL = f"{FILTER_NAME} filter"


# =============================================================================
# Argument validation
# =============================================================================


def parse_arguments(args: Sequence[object], *, label: str = _LABEL) -> FilterArguments:
    """Validate positional filter arguments.

    Layout: [attr, exp_test?, *exp_args]. Nothing is iterated here.

    Raises:
        MissingArgumentError: No arguments.
        InvalidArgumentTypeError: attr or exp_test is not a string.
    """
    if len(args) == 0:
        raise MissingArgumentError(label, "attr")

    attr = args[0]
    if not isinstance(attr, str):
        raise InvalidArgumentTypeError(label, "attr", expected="string", got=type(attr))

    if len(args) == 1:
        return FilterArguments(attr)

    exp_test = args[1]
    if not isinstance(exp_test, str):
        raise InvalidArgumentTypeError(label, "exp_test", expected="string", got=type(exp_test))

    return FilterArguments(attr, exp_test, tuple(args[2:]))


# =============================================================================
# Expression test resolution
# =============================================================================


def resolve_exp_test(name: str | None, interpreter: InterpreterProtocol) -> ExpTestProtocol:
    """Look up the expression test, once per invocation.

    Args:
        name: Requested test. None = interpreter default ("truthy").
        interpreter: Provides the registry lookup.

    Raises:
        UnknownExpTestError: Name (or default) not registered.
    """
    test_name = interpreter.default_exp_test() if name is None else name
    exp_test = interpreter.get_exp_test(test_name)
    if exp_test is None:
        raise UnknownExpTestError(test_name)
    return exp_test


# =============================================================================
# Short-circuit scan
# =============================================================================


def scan(
    var: object,
    arguments: FilterArguments,
    exp_test: ExpTestProtocol,
    interpreter: InterpreterProtocol,
) -> FilterResult:
    """Walk var lazily and stop at the first passing element.

    Returns the original element (not the resolved attribute value).
    Resolution failures abort the scan; they never skip an element.

    Returns:
        MATCHED, EXHAUSTED or FAILED result. scanned = elements visited.
    """
    position = interpreter.position
    scanned = 0
    try:
        for element in iterate(var):
            scanned += 1
            value = interpreter.resolve_property(element, arguments.attr)
            if exp_test.evaluate(value, interpreter, *arguments.exp_args):
                return FilterResult.matched(element, scanned=scanned, position=position)
    except FilterError as exc:
        return FilterResult.failed(exc, scanned=scanned, position=position)
    return FilterResult.exhausted(scanned=scanned, position=position)


# =============================================================================
# Filter
# =============================================================================


class SelectAttrFirstFilter(BaseFilter):
    """First element of a sequence whose attribute passes a test.

    Usage in templates:
        {{ contents|selectattrfirst('featured_image') }}
        {{ users|selectattrfirst('age', 'ge', 18) }}

    Two surfaces:
      - evaluate(): returns FilterResult, never raises FilterError
      - filter(): returns element or None, raises FilterError
    """

    name: ClassVar[str] = FILTER_NAME
    doc: ClassVar[FilterDoc] = FilterDoc(
        name=FILTER_NAME,
        description=(
            "Filters a sequence of objects by applying a test to an attribute of each "
            "object and selecting only the first one for which the test succeeds. "
            "Like selectattr, but stops at the first match."
        ),
        params=(
            FilterParam("sequence", type="sequence", description="Sequence to test"),
            FilterParam(
                "attr",
                type="string",
                description="Attribute to test on every item",
            ),
            FilterParam(
                "exp_test",
                type="name of expression test",
                description="Expression test that decides the selection",
                default="truthy",
            ),
        ),
        snippets=(
            FilterSnippet(
                code="{{ contents|selectattrfirst('post_list_summary_featured_image') }}",
                description="Selects the first content with a featured image",
            ),
        ),
    )

    def filter(
        self,
        var: object,
        interpreter: InterpreterProtocol,
        args: Sequence[object],
        kwargs: Mapping[str, object],
    ) -> object:
        """Return first matching element or None.

        Raises:
            FilterError: Any validation, lookup, iteration or resolution failure.
        """
        return self.evaluate(var, interpreter, args, kwargs).unwrap()

    def evaluate(
        self,
        var: object,
        interpreter: InterpreterProtocol,
        args: Sequence[object],
        kwargs: Mapping[str, object],
    ) -> FilterResult:
        """Run the filter and return its terminal result.

        END render notification fires exactly once on every exit path.
        """
        with render_scope(interpreter, self.name, self.summarize(args, kwargs)):
            result = self._run(var, interpreter, args)
        LOGGER.debug("%s -> %s after %d element(s)", self.name, result.state.name, result.scanned)
        return result

    def _run(
        self,
        var: object,
        interpreter: InterpreterProtocol,
        args: Sequence[object],
    ) -> FilterResult:
        position = interpreter.position
        state = FilterState.VALIDATING
        try:
            arguments = parse_arguments(args, label=self.label)
            state = FilterState.RESOLVING
            exp_test = resolve_exp_test(arguments.exp_test, interpreter)
        except FilterError as exc:
            LOGGER.debug("%s failed while %s: %s", self.name, state.name, exc.message)
            return FilterResult.failed(exc, position=position)

        state = FilterState.SCANNING
        result = scan(var, arguments, exp_test, interpreter)
        if result.error is not None:
            LOGGER.debug("%s failed while %s: %s", self.name, state.name, result.error.message)
        return result


def select_attr_first(
    sequence: object,
    attr: object,
    exp_test: object = None,
    *exp_args: object,
    interpreter: InterpreterProtocol | None = None,
) -> object:
    """Call selectattrfirst outside a template.

    Args:
        sequence: Value to adapt into a sequence
        attr: Attribute path
        exp_test: Test name. None = interpreter default
        *exp_args: Extra test arguments
        interpreter: Interpreter to use. Default: new Interpreter()

    Returns:
        First matching element or None

    Raises:
        FilterError: As SelectAttrFirstFilter.filter().
    """
    if exp_test is None and exp_args:
        raise TypeError("exp_args require an explicit exp_test")
    if interpreter is None:
        interpreter = Interpreter()
    args: tuple[object, ...] = (attr,) if exp_test is None else (attr, exp_test, *exp_args)
    return SelectAttrFirstFilter().filter(sequence, interpreter, args, {})
