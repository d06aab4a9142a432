"""Tests for application/filters/select_attr_first.py.

Tests:
- parse_arguments: arity and type validation
- resolve_exp_test: default and named lookup
- scan: first-match, short-circuit, exhaustion, failure propagation
- SelectAttrFirstFilter: raising and result surfaces, render tracing
- select_attr_first: convenience entry point
"""

import importlib
import logging
from contextlib import contextmanager

import pytest

from attrfirst.application.exptests import IsEqualTo, IsTruthy
from attrfirst.application.filters.select_attr_first import (
    FILTER_NAME,
    SelectAttrFirstFilter,
    parse_arguments,
    resolve_exp_test,
    scan,
    select_attr_first,
)
from attrfirst.domain.exceptions import (
    AttributeResolutionError,
    FilterError,
    InvalidArgumentTypeError,
    MissingArgumentError,
    NotIterableError,
    UnknownExpTestError,
)
from attrfirst.domain.model.arguments import FilterArguments
from attrfirst.domain.model.configuration import FilterConfig
from attrfirst.domain.model.enums import ErrorKind, FilterState, RenderEventType
from attrfirst.domain.model.position import Position
from tests.factories import (
    CountingIterable,
    Record,
    RecordingExpTest,
    RecordingInterpreter,
    make_interpreter,
    make_records,
)

select_attr_first_module = importlib.import_module("attrfirst.application.filters.select_attr_first")


def _recording(answer=bool) -> tuple[RecordingExpTest, RecordingInterpreter]:
    test = RecordingExpTest("recording", answer)
    interpreter = RecordingInterpreter(tests={"truthy": IsTruthy(), "recording": test})
    return test, interpreter


class TestParseArguments:
    """Tests for argument validation."""

    def test_no_arguments_is_missing_attr(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            parse_arguments(())
        assert exc_info.value.argument == "attr"
        assert exc_info.value.kind is ErrorKind.MISSING_ARGUMENT

    def test_missing_message(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            parse_arguments([])
        assert str(exc_info.value) == "selectattrfirst filter requires the 'attr' argument"

    def test_attr_only(self) -> None:
        assert parse_arguments(("flag",)) == FilterArguments("flag")

    def test_non_string_attr(self) -> None:
        with pytest.raises(InvalidArgumentTypeError) as exc_info:
            parse_arguments((42,))
        err = exc_info.value
        assert err.argument == "attr"
        assert err.expected == "string"
        assert err.got is int
        assert err.kind is ErrorKind.INVALID_ARGUMENT_TYPE

    def test_non_string_exp_test(self) -> None:
        with pytest.raises(InvalidArgumentTypeError) as exc_info:
            parse_arguments(("flag", 3))
        assert exc_info.value.argument == "exp_test"

    def test_extra_arguments_kept_in_order(self) -> None:
        parsed = parse_arguments(["score", "ge", 3, "x", None])
        assert parsed.attr == "score"
        assert parsed.exp_test == "ge"
        assert parsed.exp_args == (3, "x", None)

    def test_two_arguments_have_no_extras(self) -> None:
        assert parse_arguments(("flag", "none")).exp_args == ()

    def test_empty_attr_passes_validation(self) -> None:
        """Emptiness is a resolution concern, not a type error."""
        assert parse_arguments(("",)).attr == ""


class TestResolveExpTest:
    """Tests for expression test lookup."""

    def test_default_is_truthy(self) -> None:
        assert resolve_exp_test(None, make_interpreter()).name == "truthy"

    def test_named_lookup(self) -> None:
        assert isinstance(resolve_exp_test("equalto", make_interpreter()), IsEqualTo)

    def test_alias_lookup(self) -> None:
        assert isinstance(resolve_exp_test("==", make_interpreter()), IsEqualTo)

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownExpTestError) as exc_info:
            resolve_exp_test("doesnotexist", make_interpreter())
        assert exc_info.value.test_name == "doesnotexist"
        assert str(exc_info.value) == "No expression test defined with name 'doesnotexist'"

    def test_lookup_is_exact(self) -> None:
        with pytest.raises(UnknownExpTestError):
            resolve_exp_test("Truthy", make_interpreter())

    def test_unregistered_default(self) -> None:
        interpreter = make_interpreter(config=FilterConfig(default_exp_test="custom"))
        with pytest.raises(UnknownExpTestError) as exc_info:
            resolve_exp_test(None, interpreter)
        assert exc_info.value.test_name == "custom"


class TestScan:
    """Tests for the short-circuit scanner."""

    def test_stops_at_first_match(self) -> None:
        test, interpreter = _recording(lambda v: v == "hit")
        items = CountingIterable(make_records("a", "hit", "c", "hit", "e"))

        result = scan(items, FilterArguments("flag", "recording"), test, interpreter)

        assert result.state is FilterState.MATCHED
        assert result.value.name == "r1"
        assert items.pulled == 2
        assert len(interpreter.resolved) == 2
        assert len(test.calls) == 2
        assert result.scanned == 2

    def test_exhausted_visits_every_element(self) -> None:
        test, interpreter = _recording(lambda v: False)
        records = make_records(1, 2, 3, 4)

        result = scan(records, FilterArguments("flag", "recording"), test, interpreter)

        assert result.state is FilterState.EXHAUSTED
        assert result.value is None
        assert result.scanned == 4
        assert len(interpreter.resolved) == 4
        assert len(test.calls) == 4

    def test_empty_sequence(self) -> None:
        test, interpreter = _recording()
        result = scan([], FilterArguments("flag", "recording"), test, interpreter)
        assert result.state is FilterState.EXHAUSTED
        assert result.scanned == 0
        assert test.calls == []

    def test_not_iterable_fails(self) -> None:
        test, interpreter = _recording()
        result = scan(42, FilterArguments("flag", "recording"), test, interpreter)
        assert result.state is FilterState.FAILED
        assert isinstance(result.error, NotIterableError)
        assert result.error_kind is ErrorKind.NOT_ITERABLE

    def test_resolution_failure_aborts(self) -> None:
        """A failing element is never skipped in favor of a later match."""
        interpreter = make_interpreter(strict=True)
        items = [{"other": 1}, {"flag": True}]
        result = scan(items, FilterArguments("flag"), IsTruthy(), interpreter)
        assert result.state is FilterState.FAILED
        assert isinstance(result.error, AttributeResolutionError)
        assert result.scanned == 1


class TestSelectAttrFirstFilter:
    """Tests for SelectAttrFirstFilter.filter() and evaluate()."""

    def test_name(self) -> None:
        assert SelectAttrFirstFilter.name == FILTER_NAME == "selectattrfirst"

    def test_default_truthy(self) -> None:
        records = make_records(False, 0, "x", None)
        result = SelectAttrFirstFilter().filter(records, make_interpreter(), ("flag",), {})
        assert result is records[2]
        assert result.flag == "x"

    def test_returns_element_not_value(self) -> None:
        items = [{"flag": 0}, {"flag": "yes", "id": 7}]
        result = SelectAttrFirstFilter().filter(items, make_interpreter(), ("flag",), {})
        assert result == {"flag": "yes", "id": 7}

    def test_no_match_is_none(self) -> None:
        records = make_records(False, 0, None, "")
        assert SelectAttrFirstFilter().filter(records, make_interpreter(), ("flag",), {}) is None

    def test_named_test_with_argument(self) -> None:
        records = make_records("a", "b", "c")
        result = SelectAttrFirstFilter().filter(
            records, make_interpreter(), ("flag", "equalto", "b"), {}
        )
        assert result is records[1]

    def test_first_in_iteration_order(self) -> None:
        records = make_records(None, "x", "y")
        result = SelectAttrFirstFilter().filter(
            reversed(records), make_interpreter(), ("flag",), {}
        )
        assert result is records[2]

    def test_dot_path(self) -> None:
        items = [{"author": {"name": ""}}, {"author": {"name": "ann"}}]
        result = SelectAttrFirstFilter().filter(items, make_interpreter(), ("author.name",), {})
        assert result is items[1]

    def test_mapping_input_uses_values(self) -> None:
        items = {"a": {"flag": 0}, "b": {"flag": 1}}
        result = SelectAttrFirstFilter().filter(items, make_interpreter(), ("flag",), {})
        assert result is items["b"]

    def test_none_input_is_no_match(self) -> None:
        assert SelectAttrFirstFilter().filter(None, make_interpreter(), ("flag",), {}) is None

    def test_generator_input(self) -> None:
        gen = (Record(name=str(i), flag=i) for i in range(3))
        result = SelectAttrFirstFilter().filter(gen, make_interpreter(), ("flag",), {})
        assert result.name == "1"

    def test_lenient_missing_attribute_is_no_match(self) -> None:
        records = make_records(1, 2)
        assert SelectAttrFirstFilter().filter(records, make_interpreter(), ("missing",), {}) is None

    def test_ordering_skips_records_missing_attribute(self) -> None:
        rows = [{"votes": 3}, {}, {"votes": 9}]
        assert select_attr_first(rows, "votes", "gt", 5) is rows[2]

    def test_defined_test_sees_missing_attribute(self) -> None:
        items = [{"a": 1}, {"b": None}]
        result = SelectAttrFirstFilter().filter(items, make_interpreter(), ("b", "defined"), {})
        assert result is items[1]

    def test_zero_arguments_never_iterates(self) -> None:
        items = CountingIterable(make_records(1, 2))
        with pytest.raises(MissingArgumentError):
            SelectAttrFirstFilter().filter(items, make_interpreter(), (), {})
        assert items.iterations == 0

    def test_non_string_attr(self) -> None:
        with pytest.raises(InvalidArgumentTypeError):
            SelectAttrFirstFilter().filter(make_records(1), make_interpreter(), (1,), {})

    def test_unknown_test_never_iterates(self) -> None:
        items = CountingIterable(make_records(1, 2))
        with pytest.raises(UnknownExpTestError):
            SelectAttrFirstFilter().filter(items, make_interpreter(), ("flag", "doesnotexist"), {})
        assert items.iterations == 0

    def test_not_iterable(self) -> None:
        with pytest.raises(NotIterableError):
            SelectAttrFirstFilter().filter(42, make_interpreter(), ("flag",), {})

    def test_string_input_not_iterable(self) -> None:
        with pytest.raises(NotIterableError):
            SelectAttrFirstFilter().filter("abc", make_interpreter(), ("flag",), {})

    def test_strict_resolution_error(self) -> None:
        with pytest.raises(AttributeResolutionError) as exc_info:
            SelectAttrFirstFilter().filter(
                make_records(1), make_interpreter(strict=True), ("missing",), {}
            )
        assert exc_info.value.attr == "missing"
        assert exc_info.value.element_type is Record

    def test_all_failures_are_filter_errors(self) -> None:
        for args in [(), (1,), ("flag", 2), ("flag", "nope")]:
            with pytest.raises(FilterError):
                SelectAttrFirstFilter().filter(make_records(1), make_interpreter(), args, {})

    def test_extra_arguments_forwarded_to_every_call(self) -> None:
        test, interpreter = _recording(lambda v: False)
        records = make_records("a", "b", "c")

        SelectAttrFirstFilter().filter(
            records, interpreter, ("flag", "recording", 1, "two", None), {}
        )

        assert [args for _, args in test.calls] == [(1, "two", None)] * 3
        assert [value for value, _ in test.calls] == ["a", "b", "c"]

    def test_idempotent(self) -> None:
        records = make_records(0, "x", "y")
        flt = SelectAttrFirstFilter()
        interpreter = make_interpreter()
        first = flt.filter(records, interpreter, ("flag",), {})
        second = flt.filter(records, interpreter, ("flag",), {})
        assert first is second is records[1]

    def test_evaluate_never_raises_filter_errors(self) -> None:
        result = SelectAttrFirstFilter().evaluate(make_records(1), make_interpreter(), (), {})
        assert result.state is FilterState.FAILED
        assert result.error_kind is ErrorKind.MISSING_ARGUMENT
        assert not result.ok

    def test_evaluate_matched(self) -> None:
        records = make_records(0, 5)
        result = SelectAttrFirstFilter().evaluate(records, make_interpreter(), ("flag",), {})
        assert result.state is FilterState.MATCHED
        assert result.ok
        assert result.unwrap() is records[1]

    def test_evaluate_exhausted_is_success(self) -> None:
        result = SelectAttrFirstFilter().evaluate([], make_interpreter(), ("flag",), {})
        assert result.state is FilterState.EXHAUSTED
        assert result.ok
        assert result.unwrap() is None


class TestPosition:
    """Tests for evaluation position on outcomes."""

    def test_error_carries_position(self) -> None:
        interpreter = make_interpreter()
        with interpreter.at(7), pytest.raises(UnknownExpTestError) as exc_info:
            SelectAttrFirstFilter().filter([], interpreter, ("flag", "nope"), {})
        assert exc_info.value.position == Position(7)
        assert str(exc_info.value).endswith("(line 7)")

    def test_resolution_error_carries_position(self) -> None:
        interpreter = make_interpreter(strict=True)
        with interpreter.at(3, 9), pytest.raises(AttributeResolutionError) as exc_info:
            SelectAttrFirstFilter().filter([{}], interpreter, ("flag",), {})
        assert exc_info.value.position == Position(3, 9)

    def test_success_carries_position(self) -> None:
        interpreter = make_interpreter()
        with interpreter.at(2):
            result = SelectAttrFirstFilter().evaluate(make_records(1), interpreter, ("flag",), {})
        assert result.position == Position(2)


class TestTracing:
    """Tests for start/end render notifications."""

    def test_start_and_end_on_success(self) -> None:
        _, interpreter = _recording()
        SelectAttrFirstFilter().filter(make_records(1), interpreter, ("flag",), {})
        assert interpreter.notifications == [
            ("start", "selectattrfirst", None),
            ("end", "selectattrfirst", {"attr": "[flag]", "kwargs": {}}),
        ]

    def test_end_fires_once_on_failure(self) -> None:
        _, interpreter = _recording()
        with pytest.raises(MissingArgumentError):
            SelectAttrFirstFilter().filter(make_records(1), interpreter, (), {})
        assert [n[0] for n in interpreter.notifications] == ["start", "end"]

    def test_end_fires_when_test_raises(self) -> None:
        def explode(value: object) -> bool:
            raise RuntimeError("boom")

        _, interpreter = _recording(explode)
        with pytest.raises(RuntimeError, match="boom"):
            SelectAttrFirstFilter().filter(
                make_records(1), interpreter, ("flag", "recording"), {}
            )
        assert [n[0] for n in interpreter.notifications] == ["start", "end"]

    def test_summary_lists_all_arguments_and_kwargs(self) -> None:
        _, interpreter = _recording()
        SelectAttrFirstFilter().filter(
            make_records(1), interpreter, ("flag", "recording", 3), {"x": 1}
        )
        _, _, summary = interpreter.notifications[-1]
        assert summary == {"attr": "[flag, recording, 3]", "kwargs": {"x": 1}}

    def test_interpreter_trace_is_balanced(self) -> None:
        interpreter = make_interpreter()
        flt = SelectAttrFirstFilter()
        flt.filter(make_records(1), interpreter, ("flag",), {})
        with pytest.raises(UnknownExpTestError):
            flt.filter(make_records(1), interpreter, ("flag", "nope"), {})

        trace = interpreter.trace
        assert trace.count(RenderEventType.START, "selectattrfirst") == 2
        assert trace.count(RenderEventType.END, "selectattrfirst") == 2
        assert trace.balanced

    def test_runs_inside_render_scope(self, monkeypatch: pytest.MonkeyPatch) -> None:
        scopes: list[tuple[str, object]] = []
        original = select_attr_first_module.render_scope

        @contextmanager
        def recording_scope(interpreter, name, summary=None):
            scopes.append((name, summary))
            with original(interpreter, name, summary):
                yield

        monkeypatch.setattr(select_attr_first_module, "render_scope", recording_scope)
        _, interpreter = _recording()
        SelectAttrFirstFilter().filter(make_records(1), interpreter, ("flag",), {})
        assert scopes == [("selectattrfirst", {"attr": "[flag]", "kwargs": {}})]
        assert [n[0] for n in interpreter.notifications] == ["start", "end"]

    def test_scan_failure_logged_with_state(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = "attrfirst.application.filters.select_attr_first"
        with caplog.at_level(logging.DEBUG, logger=logger):
            result = SelectAttrFirstFilter().evaluate(5, make_interpreter(), ("flag",), {})
        assert result.error_kind is ErrorKind.NOT_ITERABLE
        assert "selectattrfirst failed while SCANNING" in caplog.text
        assert "selectattrfirst -> FAILED after 0 element(s)" in caplog.text

    def test_validation_failure_logged_with_state(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = "attrfirst.application.filters.select_attr_first"
        with caplog.at_level(logging.DEBUG, logger=logger):
            SelectAttrFirstFilter().evaluate([], make_interpreter(), (), {})
        assert "selectattrfirst failed while VALIDATING" in caplog.text


class TestSelectAttrFirstFunction:
    """Tests for the select_attr_first convenience function."""

    def test_default_interpreter(self) -> None:
        records = make_records(None, "", "z")
        assert select_attr_first(records, "flag") is records[2]

    def test_named_test_and_argument(self) -> None:
        records = make_records("a", "b", "c", "d")
        assert select_attr_first(records, "score", "gt", 2) is records[3]

    def test_extra_args_without_test(self) -> None:
        with pytest.raises(TypeError, match="exp_test"):
            select_attr_first([], "flag", None, 1)

    def test_given_interpreter(self) -> None:
        interpreter = make_interpreter(strict=True)
        with pytest.raises(AttributeResolutionError):
            select_attr_first([{}], "flag", interpreter=interpreter)
