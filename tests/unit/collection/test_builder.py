import pytest

from stateerrors.collection import FailureBuilder, render_list
from stateerrors.core import (
    EventFilter,
    FailureValidationError,
    Severity,
    StateFailure,
)


# =============================================================================
# SECTION 1 -- single-failure adds
# =============================================================================

class TestAddSingle:
    def test_empty_builder_result_is_empty_tuple(self):
        assert FailureBuilder().result() == ()

    def test_length_equals_number_of_adds(self, multiple_failures):
        assert len(multiple_failures) == 3

    def test_call_order_preserved(self, multiple_failures):
        assert [f.message for f in multiple_failures] == [
            "multiple",
            "another error",
            "for some reason",
        ]

    def test_severities(self, multiple_failures):
        assert [f.severity for f in multiple_failures] == [
            Severity.DEGRADED,
            Severity.DEGRADED,
            Severity.UNAVAILABLE,
        ]

    def test_fluent_methods_return_builder(self):
        builder = FailureBuilder()
        assert builder.add_degraded("a") is builder
        assert builder.add_unavailable("b") is builder
        assert builder.add() is builder
        assert builder.append_lists() is builder
        assert builder.add_if_present(None, Severity.DEGRADED) is builder

    def test_len_tracks_accumulator(self):
        builder = FailureBuilder().add_degraded("a")
        assert len(builder) == 1

    def test_repr_lists_failures(self):
        assert "FailureBuilder(failures=[" in repr(FailureBuilder().add_degraded("a"))

    def test_duplicates_allowed(self):
        result = FailureBuilder().add_degraded("x").add_degraded("x").result()
        assert result == (StateFailure.degraded("x"), StateFailure.degraded("x"))

    def test_non_string_message_rejected(self):
        with pytest.raises(FailureValidationError):
            FailureBuilder().add_degraded(42)  # type: ignore[arg-type]


# =============================================================================
# SECTION 2 -- add_if_present
# =============================================================================

class TestAddIfPresent:
    def test_none_is_noop(self):
        assert FailureBuilder().add_if_present(None, Severity.UNAVAILABLE).result() == ()

    def test_exception_message_becomes_failure(self):
        result = (
            FailureBuilder()
            .add_if_present(TimeoutError("health check timed out"), Severity.UNAVAILABLE)
            .result()
        )
        assert result == (StateFailure.unavailable("health check timed out"),)

    def test_invalid_severity_rejected(self):
        with pytest.raises(FailureValidationError):
            FailureBuilder().add_if_present(ValueError("x"), "degraded")  # type: ignore[arg-type]


# =============================================================================
# SECTION 3 -- add / append_lists
# =============================================================================

class TestAppendLists:
    def test_zero_arguments_is_noop(self, multiple_failures):
        builder = FailureBuilder().append_lists(multiple_failures)
        assert builder.append_lists().result() == multiple_failures

    def test_only_none_and_empty_is_noop(self):
        builder = FailureBuilder().add_degraded("kept")
        before = builder.result()
        assert builder.append_lists(None, (), [], None).result() == before

    def test_lists_concatenated_in_argument_order(self, multiple_failures):
        single = FailureBuilder().add_degraded("first single error").result()
        result = FailureBuilder().append_lists(single, multiple_failures).result()
        assert result == single + multiple_failures

    def test_combination_skipping_nils(self, multiple_failures):
        first = StateFailure.degraded("first single error")
        result = (
            FailureBuilder()
            .append_lists(None)
            .add(first)
            .append_lists(multiple_failures)
            .append_lists(None)
            .append_lists(multiple_failures)
            .result()
        )
        assert len(result) == 7
        assert result[0] == first
        assert result[1:4] == multiple_failures
        assert result[4:] == multiple_failures

    def test_add_zero_failures_is_noop(self):
        assert FailureBuilder().add().result() == ()

    def test_add_appends_verbatim(self):
        a = StateFailure.degraded("a")
        b = StateFailure.unavailable("b")
        assert FailureBuilder().add(a, b).result() == (a, b)

    def test_none_elements_are_filtered(self):
        a = StateFailure.degraded("a")
        b = StateFailure.unavailable("b")
        assert FailureBuilder().append_lists([a, None, b]).result() == (a, b)

    def test_add_none_is_noop(self):
        assert FailureBuilder().add(None).result() == ()

    def test_non_failure_element_rejected(self):
        with pytest.raises(FailureValidationError) as excinfo:
            FailureBuilder().append_lists([StateFailure.degraded("a"), "b"])
        assert excinfo.value.field_name == "failure_lists[0][1]"

    def test_rejected_call_leaves_accumulator_unchanged(self):
        builder = FailureBuilder().add_degraded("kept")
        with pytest.raises(FailureValidationError):
            builder.append_lists([StateFailure.degraded("a")], ["bad"])
        assert builder.result() == (StateFailure.degraded("kept"),)

    def test_bare_failure_argument_rejected(self):
        with pytest.raises(FailureValidationError) as excinfo:
            FailureBuilder().append_lists(StateFailure.degraded("a"))  # type: ignore[arg-type]
        assert excinfo.value.field_name == "failure_lists[0]"


# =============================================================================
# SECTION 4 -- result() snapshots
# =============================================================================

class TestResultSnapshot:
    def test_result_is_tuple(self, multiple_failures):
        assert isinstance(multiple_failures, tuple)

    def test_snapshot_unaffected_by_later_adds(self):
        builder = FailureBuilder().add_degraded("a")
        snapshot = builder.result()
        builder.add_unavailable("b")
        assert snapshot == (StateFailure.degraded("a"),)
        assert len(builder.result()) == 2

    def test_appended_list_not_aliased(self, multiple_failures):
        source = list(multiple_failures)
        builder = FailureBuilder().append_lists(source)
        source.clear()
        assert builder.result() == multiple_failures


# =============================================================================
# SECTION 5 -- event log
# =============================================================================

class TestBuilderEvents:
    def test_no_logger_records_nothing(self, event_log):
        FailureBuilder().add_degraded("a")
        assert event_log.event_count() == 0

    def test_added_events(self, event_log):
        FailureBuilder(logger=event_log).add_degraded("a").add_unavailable("b")
        events = event_log.query_events(EventFilter(event_type="FAILURE_ADDED"))
        assert [e.data for e in events] == [
            {"severity": "degraded", "message": "a"},
            {"severity": "unavailable", "message": "b"},
        ]

    def test_nil_skipped_events(self, event_log):
        FailureBuilder(logger=event_log).append_lists(
            [None, StateFailure.degraded("a")], None, [None]
        )
        events = event_log.query_events(EventFilter(event_type="NIL_SKIPPED"))
        assert [e.data["position"] for e in events] == [
            "failure_lists[0][0]",
            "failure_lists[2][0]",
        ]

    def test_rejected_call_logs_nothing(self, event_log):
        with pytest.raises(FailureValidationError):
            FailureBuilder(logger=event_log).append_lists([None, 1])
        assert event_log.event_count() == 0


# =============================================================================
# SECTION 6 -- render_list
# =============================================================================

class TestRenderList:
    def test_one_line_per_failure(self, multiple_failures):
        assert render_list(multiple_failures) == (
            "StateError: degraded: multiple\n"
            "StateError: degraded: another error\n"
            "StateError: unavailable: for some reason\n"
        )

    def test_empty_and_none(self):
        assert render_list(()) == ""
        assert render_list(None) == ""
