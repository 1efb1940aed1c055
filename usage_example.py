# usage_example.py
# Minimal usage example for the two failure representations in stateerrors.
# This file is not part of the stateerrors package. For reference only.

from stateerrors import (
    EventFilter,
    EventLogger,
    FailureBuilder,
    FailureChain,
    FailureList,
    Severity,
    join_chains,
    new_degraded,
    new_unavailable,
    reduce_to_summary,
    render_list,
    report,
)


# ---------------------------------------------------------------------------
# Collection variant: checks return a FailureList (or None)
# ---------------------------------------------------------------------------

def check_nothing_wrong() -> FailureList:
    return ()


def check_single() -> FailureList:
    return FailureBuilder().add_degraded("first single error").result()


def check_multiple() -> FailureList:
    return (
        FailureBuilder()
        .add_degraded("multiple")
        .add_degraded("another error")
        .add_unavailable("for some reason")
        .result()
    )


def combine_lists() -> FailureList:
    nothing = check_nothing_wrong()
    return (
        FailureBuilder()
        .append_lists(nothing)
        .append_lists(check_single())
        .append_lists(check_multiple())
        .append_lists(None)
        .append_lists(check_multiple())
        .add_if_present(TimeoutError("health check timed out"), Severity.UNAVAILABLE)
        .result()
    )


# ---------------------------------------------------------------------------
# Chain variant: checks return an exception (or None)
# ---------------------------------------------------------------------------

def check_single_wrapped() -> Exception:
    return new_unavailable("some reason")


def check_multiple_wrapped() -> Exception:
    return (
        new_degraded("multiple")
        .append(new_degraded("another error"))
        .append(new_unavailable("some other reason"))
    )


def combine_chains(log: EventLogger):
    first = check_single_wrapped()
    second = check_multiple_wrapped()
    third = check_multiple_wrapped()
    return join_chains(first, join_chains(second, third, log), log)


def render_chain(err) -> str:
    if isinstance(err, FailureChain):
        return report(err)
    return str(err)


failures = combine_lists()
print(render_list(failures), end="")
print(reduce_to_summary(failures))

log = EventLogger()
print("single wrapped: ", check_single_wrapped())
print("multi wrapped:  ", render_chain(check_multiple_wrapped()))
combined = combine_chains(log)
print(render_chain(combined))
print(reduce_to_summary(combined))

# A join whose first operand is not a chain keeps the first and drops the
# second; the event log records the loss.
join_chains(ValueError("not a chain"), new_degraded("lost"), log)
for event in log.query_events(EventFilter(event_type="JOIN_OPERAND_DROPPED")):
    print(event.id, event.data)

# Expected output (abridged):
# StateError: degraded: first single error
# StateError: degraded: multiple
# StateError: degraded: another error
# StateError: unavailable: for some reason
# ...
# StateError: unavailable: health check timed out
# StatusSummary(degraded_reason='first single error, multiple, another error,
#   multiple, another error', unavailable_reason='for some reason,
#   for some reason, health check timed out')
# single wrapped:  WrappedStateError: unavailable: some reason
# multi wrapped:   WrappedStateError: degraded: multiple->WrappedStateError: ...
# EVT-0000000000000003 {'first_type': 'ValueError', 'second_type':
#   'FailureChain', 'dropped': 'second'}
