import pytest

from stateerrors.collection import FailureBuilder, FailureList
from stateerrors.core import EventLogger


@pytest.fixture
def multiple_failures() -> FailureList:
    """Three failures in the order most tests assert on."""
    return (
        FailureBuilder()
        .add_degraded("multiple")
        .add_degraded("another error")
        .add_unavailable("for some reason")
        .result()
    )


@pytest.fixture
def event_log() -> EventLogger:
    return EventLogger()
