import pytest

from stateerrors.chain import FailureChain, new_degraded, new_unavailable
from stateerrors.core import EventLogger


@pytest.fixture
def three_node_chain() -> FailureChain:
    """[Degraded:"multiple", Degraded:"another error", Unavailable:"for some reason"]"""
    return (
        new_degraded("multiple")
        .append(new_degraded("another error"))
        .append(new_unavailable("for some reason"))
    )


@pytest.fixture
def event_log() -> EventLogger:
    return EventLogger()
