"""
Shared fixtures for span tests.
"""

import pytest

from opentracing_basic import (
    InMemoryReporter,
    Reference,
    Span,
    SpanContext,
    SpanFinisher,
    SpanState,
    TimeUnit,
    TraceContext,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: multi-component and multi-threaded scenarios")


class FakeClock:
    """Manually advanced clock returning nanoseconds."""

    def __init__(self, start_nanos: int = 5_000_000_000):
        self.nanos = start_nanos

    def advance(self, unit: TimeUnit, amount: int):
        self.nanos += unit.to_nanos(amount)

    def __call__(self) -> int:
        return self.nanos


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def reporter():
    return InMemoryReporter()


@pytest.fixture
def finisher(reporter, clock):
    return SpanFinisher(reporter, clock=clock)


@pytest.fixture
def parent_context():
    return SpanContext(TraceContext(trace_id="0af7651916cd43dd8448eb211c80319c", span_id="b7ad6b7169203331"))


@pytest.fixture
def span_context(parent_context):
    return SpanContext(
        TraceContext(trace_id=parent_context.trace_context.trace_id, span_id="00f067aa0ba902b7"),
        baggage={"tenant": "acme"},
    )


@pytest.fixture
def span_state(span_context, parent_context):
    return SpanState(
        span_context,
        "checkout",
        TimeUnit.MILLISECONDS,
        1000,
        references=[Reference.child_of(parent_context)],
    )


@pytest.fixture
def span(span_state, finisher):
    return Span(span_state, finisher)
