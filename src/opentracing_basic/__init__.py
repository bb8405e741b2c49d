"""
OpenTracing Basic - the in-process data model and lifecycle of a tracing span.

This package provides:
- Immutable span contexts with a pluggable trace id payload and baggage
- ChildOf / FollowsFrom references linking spans into a trace graph
- A thread-safe span state for tags and structured log events
- A finish protocol that seals a span and reports it exactly once
- Reporter interfaces plus in-memory and logging reporters
"""

__version__ = "0.1.0"

from .errors import TracingError, InvalidArgumentError
from .time_units import TimeUnit
from .models import (
    SpanContext,
    TraceContext,
    Reference,
    ReferenceType,
    LogEvent,
    SpanData,
    SpanRecord,
)
from .span_state import SpanState, SpanPhase
from .span_finisher import SpanFinisher, FinisherConfig
from .span import Span
from .reporters import QualityFlag, SpanReporter, InMemoryReporter, LoggingReporter

__all__ = [
    "Span",
    "SpanState",
    "SpanPhase",
    "SpanFinisher",
    "FinisherConfig",
    "TimeUnit",
    # Models
    "SpanContext",
    "TraceContext",
    "Reference",
    "ReferenceType",
    "LogEvent",
    "SpanData",
    "SpanRecord",
    # Reporters
    "QualityFlag",
    "SpanReporter",
    "InMemoryReporter",
    "LoggingReporter",
    # Errors
    "TracingError",
    "InvalidArgumentError",
]
