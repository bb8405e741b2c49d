"""
Core data models for span identity, references and annotations.
"""

from .span_context import SpanContext, TraceContext
from .references import Reference, ReferenceType
from .log_event import LogEvent
from .span_data import SpanData
from .span_record import SpanRecord

__all__ = [
    "SpanContext",
    "TraceContext",
    "Reference",
    "ReferenceType",
    "LogEvent",
    "SpanData",
    "SpanRecord",
]
