# Reporters module
from .interfaces import QualityFlag, SpanReporter
from .in_memory import InMemoryReporter
from .logging_reporter import LoggingReporter

__all__ = [
    "QualityFlag",
    "SpanReporter",
    "InMemoryReporter",
    "LoggingReporter",
]
