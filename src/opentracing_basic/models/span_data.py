"""
Read-only view of a span, as handed to reporters.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, TypeVar

from ..time_units import TimeUnit
from .log_event import LogEvent
from .span_context import SpanContext

T = TypeVar("T")


class SpanData(ABC, Generic[T]):
    """Abstract read-only access to the data recorded for one span."""

    @property
    @abstractmethod
    def span_context(self) -> SpanContext[T]:
        """The immutable identity of the span."""
        pass

    @abstractmethod
    def get_operation_name(self) -> str:
        pass

    @abstractmethod
    def get_start_time(self, unit: TimeUnit) -> int:
        """
        Start time of the span.

        Args:
            unit: Unit to express the result in

        Returns:
            Start timestamp converted to ``unit``
        """
        pass

    @abstractmethod
    def get_finish_time(self, unit: TimeUnit) -> Optional[int]:
        """
        Finish time of the span.

        Args:
            unit: Unit to express the result in

        Returns:
            Finish timestamp converted to ``unit``, or None if not finished
        """
        pass

    @property
    @abstractmethod
    def is_finished(self) -> bool:
        pass

    @abstractmethod
    def get_tags(self) -> Dict[str, str]:
        """Snapshot of the tags. Empty, never None, when no tag was set."""
        pass

    @abstractmethod
    def get_log_events(self) -> List[LogEvent]:
        """Snapshot of the log events. Empty, never None, when nothing was logged."""
        pass

    @abstractmethod
    def get_references(self, reference_type: str) -> List[SpanContext[T]]:
        """Contexts referenced with ``reference_type``, in insertion order. Empty when none."""
        pass

    @abstractmethod
    def get_reference_types(self) -> List[str]:
        pass
