"""
Interfaces for reporters that receive finished spans.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.span_data import SpanData


class QualityFlag(str, Enum):
    """Data quality problems noticed while finishing a span."""
    NEGATIVE_FINISH_TIME = "negative_finish_time"
    FINISH_BEFORE_START = "finish_before_start"


class SpanReporter(ABC):
    """Abstract interface for the pipeline that exports finished spans."""

    @abstractmethod
    def report(self, span: "SpanData", quality_flags: Sequence[QualityFlag] = ()) -> None:
        """
        Accept a finished span. Called exactly once per span.

        Args:
            span: Read-only view of the sealed span
            quality_flags: Problems noticed while finishing the span, if any
        """
        pass
