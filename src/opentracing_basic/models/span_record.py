"""
Span record model: a serialisable snapshot of a span's data.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..time_units import TimeUnit
from .log_event import LogEvent
from .span_data import SpanData


class SpanRecord(BaseModel):
    """Represents the recorded data of a single span, ready for export."""
    context: str = Field(..., description="Rendered identity of the span")
    operation_name: str = Field(..., description="Name of the span")
    start_time_micros: int = Field(..., description="Start time in microseconds")
    finish_time_micros: Optional[int] = Field(None, description="Finish time in microseconds")
    duration_ms: Optional[float] = Field(None, description="Duration of the span in milliseconds")
    tags: Dict[str, str] = Field(default_factory=dict, description="Span tags")
    logs: List[LogEvent] = Field(default_factory=list, description="Log events recorded on the span")
    references: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Rendered target contexts grouped by reference type"
    )

    @classmethod
    def from_span_data(cls, data: SpanData) -> "SpanRecord":
        """
        Take a snapshot of a span.

        Args:
            data: Read-only span view

        Returns:
            SpanRecord holding copies of the span's data
        """
        start = data.get_start_time(TimeUnit.MICROSECONDS)
        finish = data.get_finish_time(TimeUnit.MICROSECONDS)
        duration_ms = None
        if finish is not None:
            duration_ms = (finish - start) / 1000.0
        return cls(
            context=str(data.span_context),
            operation_name=data.get_operation_name(),
            start_time_micros=start,
            finish_time_micros=finish,
            duration_ms=duration_ms,
            tags=data.get_tags(),
            logs=data.get_log_events(),
            references={
                reference_type: [str(context) for context in data.get_references(reference_type)]
                for reference_type in data.get_reference_types()
            },
        )
