"""
Span facade: the object handed to instrumented code.
"""

from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from .errors import InvalidArgumentError, check_not_none
from .models.log_event import LogEvent
from .models.span_context import SpanContext
from .models.span_data import SpanData
from .span_finisher import SpanFinisher
from .span_state import SpanState
from .time_units import TimeUnit

T = TypeVar("T")

TagValue = Union[str, bool, int, float]


def _tag_string(key: str, value: TagValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise InvalidArgumentError(f"Unsupported value type {type(value).__name__} for tag '{key}'")


class Span(Generic[T]):
    """
    A single named, timed unit of work.

    Mutations go to the span's :class:`SpanState`; finishing goes through the
    :class:`SpanFinisher` the tracer wired in. A span can also be used as a
    context manager, in which case it is finished when the block exits.

    Usage::

        span = Span(SpanState(context, "checkout", TimeUnit.MICROSECONDS, start), finisher)
        with span:
            span.set_tag("http.status", 200)
            span.log_event("cart_loaded")
    """

    def __init__(self, span_state: SpanState[T], span_finisher: SpanFinisher):
        self._state = check_not_none(span_state, "span_state may not be None")
        self._finisher = check_not_none(span_finisher, "span_finisher may not be None")

    @property
    def context(self) -> SpanContext[T]:
        return self._state.span_context

    @property
    def operation_name(self) -> str:
        return self._state.get_operation_name()

    @property
    def data(self) -> SpanData[T]:
        """Read-only view of everything recorded on this span."""
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state.is_finished

    def set_operation_name(self, operation_name: str) -> "Span[T]":
        self._state.set_operation_name(operation_name)
        return self

    def set_tag(self, key: str, value: TagValue) -> "Span[T]":
        """
        Set a tag. Non-string values are stored in their string form.

        Args:
            key: Tag key
            value: Tag value (str, bool, int or float)

        Returns:
            This span, for chaining
        """
        check_not_none(key, "tag key may not be None")
        check_not_none(value, f"value for tag '{key}' may not be None")
        self._state.put_tag(key, _tag_string(key, value))
        return self

    def log_kv(self, fields: Mapping[str, Any], timestamp_micros: Optional[int] = None) -> "Span[T]":
        """
        Record a structured log event.

        Args:
            fields: Key/value payload of the event
            timestamp_micros: Time of the event in microseconds, defaults to now

        Returns:
            This span, for chaining
        """
        check_not_none(fields, "fields may not be None")
        unit, timestamp = self._event_time(timestamp_micros)
        self._state.add_log_event(LogEvent.of_fields(timestamp, fields, unit=unit))
        return self

    def log_event(self, message: str, timestamp_micros: Optional[int] = None) -> "Span[T]":
        check_not_none(message, "message may not be None")
        unit, timestamp = self._event_time(timestamp_micros)
        self._state.add_log_event(LogEvent.of_message(timestamp, message, unit=unit))
        return self

    def get_baggage_item(self, key: str) -> Optional[str]:
        return self._state.span_context.get_baggage_item(key)

    def finish(self, finish_micros: Optional[int] = None) -> bool:
        """
        Finish the span now, or at ``finish_micros`` when given.

        Only the first call has any effect.

        Args:
            finish_micros: Explicit finish time in microseconds

        Returns:
            True if this call finished the span
        """
        if finish_micros is None:
            return self._finisher.finish(self._state)
        return self._finisher.finish(self._state, TimeUnit.MICROSECONDS, finish_micros)

    def finish_at(self, unit: TimeUnit, timestamp: int) -> bool:
        return self._finisher.finish(self._state, unit, timestamp)

    def _event_time(self, timestamp_micros: Optional[int]):
        if timestamp_micros is None:
            return self._finisher.config.clock_unit, self._finisher.now()
        return TimeUnit.MICROSECONDS, timestamp_micros

    def __enter__(self) -> "Span[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is not None:
            self.set_tag("error", True)
            self.log_kv({
                "event": "error",
                "error.kind": exc_type.__name__,
                "message": str(exc_val),
            })
        self.finish()
        return False

    def __str__(self) -> str:
        return str(self._state)

    __repr__ = __str__
