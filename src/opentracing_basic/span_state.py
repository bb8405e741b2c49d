"""
Mutable state of a single span for the duration of its active lifetime.
"""

import logging
import threading
from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from .errors import InvalidArgumentError, check_not_none
from .models.log_event import LogEvent
from .models.references import Reference, ReferenceType, normalize_references, reference_key
from .models.span_context import SpanContext
from .models.span_data import SpanData
from .models.span_record import SpanRecord
from .time_units import TimeUnit

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Reference types rendered first, in this order, by __str__
_DISPLAY_ORDER = (ReferenceType.CHILD_OF.value, ReferenceType.FOLLOWS_FROM.value)


def _check_tag(key: str, value: str) -> None:
    check_not_none(key, "tag key may not be None")
    check_not_none(value, f"value for tag '{key}' may not be None")
    if not isinstance(key, str):
        raise InvalidArgumentError(f"tag key must be a str, got {type(key).__name__}")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"value for tag '{key}' must be a str, got {type(value).__name__}")


class SpanPhase(Enum):
    ACTIVE = "active"
    FINISHED = "finished"


class SpanState(SpanData[T], Generic[T]):
    """
    The mutable record behind a span.

    Tags and log events may be written from any number of threads while the
    span is active. A single lock guards every mutation, the tag and log
    containers are allocated up front, and the ACTIVE -> FINISHED transition
    happens at most once under the same lock. Writes arriving after the
    transition are dropped.

    The context, start time and references never change after construction.
    """

    def __init__(
        self,
        span_context: SpanContext[T],
        operation_name: str,
        start_time_unit: TimeUnit,
        start_timestamp: int,
        tags: Optional[Mapping[str, str]] = None,
        references: Union[Iterable[Reference], Mapping[Any, Sequence[SpanContext[T]]]] = (),
    ):
        """
        Initialize the span state.

        Args:
            span_context: Identity of the span
            operation_name: Initial operation name
            start_time_unit: Unit of ``start_timestamp``
            start_timestamp: Start time of the span
            tags: Optional initial tags, copied
            references: References to other spans, either as Reference objects or as a
                mapping of reference type to target contexts
        """
        if not isinstance(check_not_none(span_context, "span_context may not be None"), SpanContext):
            raise InvalidArgumentError(f"span_context must be a SpanContext, got {type(span_context).__name__}")
        self._span_context = span_context
        self._operation_name = check_not_none(operation_name, "operation_name may not be None")
        self._start_time_unit = check_not_none(start_time_unit, "start_time_unit may not be None")
        self._start_timestamp = check_not_none(start_timestamp, "start_timestamp may not be None")
        self._references = normalize_references(check_not_none(references, "references may not be None"))

        self._tags: Dict[str, str] = {}
        for key, value in (tags or {}).items():
            _check_tag(key, value)
            self._tags[key] = value
        self._logs: List[LogEvent] = []

        self._phase = SpanPhase.ACTIVE
        self._finish_time_unit: Optional[TimeUnit] = None
        self._finish_timestamp: Optional[int] = None
        self._lock = threading.RLock()

    @property
    def span_context(self) -> SpanContext[T]:
        return self._span_context

    @property
    def phase(self) -> SpanPhase:
        return self._phase

    @property
    def is_finished(self) -> bool:
        return self._phase is SpanPhase.FINISHED

    def get_operation_name(self) -> str:
        with self._lock:
            return self._operation_name

    def get_start_time(self, unit: TimeUnit) -> int:
        return unit.convert(self._start_timestamp, self._start_time_unit)

    def get_finish_time(self, unit: TimeUnit) -> Optional[int]:
        with self._lock:
            if self._phase is not SpanPhase.FINISHED:
                return None
            return unit.convert(self._finish_timestamp, self._finish_time_unit)

    def duration(self, unit: TimeUnit) -> Optional[int]:
        """Finish minus start in ``unit``, or None while the span is active."""
        finish = self.get_finish_time(TimeUnit.NANOSECONDS)
        if finish is None:
            return None
        return unit.convert(finish - self.get_start_time(TimeUnit.NANOSECONDS), TimeUnit.NANOSECONDS)

    def get_tags(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._tags)

    def get_log_events(self) -> List[LogEvent]:
        with self._lock:
            return list(self._logs)

    def get_references(self, reference_type: Union[str, ReferenceType]) -> List[SpanContext[T]]:
        return list(self._references.get(reference_key(reference_type), ()))

    def get_reference_types(self) -> List[str]:
        return list(self._references)

    def set_operation_name(self, operation_name: str) -> None:
        """
        Replace the operation name.

        Args:
            operation_name: New operation name
        """
        check_not_none(operation_name, "operation_name may not be None")
        with self._lock:
            if self._phase is SpanPhase.FINISHED:
                logger.debug(f"Ignoring rename of finished span {self._span_context}")
                return
            self._operation_name = operation_name

    def set_finish_time(self, finish_time_unit: TimeUnit, finish_timestamp: int) -> bool:
        """
        Seal the span with the given finish time.

        The check for an existing finish time and the write happen atomically,
        so among concurrent callers exactly one wins.

        Args:
            finish_time_unit: Unit of ``finish_timestamp``
            finish_timestamp: Finish time of the span

        Returns:
            True if this call finished the span, False if it was already finished
        """
        check_not_none(finish_time_unit, "finish_time_unit may not be None")
        check_not_none(finish_timestamp, "finish_timestamp may not be None")
        with self._lock:
            if self._phase is SpanPhase.FINISHED:
                return False
            self._finish_time_unit = finish_time_unit
            self._finish_timestamp = finish_timestamp
            self._phase = SpanPhase.FINISHED
            return True

    def put_tag(self, key: str, value: str) -> None:
        _check_tag(key, value)
        with self._lock:
            if self._phase is SpanPhase.FINISHED:
                logger.debug(f"Dropping tag '{key}' on finished span {self._span_context}")
                return
            self._tags[key] = value

    def add_log_event(self, log_event: LogEvent) -> None:
        check_not_none(log_event, "log_event may not be None")
        if not isinstance(log_event, LogEvent):
            raise InvalidArgumentError(f"log_event must be a LogEvent, got {type(log_event).__name__}")
        with self._lock:
            if self._phase is SpanPhase.FINISHED:
                logger.debug(f"Dropping log event on finished span {self._span_context}")
                return
            self._logs.append(log_event)

    def to_record(self) -> SpanRecord:
        with self._lock:
            return SpanRecord.from_span_data(self)

    def __str__(self) -> str:
        # Tag values and log payloads may carry sensitive data and are left out.
        with self._lock:
            parts = [f"operation_name='{self._operation_name}'"]
            ordered_types = [t for t in _DISPLAY_ORDER if t in self._references]
            ordered_types += [t for t in self._references if t not in _DISPLAY_ORDER]
            for reference_type in ordered_types:
                contexts = self._references[reference_type]
                if contexts:
                    parts.append(f"{reference_type}=[{','.join(str(c) for c in contexts)}]")
            parts.append(f"start_time_ms={self.get_start_time(TimeUnit.MILLISECONDS)}")
            if self._phase is SpanPhase.FINISHED:
                parts.append(f"finish_time_ms={self.get_finish_time(TimeUnit.MILLISECONDS)}")
            if self._tags:
                parts.append(f"tags=[{','.join(self._tags)}]")
        return f"Span({', '.join(parts)})"

    __repr__ = __str__
