"""
In-memory reporter that keeps finished spans for inspection.
"""

import logging
import threading
from typing import Dict, List, Sequence, Tuple

from ..models.span_data import SpanData
from ..models.span_record import SpanRecord
from .interfaces import QualityFlag, SpanReporter


class InMemoryReporter(SpanReporter):
    """
    Collects finished spans as :class:`SpanRecord` snapshots.

    Safe to share between threads.
    """

    def __init__(self):
        self._records: List[SpanRecord] = []
        self._quality_flags: Dict[str, Tuple[QualityFlag, ...]] = {}
        self._lock = threading.Lock()
        self.logger = logging.getLogger(self.__class__.__name__)

    def report(self, span: SpanData, quality_flags: Sequence[QualityFlag] = ()) -> None:
        record = SpanRecord.from_span_data(span)
        with self._lock:
            self._records.append(record)
            if quality_flags:
                self._quality_flags[record.context] = tuple(quality_flags)
        self.logger.debug(f"Collected span '{record.operation_name}' ({record.context})")

    def get_finished_spans(self) -> List[SpanRecord]:
        with self._lock:
            return list(self._records)

    def get_quality_flags(self, context: str) -> Tuple[QualityFlag, ...]:
        """
        Quality flags reported with a span.

        Args:
            context: Rendered span context, as found in ``SpanRecord.context``

        Returns:
            The flags, empty when the span was reported clean
        """
        with self._lock:
            return self._quality_flags.get(context, ())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._quality_flags.clear()
