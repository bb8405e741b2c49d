"""
Finish protocol: stamps the finish time on a span and hands it to a reporter once.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .errors import check_not_none
from .reporters.interfaces import QualityFlag, SpanReporter
from .span_state import SpanState
from .time_units import TimeUnit


@dataclass
class FinisherConfig:
    """Configuration for a SpanFinisher. ``clock_unit`` may be given by name, e.g. ``"nanoseconds"``."""
    clock_unit: Union[TimeUnit, str] = TimeUnit.MICROSECONDS
    flag_clock_skew: bool = True

    def __post_init__(self):
        self.clock_unit = TimeUnit.from_name(self.clock_unit)


class SpanFinisher:
    """
    Seals span states and reports them.

    The finisher keeps no per-span state. Whether a span gets reported is
    decided by :meth:`SpanState.set_finish_time`, which lets exactly one
    caller through; every other call is a no-op.
    """

    def __init__(
        self,
        reporter: SpanReporter,
        config: Optional[FinisherConfig] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize the SpanFinisher.

        Args:
            reporter: Receives every finished span exactly once
            config: Finisher configuration, defaults to FinisherConfig()
            clock: Zero-argument callable returning nanoseconds since the epoch,
                defaults to time.time_ns
        """
        self.reporter = check_not_none(reporter, "reporter may not be None")
        self.config = config or FinisherConfig()
        self.clock = clock or time.time_ns
        self.logger = logging.getLogger(self.__class__.__name__)

    def now(self) -> int:
        """Current time in the configured clock unit."""
        return self.config.clock_unit.convert(self.clock(), TimeUnit.NANOSECONDS)

    def finish(self, span_state: SpanState, unit: Optional[TimeUnit] = None,
               timestamp: Optional[int] = None) -> bool:
        """
        Finish a span, at ``timestamp`` if given, otherwise now.

        Explicit timestamps that are negative or earlier than the start time
        are kept as given and reported with quality flags.

        Args:
            span_state: State of the span to finish
            unit: Unit of ``timestamp``; required when ``timestamp`` is given
            timestamp: Explicit finish time

        Returns:
            True if this call finished and reported the span, False if the span
            had already been finished
        """
        check_not_none(span_state, "span_state may not be None")
        flags: List[QualityFlag] = []
        if timestamp is None:
            unit = self.config.clock_unit
            timestamp = self.now()
        else:
            check_not_none(unit, "unit may not be None")
            flags = self._check_finish_time(span_state, unit, timestamp)

        if not span_state.set_finish_time(unit, timestamp):
            self.logger.debug(f"Span {span_state.span_context} already finished, ignoring")
            return False

        if flags:
            self.logger.warning(
                f"Span {span_state.span_context} finished with suspicious time: "
                f"{', '.join(flag.value for flag in flags)}"
            )
        try:
            self.reporter.report(span_state, tuple(flags))
        except Exception as e:
            self.logger.error(f"Reporter failed for span {span_state.span_context}: {e}")
            raise
        return True

    def _check_finish_time(self, span_state: SpanState, unit: TimeUnit, timestamp: int) -> List[QualityFlag]:
        if not self.config.flag_clock_skew:
            return []
        flags = []
        if timestamp < 0:
            flags.append(QualityFlag.NEGATIVE_FINISH_TIME)
        if unit.to_nanos(timestamp) < span_state.get_start_time(TimeUnit.NANOSECONDS):
            flags.append(QualityFlag.FINISH_BEFORE_START)
        return flags
