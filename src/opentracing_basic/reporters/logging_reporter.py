"""
Reporter that writes finished spans to the standard logging system.
"""

import logging
from typing import Sequence

from ..models.span_data import SpanData
from .interfaces import QualityFlag, SpanReporter


class LoggingReporter(SpanReporter):
    """Logs the diagnostic string of every finished span; tag values are never written."""

    def __init__(self, logger_name: str = "opentracing_basic.spans", level: int = logging.INFO):
        """
        Initialize the reporter.

        Args:
            logger_name: Name of the logger spans are written to
            level: Level used for clean spans; flagged spans go out as warnings
        """
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def report(self, span: SpanData, quality_flags: Sequence[QualityFlag] = ()) -> None:
        if quality_flags:
            flags = ",".join(flag.value for flag in quality_flags)
            self.logger.warning(f"Finished {span} [quality: {flags}]")
        else:
            self.logger.log(self.level, f"Finished {span}")
