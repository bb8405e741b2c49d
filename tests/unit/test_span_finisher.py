"""
Unit tests for SpanFinisher.
"""

import pytest

from opentracing_basic import (
    FinisherConfig,
    InvalidArgumentError,
    QualityFlag,
    SpanFinisher,
    SpanReporter,
    TimeUnit,
)


class RecordingReporter(SpanReporter):
    """Reporter that remembers every call and can be told to fail."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def report(self, span, quality_flags=()):
        self.calls.append((span, tuple(quality_flags)))
        if self.error is not None:
            raise self.error


class TestSpanFinisher:
    """Test cases for the finish protocol."""

    def test_requires_reporter(self):
        with pytest.raises(InvalidArgumentError):
            SpanFinisher(None)

    def test_now_uses_clock_unit(self, reporter, clock):
        assert SpanFinisher(reporter, clock=clock).now() == 5_000_000
        config = FinisherConfig(clock_unit=TimeUnit.NANOSECONDS)
        assert SpanFinisher(reporter, config=config, clock=clock).now() == 5_000_000_000

    def test_config_accepts_unit_name(self, reporter, clock):
        """Test that the clock unit can be configured by name."""
        config = FinisherConfig(clock_unit="milliseconds")
        assert config.clock_unit is TimeUnit.MILLISECONDS
        assert SpanFinisher(reporter, config=config, clock=clock).now() == 5_000

    def test_config_rejects_unknown_unit(self):
        with pytest.raises(InvalidArgumentError):
            FinisherConfig(clock_unit="fortnights")

    def test_finish_now(self, finisher, reporter, span_state):
        """Test that finishing without a timestamp stamps the clock time."""
        assert finisher.finish(span_state) is True
        assert span_state.get_finish_time(TimeUnit.MICROSECONDS) == 5_000_000
        records = reporter.get_finished_spans()
        assert len(records) == 1
        assert records[0].finish_time_micros == 5_000_000

    def test_finish_explicit_time(self, finisher, reporter, span_state):
        assert finisher.finish(span_state, TimeUnit.MICROSECONDS, 2_000_000) is True
        assert span_state.get_finish_time(TimeUnit.MILLISECONDS) == 2000
        assert reporter.get_quality_flags(str(span_state.span_context)) == ()

    def test_finish_twice_reports_once(self, finisher, reporter, span_state, clock):
        """Test that the second finish is a no-op."""
        finisher.finish(span_state)
        clock.advance(TimeUnit.SECONDS, 10)
        assert finisher.finish(span_state) is False
        assert finisher.finish(span_state, TimeUnit.MILLISECONDS, 99_000) is False
        assert span_state.get_finish_time(TimeUnit.MICROSECONDS) == 5_000_000
        assert len(reporter.get_finished_spans()) == 1

    def test_explicit_time_requires_unit(self, finisher, span_state):
        with pytest.raises(InvalidArgumentError):
            finisher.finish(span_state, None, 2000)
        assert span_state.is_finished is False

    def test_requires_span_state(self, finisher):
        with pytest.raises(InvalidArgumentError):
            finisher.finish(None)

    def test_finish_before_start_is_flagged(self, finisher, reporter, span_state, caplog):
        """Test that clock skew is tolerated but reported."""
        assert finisher.finish(span_state, TimeUnit.MILLISECONDS, 500) is True
        assert span_state.get_finish_time(TimeUnit.MILLISECONDS) == 500
        assert reporter.get_quality_flags(str(span_state.span_context)) == (QualityFlag.FINISH_BEFORE_START,)
        assert "finish_before_start" in caplog.text

    def test_negative_finish_time_is_flagged(self, finisher, reporter, span_state):
        finisher.finish(span_state, TimeUnit.MILLISECONDS, -5)
        assert reporter.get_quality_flags(str(span_state.span_context)) == (
            QualityFlag.NEGATIVE_FINISH_TIME,
            QualityFlag.FINISH_BEFORE_START,
        )

    def test_flagging_can_be_disabled(self, reporter, clock, span_state):
        finisher = SpanFinisher(reporter, config=FinisherConfig(flag_clock_skew=False), clock=clock)
        finisher.finish(span_state, TimeUnit.MILLISECONDS, 500)
        assert reporter.get_quality_flags(str(span_state.span_context)) == ()
        assert len(reporter.get_finished_spans()) == 1

    def test_reporter_receives_sealed_state(self, clock, span_state):
        recording = RecordingReporter()
        SpanFinisher(recording, clock=clock).finish(span_state)
        assert len(recording.calls) == 1
        reported, flags = recording.calls[0]
        assert reported is span_state
        assert reported.is_finished is True
        assert flags == ()

    def test_reporter_failure_propagates_once(self, clock, span_state):
        """Test that a failing reporter surfaces its error and is not retried."""
        failing = RecordingReporter(error=RuntimeError("exporter down"))
        finisher = SpanFinisher(failing, clock=clock)

        with pytest.raises(RuntimeError, match="exporter down"):
            finisher.finish(span_state)

        assert span_state.is_finished is True
        assert finisher.finish(span_state) is False
        assert len(failing.calls) == 1
