"""
Unit tests for TimeUnit conversions.
"""

import pytest

from opentracing_basic import InvalidArgumentError, TimeUnit


class TestTimeUnit:
    """Test cases for TimeUnit."""

    def test_convert_to_coarser_unit(self):
        """Test that converting to a coarser unit divides."""
        assert TimeUnit.MILLISECONDS.convert(2_000_000, TimeUnit.MICROSECONDS) == 2000
        assert TimeUnit.SECONDS.convert(90_000, TimeUnit.MILLISECONDS) == 90

    def test_convert_to_finer_unit(self):
        """Test that converting to a finer unit is exact."""
        assert TimeUnit.MICROSECONDS.convert(1000, TimeUnit.MILLISECONDS) == 1_000_000
        assert TimeUnit.SECONDS.convert(1, TimeUnit.DAYS) == 86_400

    def test_convert_truncates_toward_zero(self):
        """Test that lossy conversions truncate toward zero for both signs."""
        assert TimeUnit.MILLISECONDS.convert(1999, TimeUnit.MICROSECONDS) == 1
        assert TimeUnit.MILLISECONDS.convert(-1500, TimeUnit.MICROSECONDS) == -1

    def test_convert_same_unit(self):
        assert TimeUnit.HOURS.convert(7, TimeUnit.HOURS) == 7

    def test_helpers(self):
        assert TimeUnit.MILLISECONDS.to_nanos(3) == 3_000_000
        assert TimeUnit.SECONDS.to_micros(2) == 2_000_000
        assert TimeUnit.MINUTES.to_millis(1) == 60_000

    def test_convert_requires_source_unit(self):
        """Test that a missing source unit is rejected."""
        with pytest.raises(InvalidArgumentError):
            TimeUnit.SECONDS.convert(1, None)

    @pytest.mark.parametrize("name, expected", [
        ("microseconds", TimeUnit.MICROSECONDS),
        ("  Seconds ", TimeUnit.SECONDS),
        (TimeUnit.DAYS, TimeUnit.DAYS),
    ])
    def test_from_name(self, name, expected):
        assert TimeUnit.from_name(name) is expected

    def test_from_name_unknown(self):
        """Test that unknown unit names raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            TimeUnit.from_name("fortnights")
