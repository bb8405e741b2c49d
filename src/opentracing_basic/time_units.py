"""
Time units and integer conversion between them.
"""

from enum import Enum
from typing import Union

from .errors import InvalidArgumentError, check_not_none


class TimeUnit(Enum):
    """A unit of time, valued by the number of nanoseconds it spans."""
    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 60 * 60 * 1_000_000_000
    DAYS = 24 * 60 * 60 * 1_000_000_000

    @property
    def nanos(self) -> int:
        return self.value

    def convert(self, duration: int, source_unit: "TimeUnit") -> int:
        """
        Convert ``duration`` expressed in ``source_unit`` into this unit.

        Conversions to a coarser unit truncate toward zero, so
        ``MILLISECONDS.convert(-1500, MICROSECONDS)`` is ``-1``.

        Args:
            duration: Integer amount in ``source_unit``
            source_unit: Unit ``duration`` is expressed in

        Returns:
            The duration expressed in this unit
        """
        check_not_none(source_unit, "source_unit may not be None")
        if source_unit.nanos >= self.nanos:
            return duration * (source_unit.nanos // self.nanos)
        ratio = self.nanos // source_unit.nanos
        truncated = abs(duration) // ratio
        return truncated if duration >= 0 else -truncated

    def to_nanos(self, duration: int) -> int:
        return TimeUnit.NANOSECONDS.convert(duration, self)

    def to_micros(self, duration: int) -> int:
        return TimeUnit.MICROSECONDS.convert(duration, self)

    def to_millis(self, duration: int) -> int:
        return TimeUnit.MILLISECONDS.convert(duration, self)

    @classmethod
    def from_name(cls, name: Union[str, "TimeUnit"]) -> "TimeUnit":
        """
        Resolve a unit from its (case-insensitive) name.

        Args:
            name: Unit name such as ``"microseconds"``, or a TimeUnit

        Returns:
            The matching TimeUnit
        """
        if isinstance(name, TimeUnit):
            return name
        check_not_none(name, "time unit name may not be None")
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown time unit '{name}'") from None
