"""
Log event model for timestamped structured annotations on a span.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ..time_units import TimeUnit


class LogEvent(BaseModel):
    """A point-in-time note attached to a span: structured fields or a message."""
    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., ge=0, description="Time the event happened, in `unit`")
    unit: TimeUnit = Field(TimeUnit.MICROSECONDS, description="Unit of `timestamp`")
    fields: Optional[Mapping[str, Any]] = Field(None, description="Structured key/value payload, read-only")
    message: Optional[str] = Field(None, description="Bare event message")

    @field_validator("fields")
    @classmethod
    def _freeze_fields(cls, value: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    @field_serializer("fields")
    def _serialize_fields(self, value: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        return None if value is None else dict(value)

    @model_validator(mode="after")
    def _check_payload(self) -> "LogEvent":
        if self.fields is None and self.message is None:
            raise ValueError("a log event needs fields or a message")
        return self

    @classmethod
    def of_fields(cls, timestamp: int, fields: Mapping[str, Any],
                  unit: TimeUnit = TimeUnit.MICROSECONDS) -> "LogEvent":
        return cls(timestamp=timestamp, unit=unit, fields=dict(fields))

    @classmethod
    def of_message(cls, timestamp: int, message: str,
                   unit: TimeUnit = TimeUnit.MICROSECONDS) -> "LogEvent":
        return cls(timestamp=timestamp, unit=unit, message=message)

    def get_timestamp(self, unit: TimeUnit) -> int:
        return unit.convert(self.timestamp, self.unit)

    def __hash__(self) -> int:
        return hash((self.timestamp, self.unit, self.message))
