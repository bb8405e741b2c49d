"""
Span context model: the immutable identity of a span within a trace.
"""

import uuid
from types import MappingProxyType
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..errors import InvalidArgumentError, check_not_none

T = TypeVar("T")

_HEX_DIGITS = frozenset("0123456789abcdef")


def _generate_id(bits: int) -> str:
    return uuid.uuid4().hex[: bits // 4]


class TraceContext(BaseModel):
    """
    Default trace context payload: hex encoded trace and span ids.

    Identity is the (trace_id, span_id) pair; the sampling decision is carried
    along but does not affect equality.
    """
    model_config = ConfigDict(frozen=True)

    trace_id: str = Field(..., description="Hex trace identifier (64 or 128 bit)")
    span_id: str = Field(..., description="Hex span identifier (64 bit)")
    sampled: bool = Field(True, description="Sampling decision made by the tracer")

    @field_validator("trace_id")
    @classmethod
    def _check_trace_id(cls, value: str) -> str:
        value = value.lower()
        if len(value) not in (16, 32) or not set(value) <= _HEX_DIGITS:
            raise ValueError("trace_id must be 16 or 32 hex characters")
        return value

    @field_validator("span_id")
    @classmethod
    def _check_span_id(cls, value: str) -> str:
        value = value.lower()
        if len(value) != 16 or not set(value) <= _HEX_DIGITS:
            raise ValueError("span_id must be 16 hex characters")
        return value

    @classmethod
    def new_root(cls, trace_id_bits: int = 128, sampled: bool = True) -> "TraceContext":
        """
        Generate the payload for the first span of a new trace.

        Args:
            trace_id_bits: Either 64 or 128
            sampled: Sampling decision to carry

        Returns:
            A TraceContext with freshly generated ids
        """
        if trace_id_bits not in (64, 128):
            raise InvalidArgumentError("trace_id_bits must be 64 or 128")
        return cls(trace_id=_generate_id(trace_id_bits), span_id=_generate_id(64), sampled=sampled)

    def new_child(self) -> "TraceContext":
        """Generate the payload for a new span in the same trace."""
        return TraceContext(trace_id=self.trace_id, span_id=_generate_id(64), sampled=self.sampled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraceContext):
            return NotImplemented
        return (self.trace_id, self.span_id) == (other.trace_id, other.span_id)

    def __hash__(self) -> int:
        return hash((self.trace_id, self.span_id))

    def __str__(self) -> str:
        return f"{self.trace_id}:{self.span_id}"


class SpanContext(BaseModel, Generic[T]):
    """
    Immutable span identity plus baggage.

    The identity itself is an opaque payload of type ``T`` so that the id
    encoding stays pluggable. Two contexts are equal, and hash alike, when
    their payloads are equal; baggage is carried along but never takes part
    in identity.
    """
    model_config = ConfigDict(frozen=True)

    trace_context: T = Field(..., description="Opaque trace/span identity payload")
    baggage: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Propagated key/value items, read-only"
    )

    def __init__(self, trace_context: T, baggage: Optional[Mapping[str, str]] = None, **data: Any):
        check_not_none(trace_context, "trace_context may not be None")
        super().__init__(trace_context=trace_context, baggage=dict(baggage or {}), **data)

    @field_validator("trace_context", mode="before")
    @classmethod
    def _check_trace_context(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("trace_context may not be None")
        return value

    @field_validator("baggage")
    @classmethod
    def _freeze_baggage(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("baggage")
    def _serialize_baggage(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)

    def get_baggage_item(self, key: str) -> Optional[str]:
        return self.baggage.get(key)

    def baggage_items(self) -> Dict[str, str]:
        return dict(self.baggage)

    def with_baggage_item(self, key: str, value: str) -> "SpanContext[T]":
        """
        Return a new context carrying one more baggage item.

        Args:
            key: Baggage key
            value: Baggage value

        Returns:
            A context with the same identity and the extended baggage
        """
        check_not_none(key, "baggage key may not be None")
        check_not_none(value, "baggage value may not be None")
        baggage = dict(self.baggage)
        baggage[key] = value
        return type(self)(self.trace_context, baggage)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpanContext):
            return NotImplemented
        return self.trace_context == other.trace_context

    def __hash__(self) -> int:
        return hash(self.trace_context)

    def __str__(self) -> str:
        return str(self.trace_context)
