"""
Causal references between spans.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import InvalidArgumentError, check_not_none
from .span_context import SpanContext


class ReferenceType(str, Enum):
    """Well known reference types. Any other string is accepted as well."""
    CHILD_OF = "child_of"
    FOLLOWS_FROM = "follows_from"


class Reference(BaseModel):
    """A (reference type, target context) pair."""
    model_config = ConfigDict(frozen=True)

    reference_type: str = Field(..., description="Kind of causal relationship")
    referenced_context: SpanContext = Field(..., description="Context of the related span")

    @classmethod
    def child_of(cls, context: SpanContext) -> "Reference":
        return cls(reference_type=ReferenceType.CHILD_OF.value, referenced_context=context)

    @classmethod
    def follows_from(cls, context: SpanContext) -> "Reference":
        return cls(reference_type=ReferenceType.FOLLOWS_FROM.value, referenced_context=context)


def reference_key(reference_type: Union[str, ReferenceType]) -> str:
    """Normalise a reference type to the plain string used as a mapping key."""
    check_not_none(reference_type, "reference_type may not be None")
    if isinstance(reference_type, ReferenceType):
        return reference_type.value
    return str(reference_type)


def group_references(references: Iterable[Reference]) -> Dict[str, List[SpanContext]]:
    """
    Group references by type, preserving insertion order within each type.

    Args:
        references: References in the order they were supplied

    Returns:
        Mapping of reference type to the ordered list of target contexts
    """
    grouped: Dict[str, List[SpanContext]] = {}
    for reference in references:
        grouped.setdefault(reference.reference_type, []).append(reference.referenced_context)
    return grouped


def normalize_references(
    references: Union[None, Iterable[Reference], Mapping[Any, Sequence[SpanContext]]]
) -> Dict[str, List[SpanContext]]:
    """
    Build the private reference mapping held by a span.

    Accepts either an iterable of :class:`Reference` or a mapping of
    reference type to contexts. Every target context must be non-null.

    Args:
        references: References as supplied by the tracer

    Returns:
        A freshly allocated mapping of reference type to list of contexts
    """
    if references is None:
        return {}
    if isinstance(references, Mapping):
        grouped = {reference_key(key): list(contexts) for key, contexts in references.items()}
    else:
        grouped = group_references(references)
    for key, contexts in grouped.items():
        for context in contexts:
            if not isinstance(context, SpanContext):
                raise InvalidArgumentError(f"reference '{key}' must target a SpanContext, got {context!r}")
    return grouped
