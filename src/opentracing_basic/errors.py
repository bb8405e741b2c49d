"""
Exception types raised by the span core.
"""


class TracingError(Exception):
    """Base class for all errors raised by opentracing_basic."""
    pass


class InvalidArgumentError(TracingError, ValueError):
    """Raised when a required argument is missing or malformed."""
    pass


def check_not_none(value, message: str):
    """
    Return ``value`` unchanged or fail fast when it is ``None``.

    Args:
        value: Value to check
        message: Error message used when the check fails

    Returns:
        The original value
    """
    if value is None:
        raise InvalidArgumentError(message)
    return value
