"""Error codes and constructors for the two failure kinds.

Absence is not an error and is modelled by Option. Only genuine faults
(invalid input) and the explicit not-found variant of a lookup are
represented as ErrorTrace values here.
"""

from __future__ import annotations

from enum import StrEnum

from .types import ErrorTrace, JsonValue, trace


class ErrorCode(StrEnum):
    """Standard error codes carried by ErrorTrace.error_code."""
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN = "UNKNOWN"


def invalid_input(message: str, operation: str, **metadata: JsonValue) -> ErrorTrace:
    """Trace for a value the operation refuses to process. Not recoverable."""
    return trace(message, code=ErrorCode.INVALID_INPUT.value, recoverable=False).with_operation(operation, **metadata)


def not_found(message: str, operation: str, **metadata: JsonValue) -> ErrorTrace:
    """Trace for a lookup that found nothing, when a caller asked for a failure instead of Nothing."""
    return trace(message, code=ErrorCode.NOT_FOUND.value).with_operation(operation, **metadata)


def is_invalid_input(error: ErrorTrace) -> bool:
    return error.error_code == ErrorCode.INVALID_INPUT
