"""Error values carried by Err: context stacking and provenance tracking.

Uses Pydantic models so traces can be dumped to JSON for logging.
"""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer

# JSON type aliases - Any for recursive slots
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]


class ErrorContext(BaseModel):
    """Context for an error at a call site: operation, location, metadata."""
    
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid", revalidate_instances="never")

    operation: Annotated[str, Field(min_length=1)]
    location: str = Field(default="", repr=False)
    metadata: JsonDict = Field(default_factory=dict, repr=False)
    
    def __str__(self) -> str:
        loc = f" at {self.location}" if self.location else ""
        meta = f" ({', '.join(f'{k}={v}' for k, v in self.metadata.items())})" if self.metadata else ""
        return f"{self.operation}{loc}{meta}"
    
    def __hash__(self) -> int:
        return hash((self.operation, self.location, tuple(sorted(self.metadata.items()))))


_EMPTY_CONTEXTS: tuple[ErrorContext, ...] = ()


class ErrorTrace(BaseModel):
    """Stack of error contexts forming a call chain trace.
    
    Immutable: every with_* method returns a new trace. The innermost
    operation comes first in `contexts`.
    """
    
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid", revalidate_instances="never")
    
    message: Annotated[str, Field(min_length=1)]
    contexts: tuple[ErrorContext, ...] = _EMPTY_CONTEXTS
    error_code: str | None = None
    recoverable: bool = True
    
    @field_serializer("contexts")
    def _serialize_contexts(self, v: tuple[ErrorContext, ...]) -> list[JsonDict]:
        return [ctx.model_dump() for ctx in v]
    
    @computed_field
    @property
    def root_operation(self) -> str | None:
        """First operation in the trace (origin)."""
        return self.contexts[0].operation if self.contexts else None
    
    def __hash__(self) -> int:
        return hash((self.message, self.error_code, self.recoverable))

    def with_context(self, ctx: ErrorContext) -> ErrorTrace:
        """Add context to trace (returns new trace)."""
        return ErrorTrace.model_construct(
            message=self.message,
            contexts=(*self.contexts, ctx),
            error_code=self.error_code,
            recoverable=self.recoverable,
        )

    def with_operation(self, operation: str, location: str = "", **metadata: JsonValue) -> ErrorTrace:
        """Add context with operation info."""
        return self.with_context(context(operation, location, **metadata))

    def with_code(self, code: str) -> ErrorTrace:
        """Return new trace with error code set."""
        return ErrorTrace.model_construct(
            message=self.message,
            contexts=self.contexts,
            error_code=code,
            recoverable=self.recoverable,
        )

    def format(self) -> str:
        """Format trace as human-readable string."""
        parts = [self.message]
        if self.error_code:
            parts.append(f" [{self.error_code}]")
        if self.contexts:
            parts.append("\nContext trace:\n" + "\n".join(f"  - {ctx}" for ctx in self.contexts))
        return "".join(parts)

    __str__ = format


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers (model_construct skips validation on hot paths)
# ═══════════════════════════════════════════════════════════════════════════════


def context(operation: str, location: str = "", **metadata: JsonValue) -> ErrorContext:
    """Create ErrorContext concisely. metadata is copied so contexts never share a dict."""
    return ErrorContext.model_construct(operation=operation, location=location, metadata=dict(metadata))


def trace(message: str, *, code: str | None = None, recoverable: bool = True) -> ErrorTrace:
    """Create ErrorTrace concisely."""
    return ErrorTrace.model_construct(message=message, contexts=_EMPTY_CONTEXTS, error_code=code, recoverable=recoverable)
