"""Option: a value or its explicit absence.

Lookups return an Option and derived values are built with map, flat_map
and filter, so the first absence ends the chain:

    >>> from_nullable({"a": 1}.get("b")).map(lambda v: v + 1).unwrap_or(0)
    0
    >>> Some(2).flat_map(lambda a: Some(3).map(lambda b: a + b))
    Some(5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .variant import Tagged

if TYPE_CHECKING:
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(Tagged, Generic[T]):
    """Some(value) or Nothing(). Absence is not a failure and carries no error."""
    
    __slots__ = ()
    _labels = ("Nothing", "Some")
    _bare_miss = True
    
    def is_some(self) -> bool:
        return self._hit
    
    def is_none(self) -> bool:
        return not self._hit
    
    # ─── Extraction ──────────────────────────────────────────────────────
    
    def unwrap(self) -> T:
        """Some value. Raises RuntimeError on Nothing."""
        return self._take(True, "unwrap")  # type: ignore[return-value]
    
    def unwrap_or(self, default: T) -> T:
        return self._value if self._hit else default  # type: ignore[return-value]
    
    # ─── Composition ─────────────────────────────────────────────────────
    
    def map(self, f: Callable[[T], U]) -> Option[U]:
        if not self._hit:
            return self  # type: ignore[return-value]
        return Some(f(self._value))  # type: ignore[arg-type]
    
    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Bind: continue with another lookup that may come up empty."""
        if not self._hit:
            return self  # type: ignore[return-value]
        return f(self._value)  # type: ignore[arg-type]
    
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate holds."""
        if self._hit and predicate(self._value):  # type: ignore[arg-type]
            return self
        return _NOTHING  # type: ignore[return-value]
    
    def inspect(self, f: Callable[[T], None]) -> Option[T]:
        """Run f on the value for its side effect; return self."""
        if self._hit:
            f(self._value)  # type: ignore[arg-type]
        return self
    
    def match(self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:
        """Fold both sides into one value."""
        return some(self._value) if self._hit else nothing()  # type: ignore[arg-type]
    
    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        """Turn absence into a failure; f runs only on Nothing."""
        from .result import Err, Ok
        return Ok(self._value) if self._hit else Err(f())  # type: ignore[arg-type]


_NOTHING: Option[object] = Option(None, False)


def Some(value: T) -> Option[T]:  # noqa: N802
    return Option(value, True)


def Nothing() -> Option[T]:  # noqa: N802
    return _NOTHING  # type: ignore[return-value]


def from_nullable(value: T | None) -> Option[T]:
    """None becomes Nothing(), anything else Some(value)."""
    return _NOTHING if value is None else Some(value)  # type: ignore[return-value]
