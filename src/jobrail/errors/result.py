"""Result: a value or a typed failure.

Operations on Err pass the failure through untouched and never call the
supplied function, so a chain stops at its first failure:

    >>> Ok(120000.0).map(lambda v: v * 0.91)
    Ok(109200.0)
    >>> Err("negative").map(lambda v: v * 0.91)
    Err('negative')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .variant import Tagged

if TYPE_CHECKING:
    from .option import Option

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Result(Tagged, Generic[T, E]):
    """Ok(value) or Err(error). Build with Ok() and Err()."""
    
    __slots__ = ()
    _labels = ("Err", "Ok")
    
    def is_ok(self) -> bool:
        return self._hit
    
    def is_err(self) -> bool:
        return not self._hit
    
    # ─── Extraction ──────────────────────────────────────────────────────
    
    def unwrap(self) -> T:
        """Ok value. Raises RuntimeError on Err."""
        return self._take(True, "unwrap")  # type: ignore[return-value]
    
    def unwrap_err(self) -> E:
        """Err value. Raises RuntimeError on Ok."""
        return self._take(False, "unwrap_err")  # type: ignore[return-value]
    
    def unwrap_or(self, default: T) -> T:
        return self._value if self._hit else default  # type: ignore[return-value]
    
    # ─── Composition ─────────────────────────────────────────────────────
    
    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        if not self._hit:
            return self  # type: ignore[return-value]
        return Ok(f(self._value))  # type: ignore[arg-type]
    
    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Rewrite the failure, e.g. to push an operation onto an ErrorTrace."""
        if self._hit:
            return self  # type: ignore[return-value]
        return Err(f(self._value))  # type: ignore[arg-type]
    
    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Bind: continue with another fallible step."""
        if not self._hit:
            return self  # type: ignore[return-value]
        return f(self._value)  # type: ignore[arg-type]
    
    def inspect_err(self, f: Callable[[E], None]) -> Result[T, E]:
        """Run f on the failure for its side effect; return self."""
        if not self._hit:
            f(self._value)  # type: ignore[arg-type]
        return self
    
    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Fold both sides into one value."""
        return ok(self._value) if self._hit else err(self._value)  # type: ignore[arg-type]
    
    def to_option(self) -> Option[T]:
        """Some(value) on Ok, Nothing() on Err. The error is dropped."""
        from .option import Nothing, Some
        return Some(self._value) if self._hit else Nothing()  # type: ignore[arg-type]


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    return Result(value, True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    return Result(error, False)
