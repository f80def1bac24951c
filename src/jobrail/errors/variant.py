"""Shared shape of Result and Option.

Both are a value plus one flag saying which side of the rail it sits on:
Ok/Some is the hit side, Err/Nothing the miss side. Equality, hashing,
truthiness and repr are defined once here; the monadic operations live on
the subclasses.
"""

from __future__ import annotations

from typing import ClassVar


class Tagged:
    """Immutable (value, hit) pair. Subclasses name the two sides."""
    
    __slots__ = ("_value", "_hit")
    
    # (miss label, hit label)
    _labels: ClassVar[tuple[str, str]] = ("Miss", "Hit")
    # Nothing carries no payload, so it renders without one
    _bare_miss: ClassVar[bool] = False
    
    def __init__(self, value: object, hit: bool) -> None:
        self._value = value
        self._hit = hit
    
    def _take(self, want_hit: bool, op: str) -> object:
        """Payload of the wanted side. Raises RuntimeError on the other one."""
        if self._hit is want_hit:
            return self._value
        raise RuntimeError(f"{op}() on {self!r}")
    
    def __bool__(self) -> bool:
        return self._hit
    
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._hit == other._hit and self._value == other._value  # type: ignore[attr-defined]
    
    def __hash__(self) -> int:
        return hash((type(self).__name__, self._hit, self._value))
    
    def __repr__(self) -> str:
        label = self._labels[self._hit]
        if not self._hit and self._bare_miss:
            return f"{label}()"
        return f"{label}({self._value!r})"
    
    __str__ = __repr__
