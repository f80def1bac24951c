"""Tests for Option monad: absence as a value."""

from __future__ import annotations

from typing import Callable

import pytest

from jobrail.errors import Err, Nothing, Ok, Option, Some, from_nullable


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    assert Some(3).map(lambda x: x) == Some(3)
    assert Nothing().map(lambda x: x) == Nothing()


def test_monad_left_identity() -> None:
    f: Callable[[int], Option[int]] = lambda x: Some(x + 1)
    assert Some(1).flat_map(f) == f(1)


def test_monad_associativity() -> None:
    f: Callable[[int], Option[int]] = lambda x: Some(x + 1)
    g: Callable[[int], Option[int]] = lambda x: Some(x * 2) if x < 10 else Nothing()
    
    for m in (Some(4), Some(9), Nothing()):
        assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_from_nullable() -> None:
    assert from_nullable(5) == Some(5)
    assert from_nullable(None) == Nothing()
    assert from_nullable(0) == Some(0)
    assert from_nullable("") == Some("")


def test_some_of_none_is_present() -> None:
    opt = Some(None)
    assert opt.is_some()
    assert opt != Nothing()


def test_extraction() -> None:
    assert Some(2).unwrap() == 2
    assert Some(2).unwrap_or(0) == 2
    assert Nothing().unwrap_or(0) == 0
    assert Nothing().is_none()


def test_unwrap_nothing_raises() -> None:
    with pytest.raises(RuntimeError, match=r"unwrap\(\) on Nothing\(\)"):
        Nothing().unwrap()


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def test_nothing_short_circuits() -> None:
    calls: list[int] = []
    
    def step(x: int) -> Option[int]:
        calls.append(x)
        return Some(x)
    
    assert Nothing().flat_map(step).map(lambda x: calls.append(x)) == Nothing()
    assert calls == []


def test_filter() -> None:
    assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)
    assert Some(3).filter(lambda x: x % 2 == 0) == Nothing()
    assert Nothing().filter(lambda x: True) == Nothing()


def test_ok_or_else() -> None:
    built: list[str] = []
    
    def missing() -> str:
        built.append("x")
        return "missing"
    
    assert Some(1).ok_or_else(missing) == Ok(1)
    assert built == []
    assert Nothing().ok_or_else(missing) == Err("missing")
    assert built == ["x"]


def test_match_and_inspect() -> None:
    seen: list[int] = []
    Some(5).inspect(seen.append)
    Nothing().inspect(seen.append)
    
    assert seen == [5]
    assert Some(5).match(some=lambda v: v * 2, nothing=lambda: -1) == 10
    assert Nothing().match(some=lambda v: v * 2, nothing=lambda: -1) == -1


def test_structural_pattern_does_not_bind_nothing() -> None:
    def describe(opt: Option[int]) -> str:
        match opt:
            case Option(v):  # type: ignore[misc]
                return f"bound {v}"
            case _:
                return "unbound"
    
    with pytest.raises(TypeError):
        describe(Nothing())


def test_value_semantics() -> None:
    assert bool(Some(0))
    assert not bool(Nothing())
    assert repr(Some(1)) == "Some(1)"
    assert repr(Nothing()) == "Nothing()"
    assert Nothing() is Nothing()
    assert Some(1) != Ok(1)
