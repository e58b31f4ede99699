"""Tests for Maybe monad implementation.

Validates:
- Functor laws
- Monad laws
- Short-circuit on Nothing
- Invariant: Just never holds None
"""

from __future__ import annotations

from typing import Callable

import pytest

from fpkit import ErrorCode, InvariantViolation, pipe
from fpkit.monads import Err, Just, Maybe, Nothing, Ok, from_nullable, maybe


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    m: Maybe[int] = Just(42)
    assert m.map(lambda x: x) == m

    empty: Maybe[int] = Nothing()
    assert empty.map(lambda x: x) == empty


def test_functor_composition() -> None:
    """Functor law: fmap (g . f) = fmap g . fmap f"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    for m in (Just(5), Nothing()):
        assert m.map(lambda x: g(f(x))) == m.map(f).map(g)
        assert maybe.map(lambda x: g(f(x)))(m) == pipe(maybe.map(f), maybe.map(g))(m)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Maybe[int]] = lambda x: Just(x * 2)
    assert Just(21).flat_map(f) == f(21)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    for m in (Just(42), Nothing()):
        assert m.flat_map(Just) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    f: Callable[[int], Maybe[int]] = lambda x: Just(x + 1)
    g: Callable[[int], Maybe[int]] = lambda x: Just(x * 2) if x < 10 else Nothing()

    for m in (Just(5), Just(9), Nothing()):
        assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_just_construction() -> None:
    m = Just(42)
    assert m.is_just()
    assert not m.is_nothing()
    assert m.unwrap_or(0) == 42
    assert m.to_optional() == 42


def test_falsy_values_are_present() -> None:
    """0, "" and [] are real values, not absence."""
    for v in (0, "", [], False):
        assert Just(v).is_just()
        assert from_nullable(v).is_just()


def test_nothing_construction() -> None:
    m: Maybe[int] = Nothing()
    assert m.is_nothing()
    assert m.unwrap_or(7) == 7
    assert m.to_optional() is None
    assert Nothing() == Nothing()


def test_just_none_is_invariant_violation() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        Just(None)
    assert exc_info.value.code is ErrorCode.INVARIANT_VIOLATION
    assert exc_info.value.info.operation == "maybe.Just"


def test_map_returning_none_is_invariant_violation() -> None:
    with pytest.raises(InvariantViolation):
        Just({"a": 1}).map(lambda d: d.get("missing"))


@pytest.mark.parametrize(
    ("value", "ok", "expected"),
    [
        (5, True, Just(5)),
        (5, False, Nothing()),
        (None, True, Nothing()),
        (None, False, Nothing()),
        ("", True, Just("")),
    ],
)
def test_from_nullable_truth_table(value: object, ok: bool, expected: Maybe[object]) -> None:
    assert from_nullable(value, ok) == expected


def test_from_nullable_default_flag() -> None:
    assert from_nullable({"k": 1}.get("k")) == Just(1)
    assert from_nullable({"k": 1}.get("x")) == Nothing()


# ═════════════════════════════════════════════════════════════════════════════
# Short-circuit
# ═════════════════════════════════════════════════════════════════════════════


def test_map_on_nothing_never_calls(make_counter) -> None:
    f = make_counter(lambda x: x * 2)
    assert Nothing().map(f) == Nothing()
    assert maybe.map(f)(Nothing()) == Nothing()
    assert f.calls == 0


def test_bind_on_nothing_never_calls(make_counter) -> None:
    f = make_counter(lambda x: Just(x))
    assert Nothing().flat_map(f) == Nothing()
    assert maybe.bind(f)(Nothing()) == Nothing()
    assert f.calls == 0


def test_bind_does_not_double_wrap() -> None:
    assert maybe.bind(lambda x: Just(x + 1))(Just(1)) == Just(2)
    assert maybe.bind(lambda _: Nothing())(Just(1)) == Nothing()


def test_caller_exceptions_propagate() -> None:
    def boom(_: int) -> int:
        raise KeyError("caller bug")

    with pytest.raises(KeyError):
        Just(1).map(boom)


# ═════════════════════════════════════════════════════════════════════════════
# Pattern Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_match_round_trip(make_counter) -> None:
    on_nothing = make_counter(lambda: "none")
    on_just = make_counter(lambda v: f"got {v}")
    eliminate = maybe.match(on_nothing, on_just)

    assert eliminate(Just(3)) == on_just(3)
    assert eliminate(Nothing()) == on_nothing()
    # one branch per elimination, plus the two direct calls above
    assert (on_nothing.calls, on_just.calls) == (2, 2)


def test_match_method() -> None:
    assert Just(5).match(nothing=lambda: "none", just=str) == "5"
    assert Nothing().match(nothing=lambda: "none", just=str) == "none"


def test_structural_pattern_matching() -> None:
    match Just(5):
        case Maybe(v) if v is not None:
            assert v == 5
        case _:
            pytest.fail("expected Just")


# ═════════════════════════════════════════════════════════════════════════════
# Helpers
# ═════════════════════════════════════════════════════════════════════════════


def test_filter() -> None:
    assert Just(4).filter(lambda x: x % 2 == 0) == Just(4)
    assert Just(3).filter(lambda x: x % 2 == 0) == Nothing()
    assert Nothing().filter(lambda x: True) == Nothing()


def test_or_else_and_unwrap_or_else() -> None:
    assert Nothing().or_else(lambda: Just(1)) == Just(1)
    assert Just(2).or_else(lambda: Just(1)) == Just(2)
    assert Nothing().unwrap_or_else(lambda: 9) == 9


def test_to_result() -> None:
    error = LookupError("absent")
    assert Just(1).to_result(error) == Ok(1)
    assert Nothing().to_result(error) == Err(error)


def test_dunders() -> None:
    assert bool(Just(0)) is True
    assert bool(Nothing()) is False
    assert list(Just(1)) == [1]
    assert list(Nothing()) == []
    assert repr(Just(1)) == "Just(1)"
    assert repr(Nothing()) == "Nothing"
    assert len({Just(1), Just(1), Nothing()}) == 2
