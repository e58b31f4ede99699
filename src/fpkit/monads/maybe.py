"""Maybe monad for optional values.

A Maybe is either Just(value) or Nothing. It replaces explicit ``is None``
checks with a chain of transformations that silently skip once a value is
missing, so calling code only spells out the happy path.

Two equivalent surfaces are provided:
- Methods: ``Just(5).map(f).match(nothing=..., just=...)``
- Curried functions: ``map(f)``, ``bind(f)``, ``match(on_nothing, on_just)``
  return ``Maybe -> ...`` functions that slot directly into ``pipe``.

None is Python's native null, so it is the only value treated as absent.
Wrapping None in Just is a programming error and raises InvariantViolation.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    TypeVar,
    cast,
)

from fpkit.foundation.errors import InvariantViolation
from fpkit.runtime.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

A = TypeVar("A")  # Contained type
B = TypeVar("B")  # Mapped type

_log = get_logger("fpkit.maybe")


class Maybe(Generic[A]):
    """Optional value: Just(value) or Nothing.

    Examples:
        >>> Just(5).map(lambda x: x * 2)
        Just(10)
        >>> Nothing().map(lambda x: x * 2)
        Nothing

        >>> Just(5).match(nothing=lambda: "none", just=str)
        '5'

    Notes:
        - Immutable; every operation returns a new Maybe
        - Just never holds None
    """

    __slots__ = ("_value", "_is_just")
    __match_args__ = ("_value",)

    def __init__(self, value: A | None, is_just: bool) -> None:
        """Private constructor. Use Just() or Nothing() instead."""
        self._value = value
        self._is_just = is_just

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_just(self) -> bool:
        return self._is_just

    def is_nothing(self) -> bool:
        return not self._is_just

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap_or(self, default: A) -> A:
        """Extract value or return default."""
        return cast(A, self._value) if self._is_just else default

    def unwrap_or_else(self, f: Callable[[], A]) -> A:
        """Extract value or compute a default lazily."""
        return cast(A, self._value) if self._is_just else f()

    def to_optional(self) -> A | None:
        """Convert to a plain Optional: the value, or None."""
        return self._value if self._is_just else None

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> Maybe[B]:
        """Apply f to the value if Just; Nothing passes through and f is not called.

        Type signature: Maybe[A] -> (A -> B) -> Maybe[B]

        Raises:
            InvariantViolation: If f returns None for a Just value
        """
        if self._is_just:
            return Just(f(cast(A, self._value)))
        return Nothing()

    def flat_map(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Monadic bind (>>=). f returns a Maybe, so no double wrapping occurs.

        Type signature: Maybe[A] -> (A -> Maybe[B]) -> Maybe[B]
        """
        if self._is_just:
            return f(cast(A, self._value))
        return Nothing()

    def and_then(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        """Alias for flat_map."""
        return self.flat_map(f)

    def filter(self, predicate: Callable[[A], bool]) -> Maybe[A]:
        """Keep the value only if predicate holds."""
        if self._is_just and predicate(cast(A, self._value)):
            return self
        return Nothing()

    def or_else(self, f: Callable[[], Maybe[A]]) -> Maybe[A]:
        """Return self if Just, otherwise the alternative produced by f."""
        return self if self._is_just else f()

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def match(
        self,
        *,
        nothing: Callable[[], B],
        just: Callable[[A], B],
    ) -> B:
        """Total elimination: exactly one of the two branches is invoked.

        Example:
            >>> Nothing().match(nothing=lambda: "none", just=str)
            'none'
        """
        if self._is_just:
            return just(cast(A, self._value))
        return nothing()

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_result(self, error: Exception) -> Result[A]:
        """Convert to Result: Ok(value) if Just, Err(error) if Nothing."""
        from .result import Err, Ok
        return Ok(cast(A, self._value)) if self._is_just else Err(error)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_just

    def __repr__(self) -> str:
        return f"Just({self._value!r})" if self._is_just else "Nothing"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._is_just == other._is_just and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_just, self._value))

    def __iter__(self) -> Iterator[A]:
        """Iterate over the value (yields 0 or 1 element)."""
        if self._is_just:
            yield cast(A, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════

_NOTHING: Maybe[object] = Maybe(None, is_just=False)


def Just(value: A) -> Maybe[A]:  # noqa: N802
    """Construct a present value.

    Raises:
        InvariantViolation: If value is None. A present Maybe never holds
            nothing; use from_nullable() for values that may be None.
    """
    if value is None:
        _log.error("invariant violated", operation="maybe.Just", reason="value is None")
        raise InvariantViolation.create("maybe.Just", "cannot wrap None as a present value")
    return Maybe(value, is_just=True)


def Nothing() -> Maybe[A]:  # noqa: N802
    """Construct the absent value."""
    return cast(Maybe[A], _NOTHING)


def from_nullable(value: A | None, ok: bool = True) -> Maybe[A]:
    """Adapt a (value, ok) pair into a Maybe.

    None or ok=False gives Nothing; anything else is Just(value). Intended
    for APIs such as ``dict.get`` or functions returning ``(value, found)``.

    Example:
        >>> from_nullable({"a": 1}.get("b"))
        Nothing
        >>> from_nullable(0, True)
        Just(0)
        >>> from_nullable("x", False)
        Nothing
    """
    if value is None or not ok:
        return Nothing()
    return Just(value)


# ═════════════════════════════════════════════════════════════════════════════
# Curried Operations
# ═════════════════════════════════════════════════════════════════════════════


def map(f: Callable[[A], B]) -> Callable[[Maybe[A]], Maybe[B]]:  # noqa: A001
    """Lift f into a Maybe[A] -> Maybe[B] function."""
    return lambda m: m.map(f)


def bind(f: Callable[[A], Maybe[B]]) -> Callable[[Maybe[A]], Maybe[B]]:
    """Lift a Maybe-returning f into a Maybe[A] -> Maybe[B] function."""
    return lambda m: m.flat_map(f)


def match(on_nothing: Callable[[], B], on_just: Callable[[A], B]) -> Callable[[Maybe[A]], B]:
    """Build an eliminator for Maybe values."""
    return lambda m: m.match(nothing=on_nothing, just=on_just)
