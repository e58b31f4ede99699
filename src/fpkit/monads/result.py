"""Result monad: a success value or an error.

Implements a discriminated union for success/failure with monadic operations:
- Functor: map, map_err
- Monad: flat_map (bind)
- Elimination: match, unwrap_or, unwrap_or_else, unsafe_unwrap
- Railway-oriented composition via curried map/bind/match

The error channel is fixed to ``Exception``: a Result is generic only in
its success type. Once a chain hits Err, every later map/bind is skipped
and the first error is carried through unchanged.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    TypeVar,
    cast,
)

from fpkit.foundation.errors import ErrorCode, FpkitError, InvariantViolation
from fpkit.runtime.observability.logging import get_logger

from .maybe import Just, Maybe, Nothing

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# Type variables for generic Result
T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type

_log = get_logger("fpkit.result")


class Result(Generic[T]):
    """Discriminated union representing success (Ok) or failure (Err).

    Examples:
        >>> Ok("hello").map(str.upper)
        Ok('HELLO')

        >>> Err(ValueError("boom")).map(str.upper)
        Err(ValueError('boom'))

        Railway-oriented programming:
        >>> def validate_positive(x: int) -> Result[int]:
        ...     return Ok(x) if x > 0 else Err(ValueError("must be positive"))
        >>>
        >>> result = (
        ...     Ok(5)
        ...     .flat_map(validate_positive)
        ...     .map(lambda x: x * 2)
        ... )
        >>> assert result.unwrap_or(0) == 10

    Notes:
        - Uses __slots__ for zero overhead
        - Immutable by design (all operations return new Result)
        - Never simultaneously Ok and Err
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | Exception, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | Exception = value
        self._is_ok: bool = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default. Never raises."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Extract Ok value or compute from error."""
        return cast(T, self._value) if self._is_ok else f(cast(Exception, self._value))

    def unsafe_unwrap(self) -> T:
        """Extract Ok value, re-raising the contained error on Err.

        The error object itself is raised, not wrapped. This is an escape
        hatch for prototypes and for sites where Err means a broken
        invariant; prefer match() or unwrap_or() everywhere else.

        Raises:
            Exception: The exact error held by an Err
        """
        if self._is_ok:
            return cast(T, self._value)
        error = cast(Exception, self._value)
        _log.warning("unsafe unwrap on Err", error=repr(error), error_type=type(error).__name__)
        raise error

    def unwrap_err(self) -> Exception:
        """Extract Err value.

        Raises:
            FpkitError: If Result is Ok (code UNWRAP_FAILED)
        """
        if not self._is_ok:
            return cast(Exception, self._value)
        raise FpkitError.create("result.unwrap_err", f"called on Ok value: {self._value!r}", ErrorCode.UNWRAP_FAILED)

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Map function over Ok value (Functor).

        Applies f only if Ok; Err is returned unchanged and f is never called.

        Type signature: Result[T] -> (T -> U) -> Result[U]
        """
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return cast(Result[U], self)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """Map function over Err value, e.g. to translate low-level errors.

        Type signature: Result[T] -> (Exception -> Exception) -> Result[T]
        """
        if not self._is_ok:
            return Err(f(cast(Exception, self._value)))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Monadic bind (>>=) - chain operations that can fail.

        Type signature: Result[T] -> (T -> Result[U]) -> Result[U]

        Example:
            >>> def parse_int(s: str) -> Result[int]:
            ...     return try_fn(lambda: int(s), ValueError)
            >>>
            >>> def validate_positive(n: int) -> Result[int]:
            ...     return Ok(n) if n > 0 else Err(ValueError("must be positive"))
            >>>
            >>> result = (
            ...     Ok("42")
            ...     .flat_map(parse_int)
            ...     .flat_map(validate_positive)
            ... )
            >>> assert result == Ok(42)
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(Result[U], self)

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Alias for flat_map for better readability."""
        return self.flat_map(f)

    def or_else(self, f: Callable[[Exception], Result[T]]) -> Result[T]:
        """Chain alternative on Err.

        If Err, applies f to transform/recover. If Ok, passes through.
        """
        if not self._is_ok:
            return f(cast(Exception, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Inspection & Conversion
    # ─────────────────────────────────────────────────────────────────

    def ok(self) -> Maybe[T]:
        """Just(value) if Ok, Nothing if Err (or if the Ok value is None)."""
        return Just(cast(T, self._value)) if self._is_ok and self._value is not None else Nothing()

    def err(self) -> Maybe[Exception]:
        """Just(error) if Err, Nothing if Ok."""
        return Nothing() if self._is_ok else Just(cast(Exception, self._value))

    def to_tuple(self) -> tuple[T | None, Exception | None]:
        """Convert to (value, error) pair, the inverse of from_tuple."""
        if self._is_ok:
            return (cast(T, self._value), None)
        return (None, cast(Exception, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def match(
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[Exception], U],
    ) -> U:
        """Pattern match on Result variants.

        Exhaustive case analysis - exactly one branch is invoked.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(Exception, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Enable truthiness checking (True if Ok)."""
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        """Structural equality. Errors compare by identity or by type and args."""
        if not isinstance(other, Result):
            return NotImplemented
        if self._is_ok != other._is_ok:
            return False
        if self._is_ok:
            return self._value == other._value
        return _same_error(cast(Exception, self._value), cast(Exception, other._value))

    def __hash__(self) -> int:
        if self._is_ok:
            return hash((True, self._value))
        error = cast(Exception, self._value)
        return hash((False, type(error), error.args))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Ok value (yields 0 or 1 element)."""
        if self._is_ok:
            yield cast(T, self._value)


def _same_error(a: Exception, b: Exception) -> bool:
    # Exceptions only compare by identity, so fall back to type and args
    return a is b or (type(a) is type(b) and a.args == b.args)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T]:  # noqa: N802
    """Construct Ok variant (success).

    Type signature: T -> Result[T]
    """
    return Result(value, is_ok=True)


def Err(error: Exception) -> Result[T]:  # noqa: N802
    """Construct Err variant (failure).

    Raises:
        InvariantViolation: If error is not an Exception instance
    """
    if not isinstance(error, Exception):
        _log.error("invariant violated", operation="result.Err", received=type(error).__name__)
        raise InvariantViolation.create("result.Err", f"error must be an Exception, got {type(error).__name__}")
    return Result(error, is_ok=False)


def from_tuple(value: T, error: Exception | None = None) -> Result[T]:
    """Adapt a (value, error) pair into a Result.

    A non-None error wins over the value; otherwise the value is Ok even
    when it is None or empty.

    Example:
        >>> from_tuple("", KeyError("missing"))
        Err(KeyError('missing'))
        >>> from_tuple("ok")
        Ok('ok')
    """
    if error is not None:
        return Err(error)
    return Ok(value)


def try_fn(operation: Callable[[], T], *exceptions: type[Exception]) -> Result[T]:
    """Run operation, converting the listed exception types into Err.

    Defaults to catching Exception. Anything not listed propagates.

    Example:
        >>> try_fn(lambda: int("x"), ValueError).is_err()
        True
    """
    catch = exceptions or (Exception,)
    try:
        return Ok(operation())
    except catch as e:
        return Err(e)


# ═════════════════════════════════════════════════════════════════════════════
# Curried Operations
# ═════════════════════════════════════════════════════════════════════════════


def is_ok(m: Result[T]) -> bool:
    return m.is_ok()


def is_err(m: Result[T]) -> bool:
    return m.is_err()


def map(f: Callable[[T], U]) -> Callable[[Result[T]], Result[U]]:  # noqa: A001
    """Lift f into a Result[T] -> Result[U] function."""
    return lambda m: m.map(f)


def bind(f: Callable[[T], Result[U]]) -> Callable[[Result[T]], Result[U]]:
    """Lift a Result-returning f into a Result[T] -> Result[U] function."""
    return lambda m: m.flat_map(f)


def match(on_err: Callable[[Exception], U], on_ok: Callable[[T], U]) -> Callable[[Result[T]], U]:
    """Build an eliminator for Result values."""
    return lambda m: m.match(ok=on_ok, err=on_err)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Convert Results to Result of list, failing fast on the first Err.

    Type signature: [Result[T]] -> Result[[T]]

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
    """
    values: list[T] = []
    for result in results:
        if result.is_err():
            return cast(Result[list[T]], result)
        values.append(cast(T, result._value))
    return Ok(values)


def traverse(items: Iterable[U], f: Callable[[U], Result[T]]) -> Result[list[T]]:
    """Map a Result-returning function over items and collect.

    Stops calling f after the first Err.

    Type signature: [U] -> (U -> Result[T]) -> Result[[T]]
    """
    values: list[T] = []
    for item in items:
        result = f(item)
        if result.is_err():
            return cast(Result[list[T]], result)
        values.append(cast(T, result._value))
    return Ok(values)
