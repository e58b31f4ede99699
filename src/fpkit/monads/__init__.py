"""Monadic containers: Maybe, Result and State.

Each container offers methods for fluent chaining and curried module
functions (``maybe.map``, ``result.bind``, ``state.exec_state``...) that
compose with ``fpkit.pipe``.

Example:
    >>> from fpkit.monads import Err, Ok, Result
    >>>
    >>> def divide(a: int, b: int) -> Result[float]:
    ...     if b == 0:
    ...         return Err(ZeroDivisionError("division by zero"))
    ...     return Ok(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .flat_map(lambda x: Ok(x + 1))
    ... )
    >>> assert result.unwrap_or(0.0) == 11.0
"""

from . import maybe, result, state
from .maybe import Just, Maybe, Nothing, from_nullable
from .result import Err, Ok, Result, from_tuple, sequence, traverse, try_fn
from .state import VOID, State, Void, sequence_state

__all__ = [
    # Modules with curried operations
    "maybe",
    "result",
    "state",
    # Maybe
    "Maybe",
    "Just",
    "Nothing",
    "from_nullable",
    # Result
    "Result",
    "Ok",
    "Err",
    "from_tuple",
    "try_fn",
    "sequence",
    "traverse",
    # State
    "State",
    "Void",
    "VOID",
    "sequence_state",
]
