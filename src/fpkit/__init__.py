"""fpkit - Monadic containers and left-to-right composition for Python.

Express optional, fallible and stateful computations as chains of pure
functions instead of None checks, try/except ladders or threaded state.

Quick Start:
    >>> from fpkit import Just, Nothing, Ok, Err, pipe, maybe, result
    >>>
    >>> show = pipe(maybe.map(lambda x: x * 2), maybe.match(lambda: "none", str))
    >>> show(Just(5))
    '10'
    >>> show(Nothing())
    'none'

    >>> Ok("hello").map(str.upper)
    Ok('HELLO')

Stateful computations:
    >>> from fpkit import state
    >>> counter = state.get().then(state.modify(lambda n: n + 1))
    >>> counter.exec(0)
    1

Configuration comes from FPKIT_* environment variables (see
fpkit.foundation.config); logging is silent until configured.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import ErrorCode, ErrorInfo, FpkitError, InvariantViolation

# Configuration
from .foundation.config import FpkitSettings, clear_settings_cache, get_settings

# Containers
from .monads import (
    VOID,
    Err,
    Just,
    Maybe,
    Nothing,
    Ok,
    Result,
    State,
    Void,
    from_nullable,
    from_tuple,
    maybe,
    result,
    sequence,
    sequence_state,
    state,
    traverse,
    try_fn,
)

# Composition
from .pipeline import Pipeline, compose, pipe, pipe_value

# Observability
from .runtime.observability import configure_from_settings, configure_logging, get_logger

__all__ = [
    # Errors
    "ErrorCode", "ErrorInfo", "FpkitError", "InvariantViolation",
    # Configuration
    "FpkitSettings", "get_settings", "clear_settings_cache",
    # Maybe
    "maybe", "Maybe", "Just", "Nothing", "from_nullable",
    # Result
    "result", "Result", "Ok", "Err", "from_tuple", "try_fn", "sequence", "traverse",
    # State
    "state", "State", "Void", "VOID", "sequence_state",
    # Composition
    "Pipeline", "pipe", "compose", "pipe_value",
    # Observability
    "configure_logging", "configure_from_settings", "get_logger",
]
