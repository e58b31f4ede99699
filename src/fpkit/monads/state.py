"""State monad for stateful computations.

A State[A, S] wraps a pure function ``S -> (A, S)``: given an input state it
returns a result and the next state. Nothing is mutated; "updating" state
means returning a new state value, so the same computation run on the same
state always produces the same pair.

Building blocks:
    run(s)          seed: (s, s), ignoring the incoming state
    get()           (s, s)
    gets(f)         (f(s), s)
    put(s2)         (VOID, s2)
    modify(f)       (VOID, f(s))
    pure(a)         (a, s)

Runners:
    State.run_state(s) -> (a, s2), State.eval(s) -> a, State.exec(s) -> s2
    eval_state(s) / exec_state(s) are the curried forms for pipe().

Example:
    >>> counter = get().then(modify(lambda n: n + 1))
    >>> counter.exec(0)
    1
    >>> counter.run_state(41)
    (VOID, 42)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

A = TypeVar("A")  # Result type
B = TypeVar("B")  # Mapped result type
S = TypeVar("S")  # State type


@dataclass(frozen=True, slots=True)
class Void:
    """Unit marker for computations that only transform state."""

    def __repr__(self) -> str:
        return "VOID"


VOID = Void()


class State(Generic[A, S]):
    """A pure transition ``S -> (A, S)``. Calling the object runs it.

    A State is either a base transition or a previous State plus one step
    to apply to its (result, state) pair. map/flat_map only append a step,
    and running walks the chain in a loop, so programs built from
    thousands of binds in a loop run in constant stack depth.
    """

    __slots__ = ("_fn", "_prev", "_step")

    def __init__(self, fn: Callable[[S], tuple[A, S]]) -> None:
        self._fn: Callable[[S], tuple[A, S]] | None = fn
        self._prev: State | None = None
        self._step: Callable[[object, S], tuple[A, S]] | None = None

    @classmethod
    def _chain(cls, prev: State, step: Callable[[object, S], tuple[B, S]]) -> State[B, S]:
        m = cls.__new__(cls)
        m._fn, m._prev, m._step = None, prev, step
        return m

    def __call__(self, state: S) -> tuple[A, S]:
        steps = []
        node = self
        while node._prev is not None:
            steps.append(node._step)
            node = node._prev
        a, s = node._fn(state)  # type: ignore[misc]
        for step in reversed(steps):
            a, s = step(a, s)
        return a, s

    def __repr__(self) -> str:
        node, depth = self, 0
        while node._prev is not None:
            node, depth = node._prev, depth + 1
        base = getattr(node._fn, "__qualname__", node._fn)
        return f"State({base!r})" if not depth else f"State({base!r}, steps={depth})"

    # ─────────────────────────────────────────────────────────────────
    # Runners
    # ─────────────────────────────────────────────────────────────────

    def run_state(self, state: S) -> tuple[A, S]:
        """Run and return both the result and the final state."""
        return self(state)

    def eval(self, state: S) -> A:
        """Run and keep only the result."""
        return self(state)[0]

    def exec(self, state: S) -> S:
        """Run and keep only the final state."""
        return self(state)[1]

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> State[B, S]:
        """Transform the result, threading state unchanged."""
        return State._chain(self, lambda a, s: (f(a), s))

    def flat_map(self, f: Callable[[A], State[B, S]]) -> State[B, S]:
        """Sequence: run self to (a, s2), then run f(a) on s2."""
        return State._chain(self, lambda a, s: f(a)(s))

    def and_then(self, f: Callable[[A], State[B, S]]) -> State[B, S]:
        """Alias for flat_map."""
        return self.flat_map(f)

    def then(self, other: State[B, S]) -> State[B, S]:
        """Run self for its state effect, discard its result, then run other."""
        return self.flat_map(lambda _: other)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def run(s: S) -> State[S, S]:
    """Seed a computation with a concrete state; the incoming state is ignored."""
    return State(lambda _: (s, s))


def get() -> State[S, S]:
    return State(lambda s: (s, s))


def gets(f: Callable[[S], A]) -> State[A, S]:
    """Read a derived view of the state without changing it."""
    return State(lambda s: (f(s), s))


def put(new_state: S) -> State[Void, S]:
    """Replace the state."""
    return State(lambda _: (VOID, new_state))


def modify(f: Callable[[S], S]) -> State[Void, S]:
    """Install f(state) as the next state."""
    return State(lambda s: (VOID, f(s)))


def pure(value: A) -> State[A, S]:
    """Lift a plain value; state passes through."""
    return State(lambda s: (value, s))


# ═════════════════════════════════════════════════════════════════════════════
# Curried Operations
# ═════════════════════════════════════════════════════════════════════════════


def map(f: Callable[[A], B]) -> Callable[[State[A, S]], State[B, S]]:  # noqa: A001
    return lambda m: m.map(f)


def bind(f: Callable[[A], State[B, S]]) -> Callable[[State[A, S]], State[B, S]]:
    return lambda m: m.flat_map(f)


def eval_state(s: S) -> Callable[[State[A, S]], A]:
    """Curried eval: returns a function running a computation on s."""
    return lambda m: m.eval(s)


def exec_state(s: S) -> Callable[[State[A, S]], S]:
    """Curried exec: returns a function running a computation on s."""
    return lambda m: m.exec(s)


def sequence_state(states: Iterable[State[A, S]]) -> State[list[A], S]:
    """Run computations left to right, threading state, collecting results."""
    steps = tuple(states)

    def step(s: S) -> tuple[list[A], S]:
        results: list[A] = []
        for m in steps:
            a, s = m(s)
            results.append(a)
        return results, s
    return State(step)
