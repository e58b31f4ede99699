"""Left-to-right function composition.

``pipe(f, g, h)(x) == h(g(f(x)))``: the first function is applied first,
the reverse of mathematical composition. Steps are plain unary functions;
when they return Maybe/Result, the containers own the branching and the
pipe only owns the sequencing.

    >>> double = lambda x: x * 2
    >>> pipe(double, double, double)(1)
    8
    >>> (Pipeline.of(str.strip) >> str.upper)("  hi ")
    'HI'

Typed overloads cover arities 1 through 12; longer pipes still run, they
are just typed loosely. No memoization or laziness: each call applies the
steps once, in order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, overload

from fpkit.foundation.config import PipelineSettings
from fpkit.runtime.observability.logging import get_logger

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
G = TypeVar("G")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
J = TypeVar("J")
K = TypeVar("K")
L = TypeVar("L")
M = TypeVar("M")

Step = Callable[[Any], Any]

_log = get_logger("fpkit.pipeline")


def _step_name(fn: Step) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__name__


# ═════════════════════════════════════════════════════════════════════════════
# Pipeline: Sequential Composition
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Pipeline:
    """Immutable sequence of unary steps applied left to right.

    Pipelines are functions themselves, so they nest: a Pipeline can be a
    step of another Pipeline. ``>>`` appends a step (or another Pipeline's
    steps) and returns a new Pipeline.

    When ``trace`` is on each step is logged at debug level with its index
    and name. pipe() never traces; Pipeline.of() without an explicit
    ``trace`` reads the FPKIT_PIPELINE_TRACE setting.
    """

    steps: tuple[Step, ...]
    trace: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("Pipeline requires at least one step")
        for i, step in enumerate(self.steps):
            if not callable(step):
                raise TypeError(f"Pipeline step {i} is not callable: {step!r}")

    @classmethod
    def of(cls, *steps: Step, trace: bool | None = None) -> Pipeline:
        """Build a pipeline, reading the trace flag from PipelineSettings when not given."""
        return cls(steps, trace=PipelineSettings().trace if trace is None else trace)

    def __call__(self, value: Any) -> Any:
        if not self.trace:
            for step in self.steps:
                value = step(value)
            return value
        log = _log.bind(steps=len(self.steps))
        for i, step in enumerate(self.steps):
            value = step(value)
            log.debug("pipeline step", index=i, step=_step_name(step), output_type=type(value).__name__)
        return value

    def __rshift__(self, other: Step) -> Pipeline:
        """Chain another step: self >> other."""
        tail = other.steps if isinstance(other, Pipeline) else (other,)
        return Pipeline((*self.steps, *tail), trace=self.trace)

    def __len__(self) -> int:
        return len(self.steps)

    def __repr__(self) -> str:
        return f"Pipeline({' >> '.join(_step_name(s) for s in self.steps)})"


# ═════════════════════════════════════════════════════════════════════════════
# pipe: typed variadic constructor
# ═════════════════════════════════════════════════════════════════════════════


@overload
def pipe(ab: Callable[[A], B], /) -> Callable[[A], B]: ...
@overload
def pipe(ab: Callable[[A], B], bc: Callable[[B], C], /) -> Callable[[A], C]: ...
@overload
def pipe(ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], /) -> Callable[[A], D]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E], /,
) -> Callable[[A], E]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], /,
) -> Callable[[A], F]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], /,
) -> Callable[[A], G]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], /,
) -> Callable[[A], H]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I], /,
) -> Callable[[A], I]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
    ij: Callable[[I], J], /,
) -> Callable[[A], J]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
    ij: Callable[[I], J], jk: Callable[[J], K], /,
) -> Callable[[A], K]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
    ij: Callable[[I], J], jk: Callable[[J], K], kl: Callable[[K], L], /,
) -> Callable[[A], L]: ...
@overload
def pipe(
    ab: Callable[[A], B], bc: Callable[[B], C], cd: Callable[[C], D], de: Callable[[D], E],
    ef: Callable[[E], F], fg: Callable[[F], G], gh: Callable[[G], H], hi: Callable[[H], I],
    ij: Callable[[I], J], jk: Callable[[J], K], kl: Callable[[K], L], lm: Callable[[L], M], /,
) -> Callable[[A], M]: ...
@overload
def pipe(*steps: Step) -> Callable[[Any], Any]: ...


def pipe(*steps: Step) -> Callable[[Any], Any]:
    """Compose unary functions left to right into one function.

    Raises:
        ValueError: If no functions are given
        TypeError: If any step is not callable
    """
    return Pipeline(steps)


def compose(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Two-step left-to-right composition: compose(f, g)(x) == g(f(x))."""
    return lambda a: g(f(a))


def pipe_value(value: Any, *steps: Step) -> Any:
    """Push a value through steps immediately: pipe_value(x, f, g) == g(f(x))."""
    return Pipeline(steps)(value)
