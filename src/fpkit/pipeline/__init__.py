"""Function composition: pipe, compose and the Pipeline object.

Sequential: pipe(f, g, h) or Pipeline.of(f) >> g >> h
"""

from .pipe import Pipeline, Step, compose, pipe, pipe_value

__all__ = [
    "Pipeline",
    "Step",
    "compose",
    "pipe",
    "pipe_value",
]
