"""Lightweight functional helpers built on :class:`~pipeline.composer.Pipeline`."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .composer import Handler, Pipeline

T = TypeVar("T")


def compose(*wrappers: Optional[Handler[T]]) -> Callable[[T], T]:
    """Compose unary wrappers from right to left.

    ``compose(w0, w1)(t)`` is ``w0(w1(t))``, the same order as
    ``Pipeline().append(w0, w1).finalize(t)``.
    """

    pipeline: Pipeline[T] = Pipeline().append(*wrappers)
    return pipeline.finalize


def identity(value: T) -> T:
    return value


__all__ = ["compose", "identity"]
