"""Ordered wrapper composition around a terminal value."""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Handler = Callable[[T], T]

LOGGER = logging.getLogger(__name__)


class Pipeline(Generic[T]):
    """Accumulate ``T -> T`` wrappers and fold them around a terminal value.

    Wrappers are applied so that the first appended is the outermost layer::

        Pipeline().append(w0, w1).finalize(t) == w0(w1(t))

    ``None`` entries are kept in the list and act as pass-through layers.
    """

    def __init__(self) -> None:
        self._steps: List[Optional[Handler[T]]] = []

    def append(self, *wrappers: Optional[Handler[T]]) -> "Pipeline[T]":
        """Add ``wrappers`` to the end of the chain and return ``self``."""

        self._steps.extend(wrappers)
        return self

    def finalize(self, terminal: T) -> T:
        """Wrap ``terminal`` with every stored wrapper, last appended innermost.

        ``None`` layers are skipped, not called.
        """

        LOGGER.debug("Composing %d wrapper(s) around %r", len(self._steps), terminal)
        result = terminal
        for step in reversed(self._steps):
            if step is None:
                continue
            result = step(result)
        return result

    @property
    def wrappers(self) -> Tuple[Optional[Handler[T]], ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(wrappers={len(self._steps)})"


Composer = Pipeline


def create() -> Pipeline[T]:
    """Return a new, empty :class:`Pipeline`."""

    return Pipeline()


__all__ = ["Handler", "Pipeline", "Composer", "create"]
