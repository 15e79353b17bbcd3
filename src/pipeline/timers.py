"""Timing helpers usable as pipeline wrappers."""

from __future__ import annotations

import contextlib
import functools
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator


@dataclass
class TimerRecord:
    """Accumulates elapsed wall-clock time for a named section."""

    total: float = 0.0
    calls: int = 0

    def update(self, dt: float) -> None:
        self.total += dt
        self.calls += 1


@dataclass
class TimerRegistry:
    """Registry of timers keyed by string labels."""

    records: Dict[str, TimerRecord] = field(default_factory=dict)

    @contextlib.contextmanager
    def time(self, label: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            dt = time.perf_counter() - start
            self.records.setdefault(label, TimerRecord()).update(dt)

    def wrapper(self, label: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Return a wrapper that times every call of the handler it wraps.

        The result plugs into :meth:`pipeline.composer.Pipeline.append`;
        exceptions from the inner handler propagate after the elapsed time
        is recorded.
        """

        def _wrap(handler: Callable[..., Any]) -> Callable[..., Any]:
            @functools.wraps(handler)
            def _timed(*args: Any, **kwargs: Any) -> Any:
                with self.time(label):
                    return handler(*args, **kwargs)

            return _timed

        return _wrap


__all__ = ["TimerRecord", "TimerRegistry"]
