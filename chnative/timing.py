"""Simple timing helpers for measuring how long operations take."""

from __future__ import annotations

import time
from typing import Callable, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class Timer:
    """Measures time elapsed since it was created or last restarted."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._started_at = clock()

    def restart(self) -> None:
        """Start measuring again from now."""
        self._started_at = self._clock()

    def start(self) -> None:
        """Same as restart()."""
        self.restart()

    def elapsed(self) -> float:
        """Seconds passed since the timer was started."""
        return self._clock() - self._started_at


class MeasuresCollector(Generic[T]):
    """Runs a measuring function and records its results under names."""

    def __init__(self, func: Callable[[], T]) -> None:
        self._func = func
        self._results: List[Tuple[str, T]] = []

    def add(self, name: str) -> None:
        """Call the measuring function and store its result under name."""
        self._results.append((name, self._func()))

    def results(self) -> List[Tuple[str, T]]:
        """The (name, result) pairs in the order they were added."""
        return list(self._results)


def collect(func: Callable[[], T]) -> MeasuresCollector[T]:
    """Create a MeasuresCollector around func."""
    return MeasuresCollector(func)