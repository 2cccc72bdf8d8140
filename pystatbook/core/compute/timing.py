"""
Execution timing utilities.

Solvers attach a wall-clock breakdown to Result.timing so the lesson layer
can decide how many replicates to request per animation frame.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating timer with named sections.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('resample'):
            idx = rng.integers(n, n)

        with timer.section('refit'):
            sol = fit_simple(y[idx], x[idx])

        timer.stop()
        result = timer.result()
        # {'total_seconds': 0.05, 'resample': 0.01, 'refit': 0.04}
    """

    def __init__(self) -> None:
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Sections called repeatedly (once per replicate) accumulate.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.

    Usage:
        with timed() as timer:
            params = _compute(...)
        Result(params=params, timing=timer.result(), ...)

    Note that timer.result() is only available after the with-block exits.
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
