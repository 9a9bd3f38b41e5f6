"""
Execution timing utilities.

Solvers record how long each phase took (normalization, search,
clipping rounds) so callers can see where time goes on large buffers.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('normalize'):
            nbs = no_blank_sorted(buf)

        with timer.section('search'):
            index = golden_section_search(...)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.05, 'normalize': 0.03, 'search': 0.02}
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

        Repeated sections with the same name (one per clipping round,
        for example) accumulate into a single entry.
        """
        begin = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - begin
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

        out = {'total_seconds': self._total}
        out.update(self._sections)
        return out
