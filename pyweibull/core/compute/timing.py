"""
Wall-clock timing for fits, bootstrap runs and cost grids.

A Timer measures one run end to end and any number of named phases
inside it. Phases entered more than once add up, so the bootstrap loop
can time every replicate under a single 'bootstrap_replicates' key.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Run timer with accumulating named phases.

        timer = Timer()
        timer.start()
        with timer.section('t0_computation'):
            t0 = weibull_mle(failures, suspensions)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 't0_computation': ...}

    Phases may overlap; each is measured independently.
    """

    def __init__(self) -> None:
        self._phases: dict[str, float] = {}
        self._t_begin: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._t_begin = time.perf_counter()

    def stop(self) -> None:
        if self._t_begin is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._t_begin

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to phase ``name``."""
        t = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - t)

    def result(self) -> dict[str, float]:
        """'total_seconds' plus one entry per phase. Requires stop()."""
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """Time a block: ``with timed() as t: fit(...)``; then ``t.result()``."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
