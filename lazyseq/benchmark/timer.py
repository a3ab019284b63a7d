from __future__ import annotations

import time
from collections import defaultdict
from typing import Any, Callable

import numpy as np
import numpy.typing as npt

from ..logging import log
from .unit import Metric

__all__ = ["Timer"]


class Timer:
    """
    Repeat a call and record the time spent on every repetition.

    Examples
    --------
    >>> timer = Timer()
    >>> timer.measure('sum', lambda: sum(s), repeat=10000)
    >>> timer.print()
    """

    measures: list[str] = ["wall time", "cpu time"]
    width = 20

    def __init__(self):
        self._raw: dict[str, list[tuple[float, float]]] = defaultdict(list)

    def measure(self, name: str, func: Callable[[], Any], repeat: int = 1):
        result = None
        for _ in range(repeat):
            perf_start = time.perf_counter()
            proc_start = time.process_time()
            result = func()
            self._raw[name].append(
                (time.perf_counter() - perf_start, time.process_time() - proc_start)
            )
        return result

    def results(self, name: str) -> dict[str, npt.NDArray[np.float64]]:
        raw = np.asarray(self._raw[name], dtype=np.float64).reshape(-1, len(self.measures))
        return {measure: raw[:, i] for i, measure in enumerate(self.measures)}

    def __add__(self, other: Timer) -> Timer:
        if isinstance(other, Timer):
            new = Timer()
            for raw in (self._raw, other._raw):
                for k, v in raw.items():
                    new._raw[k] += v
            return new
        return NotImplemented

    def report(self) -> str:
        width = max([self.width, *(len(k) + 1 for k in self._raw)])
        report = f'{"":<{width}}{"calls":<{width}}'
        for measure in self.measures:
            report += f'{measure + " (total)":<{width}}{measure + " (mean)":<{width}}'
        for name in self._raw:
            results = self.results(name)
            report += f'\n{name:<{width}}{len(self._raw[name]):<{width}}'
            for measure in self.measures:
                total = np.sum(results[measure])
                mean = np.mean(results[measure])
                report += f'{Metric.format(total, "s"):<{width}}{Metric.format(mean, "s"):<{width}}'
        return report

    def print(self):
        if not self._raw:
            log.warning("Timer has no measurements")
            return
        log.info(self.report())
