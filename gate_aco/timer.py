from __future__ import annotations
import time
from enum import Enum


class TimerType(Enum):
    REAL = "real"
    VIRTUAL = "virtual"


class Timer:
    """Wall-clock and CPU time since the last start()."""
    def __init__(self):
        self.start()

    def start(self):
        self._real = time.perf_counter()
        self._virtual = time.process_time()

    def elapsed(self, kind: TimerType = TimerType.REAL) -> float:
        if kind is TimerType.REAL:
            return time.perf_counter() - self._real
        return time.process_time() - self._virtual
