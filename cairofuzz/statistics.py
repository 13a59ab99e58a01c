"""Counters kept while fuzzing."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class FuzzerStats:
    """Execution and crash counters with the time fuzzing started."""

    total_executions: int = 0
    crashes: int = 0
    start_time: float = field(default_factory=time.monotonic)

    def uptime(self) -> float:
        """Seconds elapsed since the start time, never negative."""
        return max(0.0, time.monotonic() - self.start_time)

    def execs_per_second(self) -> float:
        """Average execution rate since the start time."""
        elapsed = self.uptime()
        return self.total_executions / elapsed if elapsed > 0.0 else 0.0