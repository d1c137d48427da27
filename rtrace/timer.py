"""Named wall-clock timers that collect statistics of their durations."""

from __future__ import annotations

import time
from datetime import timedelta

from .stats import Stats


class ManualTimer:
    """A timer, running from creation, that records a duration on ``stop``."""

    def __init__(self, stats: Stats[timedelta]) -> None:
        self.stats = stats
        self._started_ns = time.perf_counter_ns()
        self._running = True

    def start(self) -> None:
        """Restart the timer."""
        self._started_ns = time.perf_counter_ns()
        self._running = True

    def stop(self, log: bool = True) -> None:
        """Stop the timer and, if ``log``, record the elapsed time."""
        if not self._running:
            raise RuntimeError("timer has not started")
        elapsed_ns = time.perf_counter_ns() - self._started_ns
        self._running = False
        if log:
            self.stats.add(timedelta(microseconds=elapsed_ns / 1000))


class ScopedTimer(ManualTimer):
    """A timer used as a context manager; it stops when the block ends."""

    def __enter__(self) -> ScopedTimer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop(True)


def _report_line(name: str, stats: Stats[timedelta], name_width: int = 8) -> str:
    return f"\n{name:<{name_width}} | {stats}{name:<{name_width}} |"


class TimerSummary:
    """A collection of named duration statistics."""

    def __init__(self, name: str = "summary") -> None:
        self.name = name
        self._stats: dict[str, Stats[timedelta]] = {}

    def __len__(self) -> int:
        return len(self._stats)

    def _stats_for(self, name: str) -> Stats[timedelta]:
        if not name:
            raise ValueError("must provide a name")
        return self._stats.setdefault(name, Stats())

    def manual(self, name: str) -> ManualTimer:
        """A started timer recording into ``name``; call ``stop`` yourself."""
        return ManualTimer(self._stats_for(name))

    def scoped(self, name: str) -> ScopedTimer:
        """A started timer recording into ``name`` when its ``with`` block ends."""
        return ScopedTimer(self._stats_for(name))

    def report(self, name: str) -> str:
        stats = self._stats.get(name)
        if stats is None:
            return f"[{name}] not found in {self.name}."
        return _report_line(name, stats)

    def report_all(self, name_width: int = 32) -> str:
        lines = [f"Timer Summary: {self.name}"]
        lines.extend(
            _report_line(name, self._stats[name], name_width) for name in sorted(self._stats)
        )
        return "".join(lines)

    def summary_all(self) -> dict[str, dict[str, timedelta | None]]:
        """Every timer's summary, keyed by name in sorted order."""
        return {name: self._stats[name].summary() for name in sorted(self._stats)}