"""
Per-phase profiling for parsing, validation and serialization.

Enabled only when ``JTREE_PROFILE`` is set at import time. Each public
entry point runs inside a PhaseTimer; while profiling is off the timer
records nothing.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILING = __debug__ and "JTREE_PROFILE" in os.environ


@dataclass
class PhaseStats:
    """
    Accumulated runs of one phase.

    ``chars`` counts the JSON text handled: input consumed by parse (up to
    the error offset when it fails) and output produced by stringify.
    ``failures`` counts parse runs that raised and validation runs that
    found errors.
    """

    phase: str
    calls: int = 0
    failures: int = 0
    total_ns: int = 0
    chars: int = 0

    @property
    def mean_ns(self) -> float:
        if self.calls == 0:
            return 0.0
        return self.total_ns / self.calls

    @property
    def chars_per_second(self) -> float:
        if self.total_ns == 0:
            return 0.0
        return self.chars * 1e9 / self.total_ns


_phase_stats: dict[str, PhaseStats] = {}


class PhaseTimer:
    """Times one run of a phase; callers may set ``chars`` and ``failed``."""

    __slots__ = ("chars", "failed", "phase", "_start")

    def __init__(self, phase: str, chars: int = 0) -> None:
        self.phase = phase
        self.chars = chars
        self.failed = False
        self._start = 0

    def __enter__(self) -> "PhaseTimer":
        if PROFILING:
            self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not PROFILING:
            return
        elapsed = time.perf_counter_ns() - self._start
        stats = _phase_stats.get(self.phase)
        if stats is None:
            stats = _phase_stats[self.phase] = PhaseStats(self.phase)
        stats.calls += 1
        stats.total_ns += elapsed
        stats.chars += self.chars
        if self.failed or exc_type is not None:
            stats.failures += 1


def get_phase_stats() -> dict[str, PhaseStats]:
    """Returns a snapshot of the statistics gathered so far, by phase."""
    return dict(_phase_stats)


def clear_phase_stats() -> None:
    _phase_stats.clear()
