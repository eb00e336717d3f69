"""
Opt-in hot path profiling for the tokenizer and parser.

Enabled by setting BOUNDYAML_PROFILE before import. When disabled the
context manager is a no-op class so instrumented code pays nothing.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "BOUNDYAML_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """
    Accumulated timings for one instrumented scan or parse routine.

    units_processed counts characters for tokenizer routines and tokens
    for parser routines.
    """

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    units_processed: int = 0

    def record_call(self, duration_ns: int, units: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.units_processed += units

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0


_hot_path_stats: dict[str, HotPathStats] = {}


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """Times the enclosed block and files it under func_name."""

        def __init__(self, func_name: str, units: int = 0) -> None:
            self.func_name = func_name
            self.units = units
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _hot_path_stats.get(self.func_name)
            if stats is None:
                stats = _hot_path_stats[self.func_name] = HotPathStats(
                    self.func_name
                )
            stats.record_call(duration, self.units)

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, units: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the collected statistics (empty when disabled)."""
    return dict(_hot_path_stats)


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


def format_hot_path_report() -> list[str]:
    """Renders one line per routine, slowest total first."""
    ordered = sorted(
        _hot_path_stats.values(), key=lambda s: s.total_time_ns, reverse=True
    )
    return [
        f"{s.function_name}: {s.call_count} calls, "
        f"{s.total_time_ns / 1e6:.3f} ms total, "
        f"{s.mean_time_ns:.0f} ns mean, {s.units_processed} units"
        for s in ordered
    ]
