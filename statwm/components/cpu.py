"""CPU frequency and utilisation components."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

import psutil

from statwm.util import ComponentError, fmt_human, read_int, read_text

STAT_PATH = "/proc/stat"
CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"

_FIELDS = 7


def _parse_stat(text: str) -> list[float]:
    """The first seven counters after the leading label of /proc/stat."""
    tokens = text.split()[1:1 + _FIELDS]
    try:
        values = [float(token) for token in tokens]
    except ValueError as err:
        raise ComponentError(f"malformed cpu statistics: {err}") from err
    if len(values) != _FIELDS:
        raise ComponentError("truncated cpu statistics")
    return values


def _busy(values: Sequence[float]) -> float:
    # user + nice + system + irq + softirq
    return values[0] + values[1] + values[2] + values[5] + values[6]


def busy_percent(
    previous: Sequence[float], current: Sequence[float]
) -> Optional[int]:
    """Busy share between two samples, or None without a usable baseline."""
    if previous[0] == 0:
        return None
    total = sum(previous[:_FIELDS]) - sum(current[:_FIELDS])
    if total == 0:
        return None
    return int(100 * (_busy(previous) - _busy(current)) / total)


class CpuPercent:
    """Stateful CPU usage component comparing each sample with the last."""

    def __init__(self, stat_path: str = STAT_PATH) -> None:
        self.stat_path = stat_path
        self._previous: list[float] = [0.0] * _FIELDS

    def __call__(self, unused: Optional[str] = None) -> Optional[str]:
        current = _parse_stat(read_text(self.stat_path))
        previous, self._previous = self._previous, current
        value = busy_percent(previous, current)
        return None if value is None else str(value)


_cpu_percent = CpuPercent()


def cpu_freq(unused: Optional[str] = None) -> str:
    """Current frequency of the first CPU."""
    if os.path.exists(CPU_FREQ) or sys.platform.startswith("linux"):
        return fmt_human(read_int(CPU_FREQ) * 1000, 1000)
    freq = psutil.cpu_freq()
    if freq is None:
        raise ComponentError("cpu frequency unavailable")
    return fmt_human(freq.current * 1e6, 1000)


def cpu_perc(unused: Optional[str] = None) -> Optional[str]:
    """CPU usage in percent since the previous call."""
    return _cpu_percent(unused)