"""CPU, load, entropy and temperature readings."""

from __future__ import annotations

import os
import re

from wmkit.util import fmt_human, read_int, read_text, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"
ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_STAT_RE = re.compile(r"\s*\S+" + r"\s+([+-]?\d+(?:\.\d*)?)" * 7)


def cpu_freq(unused: str | None = None, path: str = CPU_FREQ) -> str | None:
    """Current frequency of the first CPU, scaled with SI prefixes."""
    freq = read_int(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


class CpuPercent:
    """CPU usage since the previous call, read from a stat file.

    The first call only records a sample and yields None.
    """

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._sample: tuple[float, ...] = (0.0,) * 7

    def __call__(self, unused: str | None = None) -> str | None:
        previous = self._sample
        text = read_text(self.stat_path)
        if text is None:
            return None
        match = _STAT_RE.match(text)
        if not match:
            return None
        current = tuple(float(value) for value in match.groups())
        self._sample = current

        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None

        busy = (0, 1, 2, 5, 6)
        used = sum(previous[i] for i in busy) - sum(current[i] for i in busy)
        return str(int(100 * used / total))


_cpu_percent = CpuPercent()


def cpu_perc(unused: str | None = None) -> str | None:
    """CPU usage in percent since the previous call."""
    return _cpu_percent(unused)


def load_avg(unused: str | None = None) -> str | None:
    """The 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def entropy(unused: str | None = None, path: str = ENTROPY_AVAIL) -> str | None:
    """Available kernel entropy."""
    value = read_int(path)
    return None if value is None else str(value)


def temp(file: str) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = read_int(file)
    if value is None:
        return None
    degrees = abs(value) // 1000
    return str(-degrees if value < 0 else degrees)