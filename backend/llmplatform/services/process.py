from __future__ import annotations

import os
import resource
import sys
import time
from dataclasses import dataclass
from pathlib import Path


_BYTES_PER_MB = 1024 * 1024

_STATM_PATH = Path("/proc/self/statm")
_STAT_PATH = Path("/proc/self/stat")
_SYSTEM_UPTIME_PATH = Path("/proc/uptime")


@dataclass(frozen=True)
class MemoryUsage:
    used_bytes: int
    total_bytes: int


def _process_age_seconds() -> float | None:
    """Seconds since this process was started by the kernel, from procfs."""

    try:
        stat = _STAT_PATH.read_text()
        system_uptime = float(_SYSTEM_UPTIME_PATH.read_text().split()[0])
    except (OSError, ValueError, IndexError):
        return None
    # The command name may contain spaces; fields resume after its closing paren.
    fields = stat[stat.rfind(")") + 2 :].split()
    try:
        start_ticks = int(fields[19])
    except (IndexError, ValueError):
        return None
    age = system_uptime - start_ticks / os.sysconf("SC_CLK_TCK")
    return max(age, 0.0)


def _started_at(now: float) -> float:
    age = _process_age_seconds()
    # Without procfs, count from the moment this module was imported.
    return now if age is None else now - age


_STARTED_AT = _started_at(time.monotonic())


def uptime_seconds() -> float:
    """Seconds elapsed since the process started."""

    return time.monotonic() - _STARTED_AT


def _peak_rss_bytes() -> int:
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is reported in bytes on macOS and kilobytes elsewhere.
    if sys.platform == "darwin":
        return int(peak)
    return int(peak) * 1024


def _current_rss_bytes() -> int | None:
    try:
        fields = _STATM_PATH.read_text().split()
    except OSError:
        return None
    if len(fields) < 2:
        return None
    return int(fields[1]) * os.sysconf("SC_PAGE_SIZE")


def memory_usage() -> MemoryUsage:
    """Resident memory of this process: current (used) and peak (total).

    Without a procfs the current figure is unknown and the peak is reported
    for both.
    """

    total = _peak_rss_bytes()
    current = _current_rss_bytes()
    used = total if current is None else current
    # The peak counter can lag the live reading by a page or two.
    total = max(total, used)
    return MemoryUsage(used_bytes=max(used, 0), total_bytes=max(total, 0))


def bytes_to_mb(value: int) -> int:
    return round(value / _BYTES_PER_MB)
