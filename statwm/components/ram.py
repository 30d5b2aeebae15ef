"""Memory usage components."""

from __future__ import annotations

import os
import re
import sys
from typing import Optional

import psutil

from statwm.util import ComponentError, fmt_human, read_text

MEMINFO = "/proc/meminfo"

_LINE = re.compile(r"^([\w()]+):\s*(\d+)", re.MULTILINE)


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each meminfo field to its value in kB."""
    info: dict[str, int] = {}
    for name, value in _LINE.findall(text):
        info.setdefault(name, int(value))
    return info


def _use_meminfo() -> bool:
    return sys.platform.startswith("linux") or os.path.exists(MEMINFO)


def _fields(*names: str) -> list[int]:
    info = parse_meminfo(read_text(MEMINFO))
    try:
        return [info[name] for name in names]
    except KeyError as err:
        raise ComponentError(f"{err.args[0]} missing from '{MEMINFO}'") from None


def _active(memory: object) -> int:
    return getattr(memory, "active", getattr(memory, "used"))


def ram_free(unused: Optional[str] = None) -> str:
    """Memory available for new allocations."""
    if _use_meminfo():
        (available,) = _fields("MemAvailable")
        return fmt_human(available * 1024, 1024)
    memory = psutil.virtual_memory()
    return fmt_human(memory.total - _active(memory), 1024)


def ram_perc(unused: Optional[str] = None) -> Optional[str]:
    """Memory usage in percent, not counting buffers and cache."""
    if _use_meminfo():
        total, free, buffers, cached = _fields("MemTotal", "MemFree", "Buffers", "Cached")
        if total == 0:
            return None
        return str(100 * ((total - free) - (buffers + cached)) // total)
    memory = psutil.virtual_memory()
    if memory.total == 0:
        return None
    return str(_active(memory) * 100 // memory.total)


def ram_total(unused: Optional[str] = None) -> str:
    """Total memory."""
    if _use_meminfo():
        (total,) = _fields("MemTotal")
        return fmt_human(total * 1024, 1024)
    return fmt_human(psutil.virtual_memory().total, 1024)


def ram_used(unused: Optional[str] = None) -> str:
    """Memory in use, not counting buffers and cache."""
    if _use_meminfo():
        total, free, buffers, cached = _fields("MemTotal", "MemFree", "Buffers", "Cached")
        return fmt_human((total - free - buffers - cached) * 1024, 1024)
    return fmt_human(_active(psutil.virtual_memory()), 1024)