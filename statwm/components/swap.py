"""Swap space components."""

from __future__ import annotations

import os
import re
import sys
from typing import Optional

import psutil

from statwm.util import ComponentError, fmt_human, read_text

MEMINFO = "/proc/meminfo"

_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")
_NUMBER = re.compile(r"\s*([+-]?\d+)")


def swap_info(text: str) -> dict[str, int]:
    """Swap fields in kB from meminfo text; absent fields are left out."""
    info: dict[str, int] = {}
    for line in text.splitlines():
        for name in _FIELDS:
            if line.startswith(name):
                match = _NUMBER.match(line[len(name) + 1:])
                if match is not None:
                    info.setdefault(name, int(match.group(1)))
                break
    return info


def _use_meminfo() -> bool:
    return sys.platform.startswith("linux") or os.path.exists(MEMINFO)


def _fields(*names: str) -> list[int]:
    info = swap_info(read_text(MEMINFO))
    try:
        return [info[name] for name in names]
    except KeyError as err:
        raise ComponentError(f"{err.args[0]} missing from '{MEMINFO}'") from None


def swap_free(unused: Optional[str] = None) -> str:
    """Free swap space."""
    if _use_meminfo():
        (free,) = _fields("SwapFree")
        return fmt_human(free * 1024, 1024)
    return fmt_human(psutil.swap_memory().free, 1024)


def swap_perc(unused: Optional[str] = None) -> Optional[str]:
    """Swap usage in percent."""
    if _use_meminfo():
        total, free, cached = _fields(*_FIELDS)
        if total == 0:
            return None
        return str(int(100 * (total - free - cached) / total))
    memory = psutil.swap_memory()
    if memory.total == 0:
        return None
    return str(memory.used * 100 // memory.total)


def swap_total(unused: Optional[str] = None) -> str:
    """Total swap space."""
    if _use_meminfo():
        (total,) = _fields("SwapTotal")
        return fmt_human(total * 1024, 1024)
    return fmt_human(psutil.swap_memory().total, 1024)


def swap_used(unused: Optional[str] = None) -> str:
    """Swap space in use, not counting cached pages."""
    if _use_meminfo():
        total, free, cached = _fields(*_FIELDS)
        return fmt_human((total - free - cached) * 1024, 1024)
    return fmt_human(psutil.swap_memory().used, 1024)