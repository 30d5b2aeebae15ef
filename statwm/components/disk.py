"""Disk space components for a mounted file system."""

from __future__ import annotations

import os
from typing import Optional

from statwm.util import ComponentError, fmt_human


def _statvfs(path: str) -> os.statvfs_result:
    try:
        return os.statvfs(path)
    except OSError as err:
        raise ComponentError(f"statvfs '{path}': {err}") from err


def disk_free(path: str) -> str:
    """Space available to unprivileged users."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> Optional[str]:
    """Used share of the file system in percent."""
    fs = _statvfs(path)
    if not fs.f_blocks:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str:
    """Total size of the file system."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str:
    """Space in use on the file system."""
    fs = _statvfs(path)
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)