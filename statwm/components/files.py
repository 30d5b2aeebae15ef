"""Components reading files, directories and command output."""

from __future__ import annotations

import os
import subprocess
import sys

from statwm.util import ComponentError, read_int

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_LINE_LIMIT = 1022


def _first_line(text: str) -> str | None:
    line = text.splitlines(keepends=True)[0] if text else ""
    line = line[:_LINE_LIMIT]
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def cat(path: str) -> str | None:
    """First line of ``path`` without its newline, or None if it is empty."""
    try:
        with open(path, errors="replace") as fp:
            line = fp.readline(_LINE_LIMIT)
    except OSError as err:
        raise ComponentError(f"fopen '{path}': {err}") from err
    return _first_line(line)


def num_files(path: str) -> str:
    """Number of entries in directory ``path``."""
    try:
        return str(len(os.listdir(path)))
    except OSError as err:
        raise ComponentError(f"opendir '{path}': {err}") from err


def run_command(cmd: str) -> str | None:
    """First line printed by the shell command ``cmd``, or None if empty."""
    try:
        result = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as err:
        raise ComponentError(f"popen '{cmd}': {err}") from err
    return _first_line(result.stdout.decode(errors="replace"))


def temp(file: str) -> str:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    return str(read_int(file) // 1000)


def entropy(unused: str | None = None) -> str:
    """Available kernel entropy; infinite on systems without the counter."""
    if sys.platform.startswith("linux"):
        return str(read_int(ENTROPY_AVAIL))
    return "\u221e"