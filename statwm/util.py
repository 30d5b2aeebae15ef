"""Shared helpers for status components: human-readable sizes and file reads."""

from __future__ import annotations

import re
from pathlib import Path

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ComponentError(Exception):
    """A status component could not obtain its value."""


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` (1000 or 1024) and add the matching prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str | Path) -> str:
    """Return the whole text of ``path``, raising ComponentError if unreadable."""
    try:
        return Path(path).read_text(errors="replace")
    except OSError as err:
        raise ComponentError(f"fopen '{path}': {err}") from err


def read_int(path: str | Path) -> int:
    """Return the integer at the start of ``path`` (leading whitespace allowed)."""
    text = read_text(path)
    match = _LEADING_INT.match(text)
    if match is None:
        raise ComponentError(f"no integer in '{path}'")
    return int(match.group(1))