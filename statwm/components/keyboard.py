"""Keyboard indicator formatting and XKB layout name extraction."""

from __future__ import annotations

import re
from typing import Optional

_INVALID_PREFIXES = ("evdev", "inet", "pc", "base")
_FMT_LIMIT = 4


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps ('c') and num ('n') lock state as described by ``fmt``.

    A letter followed by '?' appears, case preserved, only when its indicator
    is on; otherwise the letter always appears, upper case when on.
    """
    fmt = fmt[:_FMT_LIMIT]
    out = []
    for i, ch in enumerate(fmt):
        key = ch.lower()
        if key not in ("c", "n"):
            continue
        togglecase = i + 1 >= len(fmt) or fmt[i + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(ch)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Whether ``sym`` names a layout rather than an xkb rules component."""
    return not sym.startswith(_INVALID_PREFIXES)


def get_layout(symbols: str, group: int) -> Optional[str]:
    """The layout name for keyboard ``group`` in an xkb symbols string."""
    layout = None
    grp = 0
    for tok in (t for t in re.split(r"[+:]", symbols) if t):
        if grp > group:
            break
        if not valid_layout_or_variant(tok):
            continue
        if len(tok) == 1 and tok.isdigit():
            continue
        layout = tok
        grp += 1
    return layout