"""Battery charge, state and remaining-time components."""

from __future__ import annotations

import os
import re
import sys
from typing import Any, Optional

import psutil

from statwm.util import ComponentError, read_int, read_text

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}
_STATE_RE = re.compile(r"[a-zA-Z ]{1,12}")


def _use_sysfs() -> bool:
    return sys.platform.startswith("linux") or os.path.isdir(POWER_SUPPLY)


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _read_state(bat: str) -> Optional[str]:
    match = _STATE_RE.match(read_text(_path(bat, "status")))
    return match.group(0) if match else None


def _pick(bat: str, first: str, second: str) -> Optional[str]:
    for name in (first, second):
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _psutil_battery() -> Any:
    probe = getattr(psutil, "sensors_battery", None)
    info = probe() if probe is not None else None
    if info is None:
        raise ComponentError("no battery information available")
    return info


def battery_perc(bat: Optional[str]) -> str:
    """Battery charge in percent."""
    if _use_sysfs():
        return str(read_int(_path(bat or "", "capacity")))
    return str(int(_psutil_battery().percent))


def battery_state(bat: Optional[str]) -> Optional[str]:
    """'+' charging, '-' discharging, 'o' full, '?' otherwise."""
    if _use_sysfs():
        state = _read_state(bat or "")
        if state is None:
            return None
        return _STATE_SYMBOLS.get(state, "?")
    plugged = _psutil_battery().power_plugged
    if plugged is None:
        return "?"
    return "+" if plugged else "-"


def battery_remaining(bat: Optional[str]) -> Optional[str]:
    """Remaining time while discharging, empty otherwise."""
    if not _use_sysfs():
        info = _psutil_battery()
        if info.power_plugged:
            return ""
        if info.secsleft is None or int(info.secsleft) < 0:
            return None
        hours, minutes = divmod(int(info.secsleft) // 60, 60)
        return f"{hours}h {minutes:02d}m"

    bat = bat or ""
    state = _read_state(bat)
    if state is None:
        return None
    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if state != "Discharging":
        return ""
    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if current_now == 0:
        return None
    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"