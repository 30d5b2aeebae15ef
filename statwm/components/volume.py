"""Mixer volume component for OSS-style mixer devices."""

from __future__ import annotations

import array
import fcntl
import os
from typing import Optional

from statwm.util import ComponentError

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3", "dig1",
    "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

_IOC_READ = 2
_INT_SIZE = 4


def _ior(kind: str, number: int) -> int:
    return (_IOC_READ << 30) | (_INT_SIZE << 16) | (ord(kind) << 8) | number


def mixer_read(device: int) -> int:
    """ioctl request reading the level of mixer ``device``."""
    return _ior("M", device)


SOUND_MIXER_READ_DEVMASK = _ior("M", 254)


def _read(fd: int, request: int, label: str) -> int:
    buf = array.array("i", [0])
    try:
        fcntl.ioctl(fd, request, buf, True)
    except OSError as err:
        raise ComponentError(f"ioctl '{label}': {err}") from err
    return buf[0]


def vol_perc(card: str) -> str:
    """Master volume of the mixer device ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as err:
        raise ComponentError(f"open '{card}': {err}") from err
    level: Optional[int] = None
    try:
        devmask = _read(fd, SOUND_MIXER_READ_DEVMASK, "SOUND_MIXER_READ_DEVMASK")
        for i, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << i) and name == "vol":
                level = _read(fd, mixer_read(i), f"MIXER_READ({i})")
    finally:
        os.close(fd)
    if level is None:
        raise ComponentError(f"no volume control on '{card}'")
    return str(level & 0xFF)