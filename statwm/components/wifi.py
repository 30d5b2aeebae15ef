"""Wireless link quality and network name components."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct
from typing import Optional

from statwm.util import ComponentError, read_text

NET_OPERSTATE = "/sys/class/net/{}/operstate"
PROC_WIRELESS = "/proc/net/wireless"

IW_ESSID_MAX_SIZE = 32
SIOCGIWESSID = 0x8B1B
IFNAMSIZ = 16
_IWREQ_SIZE = 32
_LINK_MAX = 70

_QUALITY = re.compile(r"\s*[+-]?\d+(?!\d)\s*([+-]?\d+)")


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_wireless_link(text: str, interface: str) -> Optional[int]:
    """Link quality of ``interface`` in percent from /proc/net/wireless text."""
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    pos = line.find(interface)
    if pos < 0:
        return None
    match = _QUALITY.match(line[pos + len(interface) + 2:])
    if match is None:
        return None
    cur = int(match.group(1))
    return int(_f32(_f32(_f32(cur) / _LINK_MAX) * 100))


def wifi_perc(interface: str) -> Optional[str]:
    """Signal quality in percent while the interface is up."""
    state = read_text(NET_OPERSTATE.format(interface))
    if not state.startswith("up\n"):
        return None
    value = parse_wireless_link(read_text(PROC_WIRELESS), interface)
    return None if value is None else str(value)


def wifi_essid(interface: str) -> Optional[str]:
    """Name of the network the interface is associated with."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        raise ComponentError(f"interface name too long: {interface!r}")
    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = struct.pack(
        f"{IFNAMSIZ}sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0
    )
    request += bytes(max(0, _IWREQ_SIZE - len(request)))
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request)
    except OSError as err:
        raise ComponentError(f"ioctl 'SIOCGIWESSID': {err}") from err
    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode(errors="replace") or None