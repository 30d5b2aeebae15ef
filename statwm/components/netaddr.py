"""Interface address and network throughput components."""

from __future__ import annotations

import socket
import sys
from typing import Callable, Optional

import psutil

from statwm.util import ComponentError, fmt_human, read_int

INTERVAL = 1000
NET_STATS = "/sys/class/net/{}/statistics/{}"

Counter = Callable[[str], int]


def _ip(interface: str, family: int) -> Optional[str]:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as err:
        raise ComponentError(f"getifaddrs: {err}") from err
    for addr in addresses.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> Optional[str]:
    """First IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> Optional[str]:
    """First IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


def _counter(sysfs_name: str, attribute: str) -> Counter:
    def read(interface: str) -> int:
        if sys.platform.startswith("linux"):
            return read_int(NET_STATS.format(interface, sysfs_name))
        try:
            counters = psutil.net_io_counters(pernic=True)
        except OSError as err:
            raise ComponentError(f"getifaddrs failed: {err}") from err
        try:
            return getattr(counters[interface], attribute)
        except KeyError:
            raise ComponentError("reading 'if_data' failed") from None

    return read


class NetSpeed:
    """Bytes per second from a monotonically growing byte counter."""

    def __init__(self, counter: Counter, interval: int = INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.counter = counter
        self.interval = interval
        self._bytes = 0

    def __call__(self, interface: str) -> Optional[str]:
        old = self._bytes
        self._bytes = self.counter(interface)
        if old == 0:
            return None
        return fmt_human((self._bytes - old) * 1000 // self.interval, 1024)


_rx = NetSpeed(_counter("rx_bytes", "bytes_recv"))
_tx = NetSpeed(_counter("tx_bytes", "bytes_sent"))


def netspeed_rx(interface: str) -> Optional[str]:
    """Receive rate of ``interface`` since the previous call."""
    return _rx(interface)


def netspeed_tx(interface: str) -> Optional[str]:
    """Transmit rate of ``interface`` since the previous call."""
    return _tx(interface)