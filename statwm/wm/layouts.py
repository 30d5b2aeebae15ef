"""Arrange functions: master/stack tiling and monocle."""

from __future__ import annotations

from typing import Callable

from statwm.wm.model import Client, Monitor

Resize = Callable[[Client, int, int, int, int, bool], None]

_SYMBOL_LIMIT = 15


def tile(monitor: Monitor, resize: Resize) -> None:
    """Split the window area into a master column and a stack column."""
    clients = list(monitor.tiled())
    n = len(clients)
    if n == 0:
        return
    if n > monitor.nmaster:
        mw = int(monitor.ww * monitor.mfact) if monitor.nmaster else 0
    else:
        mw = monitor.ww
    my = ty = 0
    for i, client in enumerate(clients):
        if i < monitor.nmaster:
            h = (monitor.wh - my) // (min(n, monitor.nmaster) - i)
            resize(
                client,
                monitor.wx,
                monitor.wy + my,
                mw - 2 * client.bw,
                h - 2 * client.bw,
                False,
            )
            if my + client.height() < monitor.wh:
                my += client.height()
        else:
            h = (monitor.wh - ty) // (n - i)
            resize(
                client,
                monitor.wx + mw,
                monitor.wy + ty,
                monitor.ww - mw - 2 * client.bw,
                h - 2 * client.bw,
                False,
            )
            if ty + client.height() < monitor.wh:
                ty += client.height()


def monocle(monitor: Monitor, resize: Resize) -> None:
    """Give every tiled client the whole window area."""
    visible = sum(1 for c in monitor.clients if c.visible())
    if visible > 0:
        monitor.ltsymbol = f"[{visible}]"[:_SYMBOL_LIMIT]
    for client in list(monitor.tiled()):
        resize(
            client,
            monitor.wx,
            monitor.wy,
            monitor.ww - 2 * client.bw,
            monitor.wh - 2 * client.bw,
            False,
        )