from statwm.wm.layouts import monocle, tile
from statwm.wm.model import Client, Monitor


def _recorder(calls):
    def resize(client, x, y, w, h, interact):
        calls.append((client, x, y, w, h, interact))
        client.x, client.y, client.w, client.h = x, y, w, h

    return resize


def _monitor(count, **kwargs):
    params = dict(wx=10, wy=20, ww=1000, wh=800, mfact=0.5, nmaster=1)
    params.update(kwargs)
    monitor = Monitor(**params)
    monitor.clients = [Client(window=i + 1, tags=1, mon=monitor) for i in range(count)]
    return monitor


def test_tile_without_clients_does_nothing():
    calls = []
    tile(_monitor(0), _recorder(calls))
    assert calls == []


def test_tile_single_client_fills_area():
    monitor = _monitor(1)
    calls = []
    tile(monitor, _recorder(calls))
    assert [(x, y, w, h) for _, x, y, w, h, _ in calls] == [
        (monitor.wx, monitor.wy, monitor.ww, monitor.wh)
    ]


def test_tile_master_and_stack_share_width():
    monitor = _monitor(3)
    calls = []
    tile(monitor, _recorder(calls))
    master, *stack = monitor.clients
    assert master.x == monitor.wx
    assert master.h == monitor.wh
    for client in stack:
        assert client.x == monitor.wx + master.w
        assert master.w + client.w == monitor.ww
    assert sum(c.h for c in stack) == monitor.wh
    assert all(interact is False for *_, interact in calls)


def test_tile_respects_border_width():
    monitor = _monitor(2)
    for client in monitor.clients:
        client.bw = 2
    tile(monitor, _recorder([]))
    master, other = monitor.clients
    assert master.width() + other.width() == monitor.ww
    assert master.height() == monitor.wh


def test_tile_without_master_puts_all_in_stack():
    monitor = _monitor(2, nmaster=0)
    tile(monitor, _recorder([]))
    for client in monitor.clients:
        assert client.x == monitor.wx
        assert client.w == monitor.ww
    assert sum(c.h for c in monitor.clients) == monitor.wh


def test_tile_skips_floating_and_hidden_clients():
    monitor = _monitor(3)
    monitor.clients[1].isfloating = True
    monitor.clients[2].tags = 2
    calls = []
    tile(monitor, _recorder(calls))
    assert [c for c, *_ in calls] == [monitor.clients[0]]


def test_monocle_sets_symbol_and_fills_area():
    monitor = _monitor(3)
    calls = []
    monocle(monitor, _recorder(calls))
    assert monitor.ltsymbol == "[3]"
    assert len(calls) == len(monitor.clients)
    for client in monitor.clients:
        assert (client.x, client.y, client.w, client.h) == (
            monitor.wx,
            monitor.wy,
            monitor.ww,
            monitor.wh,
        )


def test_monocle_counts_floating_but_does_not_resize_it():
    monitor = _monitor(2)
    monitor.clients[0].isfloating = True
    calls = []
    monocle(monitor, _recorder(calls))
    assert monitor.ltsymbol == "[2]"
    assert [c for c, *_ in calls] == [monitor.clients[1]]


def test_monocle_keeps_symbol_without_visible_clients():
    monitor = _monitor(1)
    monitor.clients[0].tags = 4
    before = monitor.ltsymbol
    monocle(monitor, _recorder([]))
    assert monitor.ltsymbol == before