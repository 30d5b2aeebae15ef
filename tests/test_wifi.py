import pytest

from statwm.components import wifi
from statwm.util import ComponentError

HEADER = (
    "Inter-| sta-|   Quality        |   Discarded packets               | Missed | WE\n"
    " face | tus | link level noise |  nwid  crypt   frag  retry   misc | beacon | 22\n"
)


def _wireless(link):
    return HEADER + (
        f" wlan0: 0000   {link}.  -40.  -256        0      0      0      0      0        0\n"
    )


def test_full_link_is_hundred():
    assert wifi.parse_wireless_link(_wireless(70), "wlan0") == 100


def test_half_link():
    assert wifi.parse_wireless_link(_wireless(35), "wlan0") == 50


def test_quality_monotonic():
    values = [wifi.parse_wireless_link(_wireless(n), "wlan0") for n in range(71)]
    assert values == sorted(values)
    assert values[0] == 0


def test_unknown_interface():
    assert wifi.parse_wireless_link(_wireless(70), "wlan9") is None


def test_too_few_lines():
    assert wifi.parse_wireless_link(HEADER, "wlan0") is None


@pytest.fixture
def paths(tmp_path, monkeypatch):
    iface = tmp_path / "wlan0"
    iface.mkdir()
    wireless = tmp_path / "wireless"
    monkeypatch.setattr(wifi, "NET_OPERSTATE", str(tmp_path / "{}" / "operstate"))
    monkeypatch.setattr(wifi, "PROC_WIRELESS", str(wireless))
    return iface / "operstate", wireless


def test_wifi_perc_up(paths):
    operstate, wireless = paths
    operstate.write_text("up\n")
    wireless.write_text(_wireless(70))
    assert wifi.wifi_perc("wlan0") == "100"


def test_wifi_perc_down(paths):
    operstate, wireless = paths
    operstate.write_text("down\n")
    wireless.write_text(_wireless(70))
    assert wifi.wifi_perc("wlan0") is None


def test_wifi_perc_missing_operstate(paths):
    with pytest.raises(ComponentError):
        wifi.wifi_perc("wlan0")


def test_essid_name_too_long():
    with pytest.raises(ComponentError):
        wifi.wifi_essid("x" * 16)


def test_essid_unknown_interface():
    with pytest.raises(ComponentError):
        wifi.wifi_essid("nosuchif0")