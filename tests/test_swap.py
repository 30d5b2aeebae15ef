import pytest

from statwm.components import swap
from statwm.util import ComponentError, fmt_human

SAMPLE = (
    "MemTotal:       16000 kB\n"
    "SwapCached:         0 kB\n"
    "SwapTotal:       2048 kB\n"
    "SwapFree:        1024 kB\n"
)


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    monkeypatch.setattr(swap, "MEMINFO", str(path))
    return path


def test_swap_info_parses_fields():
    assert swap.swap_info(SAMPLE) == {
        "SwapTotal": 2048, "SwapFree": 1024, "SwapCached": 0}


def test_swap_info_first_occurrence_wins():
    text = SAMPLE + "SwapFree: 1 kB\n"
    assert swap.swap_info(text)["SwapFree"] == 1024


def test_swap_info_missing_fields():
    assert swap.swap_info("MemTotal: 5 kB\n") == {}


def test_swap_values(meminfo):
    meminfo.write_text(SAMPLE)
    assert swap.swap_perc(None) == "50"
    assert swap.swap_total(None) == "2.0 Mi"
    assert swap.swap_used(None) == swap.swap_free(None)
    assert swap.swap_free(None) == fmt_human(1024 * 1024, 1024)


def test_swap_perc_zero_total(meminfo):
    meminfo.write_text("SwapTotal: 0 kB\nSwapFree: 0 kB\nSwapCached: 0 kB\n")
    assert swap.swap_perc(None) is None


def test_missing_field_raises(meminfo):
    meminfo.write_text("SwapTotal: 2048 kB\n")
    with pytest.raises(ComponentError):
        swap.swap_free(None)


def test_unreadable_file_raises(meminfo):
    with pytest.raises(ComponentError):
        swap.swap_total(None)