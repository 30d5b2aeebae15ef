import pytest

from statwm.components import cpu
from statwm.components.cpu import CpuPercent, busy_percent, cpu_freq
from statwm.util import ComponentError


def _stat(values):
    return "cpu " + " ".join(str(v) for v in values) + " 0 0 0\ncpu0 1 2 3\n"


def test_no_baseline_gives_none():
    assert busy_percent([0] * 7, [5, 0, 0, 5, 0, 0, 0]) is None


def test_identical_samples_give_none():
    sample = [10, 1, 2, 30, 0, 0, 0]
    assert busy_percent(sample, sample) is None


def test_half_busy():
    assert busy_percent([10, 0, 0, 10, 0, 0, 0], [20, 0, 0, 20, 0, 0, 0]) == 50


def test_only_idle_grows():
    assert busy_percent([10, 0, 0, 10, 0, 0, 0], [10, 0, 0, 30, 0, 0, 0]) == 0


def test_component_uses_previous_sample(tmp_path):
    path = tmp_path / "stat"
    first = [100, 5, 50, 800, 10, 2, 3]
    second = [160, 5, 70, 900, 12, 4, 3]
    path.write_text(_stat(first))
    component = CpuPercent(str(path))
    assert component() is None
    assert component() is None
    path.write_text(_stat(second))
    assert component() == str(busy_percent(first, second))


def test_result_is_percentage(tmp_path):
    path = tmp_path / "stat"
    path.write_text(_stat([100, 5, 50, 800, 10, 2, 3]))
    component = CpuPercent(str(path))
    component()
    path.write_text(_stat([150, 9, 70, 950, 11, 2, 6]))
    assert 0 <= int(component()) <= 100


def test_malformed_stat(tmp_path):
    path = tmp_path / "stat"
    path.write_text("cpu 1 2 x 4 5 6 7\n")
    with pytest.raises(ComponentError):
        CpuPercent(str(path))()


def test_missing_stat(tmp_path):
    with pytest.raises(ComponentError):
        CpuPercent(str(tmp_path / "absent"))()


def test_cpu_freq_from_sysfs(tmp_path, monkeypatch):
    path = tmp_path / "scaling_cur_freq"
    path.write_text("2400000\n")
    monkeypatch.setattr(cpu, "CPU_FREQ", str(path))
    assert cpu_freq(None) == "2.4 G"