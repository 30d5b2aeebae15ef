import pytest

from statwm.util import ComponentError, fmt_human, read_int, read_text


def test_fmt_human_zero_has_empty_prefix():
    assert fmt_human(0, 1000) == "0.0 "


def test_fmt_human_binary_kibi():
    assert fmt_human(1024, 1024) == "1.0 Ki"


def test_fmt_human_below_base_is_unscaled():
    assert fmt_human(999, 1000) == "999.0 "


def test_fmt_human_stops_at_largest_prefix():
    assert fmt_human(1024**12, 1024).endswith("Yi")
    assert fmt_human(1000**12, 1000).endswith("Y")


@pytest.mark.parametrize("base", [1000, 1024])
def test_fmt_human_scaled_value_below_base(base):
    value, prefix = fmt_human(base**3 * 5, base).split(" ")
    assert float(value) < base
    assert prefix in ("G", "Gi")


def test_fmt_human_invalid_base():
    with pytest.raises(ValueError):
        fmt_human(10, 10)


def test_read_text_round_trip(tmp_path):
    path = tmp_path / "f"
    path.write_text("contents\n")
    assert read_text(path) == "contents\n"


def test_read_text_missing(tmp_path):
    with pytest.raises(ComponentError):
        read_text(tmp_path / "missing")


def test_read_int_skips_whitespace(tmp_path):
    path = tmp_path / "n"
    path.write_text("  42\nrest")
    assert read_int(path) == 42


def test_read_int_rejects_text(tmp_path):
    path = tmp_path / "n"
    path.write_text("abc")
    with pytest.raises(ComponentError):
        read_int(path)