import logging

import pytest

from pywelford.core.config import Config, DEFAULT_PRECISION
from pywelford.core.domain.precision import Precision


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return Config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "nope.yaml"))


def test_empty_file_uses_defaults(tmp_path):
    cfg = write_config(tmp_path, "")

    assert cfg.input_filename is None
    assert cfg.precision == DEFAULT_PRECISION
    assert cfg.rolling_window is None
    assert cfg.get("anything", 7) == 7


def test_full_config(tmp_path):
    cfg = write_config(
        tmp_path,
        "input:\n"
        "  filename: values.txt\n"
        "aggregator:\n"
        "  precision: f32\n"
        "rolling:\n"
        "  window_size: 4\n",
    )

    assert cfg.input_filename == "values.txt"
    assert cfg.precision == Precision.F32
    assert cfg.rolling_window == 4


def test_unknown_precision_falls_back(tmp_path, caplog):
    cfg = write_config(tmp_path, "aggregator:\n  precision: f16\n")

    with caplog.at_level(logging.WARNING):
        assert cfg.precision == DEFAULT_PRECISION
    assert "f16" in caplog.text


def test_non_integer_window(tmp_path):
    cfg = write_config(tmp_path, "rolling:\n  window_size: 2.5\n")

    with pytest.raises(TypeError):
        cfg.rolling_window


@pytest.mark.parametrize(
    "name, expected",
    [
        ("F32", Precision.F32),
        ("float32", Precision.F32),
        (" f64 ", Precision.F64),
        ("FLOAT64", Precision.F64),
    ],
)
def test_precision_from_str(name, expected):
    assert Precision.from_str(name) == expected


def test_precision_from_str_unknown():
    with pytest.raises(ValueError):
        Precision.from_str("f128")
