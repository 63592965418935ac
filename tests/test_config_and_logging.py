import json

import pytest

from citygrid.city import CityConfig
from citygrid.city.config import coerce_seed
from citygrid.logging_utils import format_record, get_logger


def test_config_defaults():
    cfg = CityConfig()
    assert cfg.recipe == "greenwich_village"
    assert cfg.seed is None
    assert cfg.enable_metrics is True


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("CITYGRID_RECIPE", "greenwich_village")
    monkeypatch.setenv("CITYGRID_SEED", "314")
    monkeypatch.setenv("CITYGRID_ENABLE_METRICS", "false")
    cfg = CityConfig.from_env()
    assert cfg.seed == 314
    assert cfg.enable_metrics is False


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("0", False), ("no", False), ("", False)])
def test_metrics_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("CITYGRID_ENABLE_METRICS", raw)
    assert CityConfig.from_env().enable_metrics is expected


def test_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("CITYGRID_SEED", "1")
    assert CityConfig.from_env(seed=2).seed == 2


def test_non_numeric_env_seed_is_hashed(monkeypatch):
    monkeypatch.setenv("CITYGRID_SEED", "washington-square")
    seed = CityConfig.from_env().seed
    assert isinstance(seed, int)
    assert 0 <= seed < 2**63 - 1
    assert CityConfig.from_env().seed == seed


def test_coerce_seed():
    assert coerce_seed(None) is None
    assert coerce_seed("") is None
    assert coerce_seed("  ") is None
    assert coerce_seed("42") == 42
    assert coerce_seed(42) == 42
    hashed = coerce_seed("abc")
    assert hashed == coerce_seed("abc")
    assert hashed != coerce_seed("abd")


def test_key_value_format():
    line = format_record("info", "citygrid.test", event="city generated", count=3, skipped=None)
    assert line.startswith("level=info ts=")
    assert "logger=citygrid.test" in line
    assert "event=city_generated" in line
    assert "count=3" in line
    assert "skipped" not in line


def test_json_format(monkeypatch):
    monkeypatch.setenv("CITYGRID_LOG_JSON", "1")
    rec = json.loads(format_record("warn", "citygrid", event="x", seed=None, n=2))
    assert rec["level"] == "warn" and rec["logger"] == "citygrid"
    assert rec["event"] == "x" and rec["n"] == 2
    assert "seed" not in rec


def test_level_threshold_and_streams(monkeypatch, capsys):
    log = get_logger("citygrid.test")
    log.debug(event="hidden")
    log.error(event="boom")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=boom" in captured.err

    monkeypatch.setenv("CITYGRID_LOG_LEVEL", "debug")
    log.debug(event="shown")
    assert "event=shown" in capsys.readouterr().out


def test_loggers_are_cached():
    assert get_logger("citygrid.cache") is get_logger("citygrid.cache")
