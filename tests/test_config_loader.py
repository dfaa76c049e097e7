from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from trade_timeline.config import (
    DEFAULT_PAIRS,
    freeze_config,
    load_config,
    serialize_config,
    verify_config_lock,
)
from trade_timeline.simulator import TimelineMode


SAMPLE_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "dashboard_v1.yaml"


def test_load_config_sample():
    config = load_config(SAMPLE_CONFIG)
    assert config.mode == TimelineMode.BAR_CHART
    assert config.pairs == DEFAULT_PAIRS
    assert config.price_path.sample_count == 100
    assert config.trades.duration_days == (1, 8)
    assert config.trades.fee == 1.20


def test_freeze_and_verify(tmp_path):
    target = tmp_path / "dashboard_v1.yaml"
    target.write_text(SAMPLE_CONFIG.read_text(encoding="utf-8"), encoding="utf-8")

    lock_path = freeze_config(target)
    assert verify_config_lock(target, lock_path)

    target.write_text(target.read_text(encoding="utf-8") + "\n# edited\n", encoding="utf-8")
    assert not verify_config_lock(target, lock_path)


def test_minimal_config_uses_defaults(tmp_path):
    target = tmp_path / "minimal.yaml"
    target.write_text("name: mini\nversion: 2\nmode: time_series\ntrades:\n  count: 3\n", encoding="utf-8")

    config = load_config(target)
    assert config.run_id_prefix == "mini"
    assert config.version == "2"
    assert config.mode == TimelineMode.TIME_SERIES
    assert config.trades.count_range == (3, 3)
    assert config.pairs == DEFAULT_PAIRS
    assert serialize_config(config)["mode"] == "time_series"


def test_missing_required_key(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("version: 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="name"):
        load_config(target)


def test_invalid_mode_and_range(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("name: x\nversion: 1\nmode: candles\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid mode"):
        load_config(target)

    target.write_text("name: x\nversion: 1\nprice_path:\n  trend_range: [0.1, -0.1]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="trend_range"):
        load_config(target)


def test_periods_per_day_must_be_positive(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("name: x\nversion: 1\ntrades:\n  periods_per_day: 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid periods_per_day"):
        load_config(target)


def test_price_jitter_must_keep_prices_positive(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("name: x\nversion: 1\ntrades:\n  price_jitter_pct: 3.0\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid price_jitter_pct"):
        load_config(target)

    target.write_text("name: x\nversion: 1\ntrades:\n  price_jitter_pct: -0.1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid price_jitter_pct"):
        load_config(target)

    target.write_text("name: x\nversion: 1\ntrades:\n  price_jitter_pct: 1.5\n", encoding="utf-8")
    assert load_config(target).trades.price_jitter_pct == 1.5
