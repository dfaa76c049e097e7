import json
from dataclasses import replace
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from trade_timeline.config import MonitoringConfig, PricePathConfig, default_config
from trade_timeline.metrics import aggregate_metrics
from trade_timeline.monitoring import AuditLog, MemoryNotifier, Monitor
from trade_timeline.runtime import (
    base_price_for,
    build_dashboard,
    build_pair_dataset,
    create_run_context,
    dashboard_to_payload,
    pair_rng,
)
from trade_timeline.simulator import (
    PairDataset,
    PricePoint,
    Side,
    TimelineMode,
    TradeEvent,
    reconcile_timeline,
)


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=ZoneInfo("UTC"))


def test_same_seed_reproduces_dashboard():
    config = default_config(TimelineMode.TIME_SERIES)
    first = build_dashboard(config, seed=42, now=NOW)
    second = build_dashboard(config, seed=42, now=NOW)

    assert first == second
    assert [dataset.pair for dataset in first] == ["BTC-USDT", "ETH-USDT", "XMR-USDT"]


def test_pair_generation_is_independent_of_other_pairs():
    config = default_config(TimelineMode.BAR_CHART)
    datasets = build_dashboard(config, seed="abc", now=NOW)

    alone = build_pair_dataset("ETH-USDT", config, pair_rng("abc", "ETH-USDT"), NOW)
    assert datasets[1] == alone


def test_time_series_dataset_shape():
    config = default_config(TimelineMode.TIME_SERIES)
    dataset = build_pair_dataset("BTC-USDT", config, pair_rng(1, "BTC-USDT"), NOW)

    assert dataset.base_price == 43000.0
    assert len(dataset.points) == 100
    assert dataset.points[-1].timestamp == NOW
    assert dataset.metrics.unpriced_trades == 0
    assert dataset.metrics.current_price == dataset.points[-1].price
    assert dataset.metrics.open_markers >= 1
    assert dataset.metrics.long_count + dataset.metrics.short_count == len(dataset.trades)


def test_bar_chart_dataset_shape():
    config = default_config(TimelineMode.BAR_CHART)
    dataset = build_pair_dataset("XMR-USDT", config, pair_rng(1, "XMR-USDT"), NOW)

    assert dataset.points == []
    assert 8 <= len(dataset.trades) <= 12
    assert all(trade.is_priced for trade in dataset.trades)
    assert dataset.metrics.current_price == 0.0
    assert dataset.metrics.change_pct == 0.0


def test_unknown_pair_rejected():
    with pytest.raises(ValueError, match="Unknown instrument pair"):
        base_price_for("DOGE-USDT", default_config())


def test_audit_log_records_run(tmp_path):
    audit = AuditLog(tmp_path / "audit.log", run_id="run-1", seed="7")
    build_dashboard(default_config(), seed=7, now=NOW, audit=audit)

    events = audit.events()
    assert [event["event"] for event in events] == [
        "dashboard_start",
        "pair_generated",
        "pair_generated",
        "pair_generated",
        "dashboard_complete",
    ]
    assert events[1]["payload"]["pair"] == "BTC-USDT"
    assert all(event["run_id"] == "run-1" for event in events)


def test_monitor_reports_undefined_change():
    config = replace(
        default_config(TimelineMode.TIME_SERIES),
        price_path=PricePathConfig(sample_count=1),
        pairs={"BTC-USDT": 43000.0},
    )
    notifier = MemoryNotifier()
    datasets = build_dashboard(config, seed=1, now=NOW, monitor=Monitor(notifier))

    assert datasets[0].trades == []
    assert [event for event, _ in notifier.messages] == ["UNDEFINED_CHANGE"]


def test_payload_is_json_ready():
    datasets = build_dashboard(default_config(TimelineMode.TIME_SERIES), seed=3, now=NOW)
    payload = json.loads(json.dumps(dashboard_to_payload(datasets)))

    first = payload["pairs"][0]
    assert first["mode"] == "time_series"
    assert first["points"][-1]["timestamp"] == NOW.isoformat()
    assert first["trades"][0]["side"] in ("LONG", "SHORT")


def test_run_context_seed_and_id():
    context = create_run_context("dashboard", seed=99)
    assert context.seed == "99"
    assert context.run_id.startswith("dashboard-")
    assert context.run_id.endswith("-99")
    assert context.config_hash is None


def test_monitor_reports_unpriced_trades():
    points = [
        PricePoint(timestamp=NOW - timedelta(minutes=15), price=100.0, volume=1.0),
        PricePoint(timestamp=NOW, price=101.0, volume=1.0),
    ]
    trade = TradeEvent(
        id="trade-0",
        side=Side.LONG,
        start_time=points[0].timestamp,
        end_time=NOW + timedelta(hours=1),
        funding_total=0.25,
        periods=5,
        fee=1.20,
    )
    points, trades = reconcile_timeline(points, [trade], timedelta(minutes=15))
    dataset = PairDataset(
        pair="BTC-USDT",
        mode=TimelineMode.TIME_SERIES,
        base_price=100.0,
        generated_at=NOW,
        trades=trades,
        metrics=aggregate_metrics(points, trades),
        points=points,
    )
    notifier = MemoryNotifier()
    Monitor(notifier).check_dataset(dataset)

    assert notifier.messages == [
        ("UNPRICED_TRADES", "BTC-USDT: 1 trade(s) without a matching price sample"),
    ]


def test_audit_records_keep_config_hash_and_run_id(tmp_path):
    audit = AuditLog(tmp_path / "audit.log", run_id="run-2", seed="11", config_hash="abc123")
    first = build_dashboard(default_config(), now=NOW, audit=audit)

    events = audit.events()
    assert {event["run_id"] for event in events} == {"run-2"}
    assert {event["config_hash"] for event in events} == {"abc123"}
    assert first == build_dashboard(default_config(), seed="11", now=NOW)


def test_audit_log_created_from_config_path(tmp_path):
    config = replace(
        default_config(),
        monitoring=MonitoringConfig(audit_log_path=str(tmp_path / "runtime" / "audit.log")),
    )
    build_dashboard(config, seed=5, now=NOW)

    events = AuditLog(tmp_path / "runtime" / "audit.log").events()
    assert events[0]["event"] == "dashboard_start"
    assert events[0]["seed"] == "5"
    assert events[0]["run_id"].startswith("dashboard-")
