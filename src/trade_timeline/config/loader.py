"""Load and freeze configuration files."""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from trade_timeline.config.models import (
    DEFAULT_PAIRS,
    DashboardConfig,
    MonitoringConfig,
    PricePathConfig,
    TradeConfig,
)
from trade_timeline.simulator.models import TimelineMode


def load_config(path: str | Path) -> DashboardConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = _require(data, "name")
    version = str(_require(data, "version"))
    run_id_prefix = data.get("run_id_prefix", name)

    try:
        mode = TimelineMode(data.get("mode", TimelineMode.BAR_CHART.value))
    except ValueError as exc:
        raise ValueError(f"Invalid mode: {data.get('mode')}") from exc

    return DashboardConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        mode=mode,
        timezone=str(data.get("timezone", "UTC")),
        pairs=_parse_pairs(data.get("pairs")),
        price_path=_parse_price_path(data.get("price_path", {})),
        trades=_parse_trades(data.get("trades", {})),
        monitoring=_parse_monitoring(data.get("monitoring", {})),
    )


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def freeze_config(path: str | Path, lock_path: Optional[str | Path] = None) -> Path:
    path = Path(path)
    config_hash = compute_config_hash(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)

    payload = {
        "config_path": str(path),
        "config_hash": config_hash,
        "frozen_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    lock_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return lock_path


def verify_config_lock(path: str | Path, lock_path: Optional[str | Path] = None) -> bool:
    path = Path(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)
    if not lock_path.exists():
        return False
    payload = json.loads(lock_path.read_text(encoding="utf-8"))
    expected = payload.get("config_hash")
    return expected == compute_config_hash(path)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_range(value: Any, key: str, cast=float) -> tuple:
    try:
        low, high = (cast(item) for item in value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid range for {key}: {value}") from exc
    if low > high:
        raise ValueError(f"Invalid range for {key}: {value}")
    return low, high


def _parse_pairs(data: Any) -> dict[str, float]:
    if data is None:
        return dict(DEFAULT_PAIRS)
    if not isinstance(data, dict) or not data:
        raise ValueError("pairs must be a non-empty mapping of pair to base price")
    pairs = {}
    for pair, price in data.items():
        base_price = float(price)
        if base_price <= 0:
            raise ValueError(f"Invalid base price for {pair}: {price}")
        pairs[str(pair)] = base_price
    return pairs


def _parse_price_path(data: dict[str, Any]) -> PricePathConfig:
    defaults = PricePathConfig()
    interval_minutes = int(data.get("interval_minutes", defaults.interval_minutes))
    if interval_minutes <= 0:
        raise ValueError(f"Invalid interval_minutes: {interval_minutes}")
    return PricePathConfig(
        sample_count=int(data.get("sample_count", defaults.sample_count)),
        interval_minutes=interval_minutes,
        volatility_range=_parse_range(
            data.get("volatility_range", defaults.volatility_range), "volatility_range"
        ),
        trend_range=_parse_range(data.get("trend_range", defaults.trend_range), "trend_range"),
        volume_range=_parse_range(data.get("volume_range", defaults.volume_range), "volume_range"),
    )


def _parse_trades(data: dict[str, Any]) -> TradeConfig:
    defaults = TradeConfig()
    fee = float(data.get("fee", defaults.fee))
    if fee <= 0:
        raise ValueError(f"Invalid fee: {fee}")

    count = data.get("count", data.get("count_range", defaults.count_range))
    if isinstance(count, int):
        count_range = (count, count)
    else:
        count_range = _parse_range(count, "count_range", int)

    duration_samples = _parse_range(
        data.get("duration_samples", defaults.duration_samples), "duration_samples", int
    )
    duration_days = _parse_range(data.get("duration_days", defaults.duration_days), "duration_days", int)
    if duration_samples[0] < 1 or duration_days[0] < 1:
        raise ValueError("Trade durations must be at least 1")

    periods_per_day = int(data.get("periods_per_day", defaults.periods_per_day))
    if periods_per_day < 1:
        raise ValueError(f"Invalid periods_per_day: {periods_per_day}")

    price_jitter_pct = float(data.get("price_jitter_pct", defaults.price_jitter_pct))
    # jitter spans +/- pct/2 of the base price, so prices stay positive below 2
    if not 0 <= price_jitter_pct < 2:
        raise ValueError(f"Invalid price_jitter_pct: {price_jitter_pct}")

    return TradeConfig(
        count_range=count_range,
        fee=fee,
        edge_margin=int(data.get("edge_margin", defaults.edge_margin)),
        duration_samples=duration_samples,
        window_funding_range=_parse_range(
            data.get("window_funding_range", defaults.window_funding_range), "window_funding_range"
        ),
        window_days=int(data.get("window_days", defaults.window_days)),
        recent_days_excluded=int(data.get("recent_days_excluded", defaults.recent_days_excluded)),
        duration_days=duration_days,
        periods_per_day=periods_per_day,
        calendar_funding_range=_parse_range(
            data.get("calendar_funding_range", defaults.calendar_funding_range), "calendar_funding_range"
        ),
        price_jitter_pct=price_jitter_pct,
    )


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=data.get("audit_log_path"),
        notify_prefix=str(data.get("notify_prefix", "[DASHBOARD]")),
    )


def serialize_config(config: DashboardConfig) -> dict[str, Any]:
    payload = asdict(config)
    payload["mode"] = config.mode.value
    return payload
