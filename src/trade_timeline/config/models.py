"""Configuration models for reproducible dashboard runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from trade_timeline.simulator.models import TimelineMode


DEFAULT_PAIRS: dict[str, float] = {
    "BTC-USDT": 43000.0,
    "ETH-USDT": 2500.0,
    "XMR-USDT": 180.0,
}


@dataclass(frozen=True)
class PricePathConfig:
    sample_count: int = 100
    interval_minutes: int = 15
    volatility_range: tuple[float, float] = (0.005, 0.02)
    trend_range: tuple[float, float] = (-0.001, 0.001)
    volume_range: tuple[float, float] = (100.0, 1100.0)

    @property
    def interval(self) -> timedelta:
        return timedelta(minutes=self.interval_minutes)


@dataclass(frozen=True)
class TradeConfig:
    count_range: tuple[int, int] = (8, 12)
    fee: float = 1.20
    # window-relative policy
    edge_margin: int = 10
    duration_samples: tuple[int, int] = (5, 25)
    window_funding_range: tuple[float, float] = (-1.0, 1.0)
    # calendar-relative policy
    window_days: int = 30
    recent_days_excluded: int = 5
    duration_days: tuple[int, int] = (1, 8)
    periods_per_day: int = 3
    calendar_funding_range: tuple[float, float] = (-1.5, 1.5)
    price_jitter_pct: float = 0.1


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: Optional[str] = None
    notify_prefix: str = "[DASHBOARD]"


@dataclass(frozen=True)
class DashboardConfig:
    name: str
    version: str
    run_id_prefix: str
    mode: TimelineMode = TimelineMode.BAR_CHART
    timezone: str = "UTC"
    pairs: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_PAIRS))
    price_path: PricePathConfig = PricePathConfig()
    trades: TradeConfig = TradeConfig()
    monitoring: MonitoringConfig = MonitoringConfig()


def default_config(mode: TimelineMode = TimelineMode.BAR_CHART) -> DashboardConfig:
    return DashboardConfig(name="trade-dashboard", version="1", run_id_prefix="dashboard", mode=mode)
