"""Timeline data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Side(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"


class TimelineMode(str, Enum):
    TIME_SERIES = "time_series"
    BAR_CHART = "bar_chart"


@dataclass(frozen=True)
class PricePoint:
    timestamp: datetime
    price: float
    volume: float
    open_marker: Optional[float] = None
    close_marker: Optional[float] = None


@dataclass(frozen=True)
class TradeEvent:
    id: str
    side: Side
    start_time: datetime
    end_time: datetime
    funding_total: float  # signed percentage
    periods: int
    fee: float
    start_price: Optional[float] = None
    end_price: Optional[float] = None
    # bar-chart only
    duration_days: Optional[int] = None
    profit_loss_scale: Optional[float] = None
    date_label: Optional[str] = None
    start_day: Optional[int] = None

    @property
    def is_priced(self) -> bool:
        return self.start_price is not None and self.end_price is not None


@dataclass(frozen=True)
class DashboardMetrics:
    current_price: float
    previous_price: float
    change_pct: float
    change_defined: bool
    open_markers: int
    close_markers: int
    trade_count: int
    long_count: int
    short_count: int
    avg_funding: float
    unpriced_trades: int


@dataclass(frozen=True)
class PairDataset:
    pair: str
    mode: TimelineMode
    base_price: float
    generated_at: datetime
    trades: list[TradeEvent]
    metrics: DashboardMetrics
    points: list[PricePoint] = field(default_factory=list)
