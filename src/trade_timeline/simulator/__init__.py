"""Price path, trade synthesis and reconciliation."""

from trade_timeline.simulator.models import (
    DashboardMetrics,
    PairDataset,
    PricePoint,
    Side,
    TimelineMode,
    TradeEvent,
)
from trade_timeline.simulator.price_path import simulate_price_path
from trade_timeline.simulator.reconcile import (
    nearest_point_index,
    price_calendar_trades,
    reconcile_timeline,
)
from trade_timeline.simulator.trades import (
    calendar_trade_span,
    draw_trade_count,
    profit_loss_scale,
    synthesize_calendar_trades,
    synthesize_trades,
    synthesize_window_trades,
)

__all__ = [
    "DashboardMetrics",
    "PairDataset",
    "PricePoint",
    "Side",
    "TimelineMode",
    "TradeEvent",
    "calendar_trade_span",
    "draw_trade_count",
    "nearest_point_index",
    "price_calendar_trades",
    "profit_loss_scale",
    "reconcile_timeline",
    "simulate_price_path",
    "synthesize_calendar_trades",
    "synthesize_trades",
    "synthesize_window_trades",
]
