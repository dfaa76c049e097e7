"""Summary statistics for a generated pair dataset."""

from __future__ import annotations

from typing import Sequence

from trade_timeline.simulator.models import DashboardMetrics, PricePoint, Side, TradeEvent


def percent_change(current: float, previous: float) -> float:
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100.0


def mean_funding(trades: Sequence[TradeEvent]) -> float:
    if not trades:
        return 0.0
    return sum(trade.funding_total for trade in trades) / len(trades)


def aggregate_metrics(points: Sequence[PricePoint], trades: Sequence[TradeEvent]) -> DashboardMetrics:
    current_price = points[-1].price if points else 0.0
    previous_price = points[-2].price if len(points) > 1 else 0.0
    long_count = sum(1 for trade in trades if trade.side == Side.LONG)

    return DashboardMetrics(
        current_price=current_price,
        previous_price=previous_price,
        change_pct=percent_change(current_price, previous_price),
        change_defined=previous_price != 0,
        open_markers=sum(1 for point in points if point.open_marker is not None),
        close_markers=sum(1 for point in points if point.close_marker is not None),
        trade_count=len(trades),
        long_count=long_count,
        short_count=len(trades) - long_count,
        avg_funding=mean_funding(trades),
        unpriced_trades=sum(1 for trade in trades if not trade.is_priced),
    )
