"""Align trade events with the price path."""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional, Sequence

from trade_timeline.simulator.models import PricePoint, TradeEvent


def nearest_point_index(
    points: Sequence[PricePoint],
    timestamp: datetime,
    tolerance: timedelta,
) -> Optional[int]:
    """Index of the sample nearest to ``timestamp`` strictly within ``tolerance``.

    Ties resolve to the earlier sample.
    """
    best_index: Optional[int] = None
    best_delta: Optional[timedelta] = None
    for index, point in enumerate(points):
        delta = abs(point.timestamp - timestamp)
        if delta >= tolerance:
            continue
        if best_delta is None or delta < best_delta:
            best_index = index
            best_delta = delta
    return best_index


def reconcile_timeline(
    points: Sequence[PricePoint],
    trades: Sequence[TradeEvent],
    interval: timedelta,
) -> tuple[list[PricePoint], list[TradeEvent]]:
    """Mark trade boundaries on the path and price the trades from it.

    Markers always carry the matched sample's own price, so several trades
    landing on one sample agree and trade order does not matter. A boundary
    with no sample inside the interval leaves that trade price as ``None``.
    """
    reconciled_points = list(points)
    reconciled_trades: list[TradeEvent] = []
    for trade in trades:
        start_price = trade.start_price
        end_price = trade.end_price

        start_index = nearest_point_index(reconciled_points, trade.start_time, interval)
        if start_index is not None:
            point = reconciled_points[start_index]
            reconciled_points[start_index] = replace(point, open_marker=point.price)
            start_price = point.price

        end_index = nearest_point_index(reconciled_points, trade.end_time, interval)
        if end_index is not None:
            point = reconciled_points[end_index]
            reconciled_points[end_index] = replace(point, close_marker=point.price)
            end_price = point.price

        reconciled_trades.append(replace(trade, start_price=start_price, end_price=end_price))
    return reconciled_points, reconciled_trades


def jitter_price(base_price: float, jitter_pct: float, rng: random.Random) -> float:
    return round(base_price + (rng.random() - 0.5) * base_price * jitter_pct, 2)


def price_calendar_trades(
    trades: Sequence[TradeEvent],
    base_price: float,
    rng: random.Random,
    jitter_pct: float = 0.1,
) -> list[TradeEvent]:
    """Price bar-chart trades directly from the base price."""
    priced: list[TradeEvent] = []
    for trade in trades:
        if trade.is_priced:
            priced.append(trade)
            continue
        priced.append(
            replace(
                trade,
                start_price=jitter_price(base_price, jitter_pct, rng),
                end_price=jitter_price(base_price, jitter_pct, rng),
            )
        )
    return priced
