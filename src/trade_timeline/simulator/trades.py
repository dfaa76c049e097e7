"""Trade event synthesis for both timeline variants."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from trade_timeline.simulator.models import Side, TimelineMode, TradeEvent
from trade_timeline.simulator.time import day_label, sample_time, window_start

if TYPE_CHECKING:
    from trade_timeline.config.models import PricePathConfig, TradeConfig


def draw_trade_count(count_range: tuple[int, int], rng: random.Random) -> int:
    low, high = count_range
    if low == high:
        return max(0, low)
    return max(0, rng.randint(low, high))


def draw_side(rng: random.Random) -> Side:
    return Side.LONG if rng.random() > 0.5 else Side.SHORT


def profit_loss_scale(funding_total: float) -> float:
    """Bar sizing value, not a financial metric."""
    return abs(funding_total) * 20.0 + 20.0


def sort_trades(trades: list[TradeEvent]) -> list[TradeEvent]:
    return sorted(trades, key=lambda trade: trade.start_time)


def _interior_index_range(sample_count: int, edge_margin: int) -> tuple[int, int]:
    # start must leave room for at least one sample after it
    last_start = sample_count - 2
    low = min(max(edge_margin, 0), last_start)
    high = min(max(low, sample_count - 1 - edge_margin), last_start)
    return low, high


def synthesize_window_trades(
    config: TradeConfig,
    path_config: PricePathConfig,
    rng: random.Random,
    now: datetime,
) -> list[TradeEvent]:
    """Trades placed on the sample grid of a path ending at ``now``."""
    sample_count = path_config.sample_count
    if sample_count < 2:
        return []

    interval = path_config.interval
    low, high = _interior_index_range(sample_count, config.edge_margin)
    trades: list[TradeEvent] = []
    for index in range(draw_trade_count(config.count_range, rng)):
        start_index = rng.randint(low, high)
        duration = rng.randint(*config.duration_samples)
        end_index = min(start_index + duration, sample_count - 1)
        trades.append(
            TradeEvent(
                id=f"trade-{index}",
                side=draw_side(rng),
                start_time=sample_time(now, start_index, sample_count, interval),
                end_time=sample_time(now, end_index, sample_count, interval),
                funding_total=rng.uniform(*config.window_funding_range),
                periods=end_index - start_index,
                fee=config.fee,
            )
        )
    return sort_trades(trades)


def calendar_trade_span(
    start: datetime,
    start_day: int,
    duration_days: int,
    window_days: int,
) -> tuple[datetime, datetime, int]:
    """Clamp a calendar trade into ``[start, start + window_days]``.

    Returns ``(start_time, end_time, duration_days)``. The end is cut at the
    window end; the start day is kept at least one day before it.
    """
    start_day = min(max(start_day, 0), window_days - 1)
    end_day = min(start_day + max(duration_days, 1), window_days)
    start_time = start + timedelta(days=start_day)
    end_time = start + timedelta(days=end_day)
    return start_time, end_time, (end_time - start_time).days


def synthesize_calendar_trades(
    config: TradeConfig,
    rng: random.Random,
    now: datetime,
    timezone: str = "UTC",
) -> list[TradeEvent]:
    """Whole-day trades inside the look-back window ending at ``now``."""
    if config.window_days < 1:
        return []

    start = window_start(now, config.window_days)
    start_days = max(config.window_days - config.recent_days_excluded, 1)
    trades: list[TradeEvent] = []
    for index in range(draw_trade_count(config.count_range, rng)):
        start_day = rng.randrange(start_days)
        start_time, end_time, duration_days = calendar_trade_span(
            start, start_day, rng.randint(*config.duration_days), config.window_days
        )
        side = draw_side(rng)
        funding_total = rng.uniform(*config.calendar_funding_range)
        trades.append(
            TradeEvent(
                id=f"trade-{index}",
                side=side,
                start_time=start_time,
                end_time=end_time,
                funding_total=funding_total,
                periods=duration_days * config.periods_per_day,
                fee=config.fee,
                duration_days=duration_days,
                profit_loss_scale=profit_loss_scale(funding_total),
                date_label=day_label(start_time, timezone),
                start_day=min(start_day, config.window_days - 1),
            )
        )
    return sort_trades(trades)


def synthesize_trades(
    mode: TimelineMode,
    config: TradeConfig,
    path_config: PricePathConfig,
    rng: random.Random,
    now: datetime,
    timezone: str = "UTC",
) -> list[TradeEvent]:
    if mode == TimelineMode.TIME_SERIES:
        return synthesize_window_trades(config, path_config, rng, now)
    return synthesize_calendar_trades(config, rng, now, timezone)
