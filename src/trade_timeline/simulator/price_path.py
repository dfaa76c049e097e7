"""Biased random-walk price path."""

from __future__ import annotations

import random
from datetime import datetime
from typing import TYPE_CHECKING

from trade_timeline.simulator.models import PricePoint
from trade_timeline.simulator.time import sample_times

if TYPE_CHECKING:
    from trade_timeline.config.models import PricePathConfig


def draw_trend(config: PricePathConfig, rng: random.Random) -> float:
    return rng.uniform(*config.trend_range)


def simulate_price_path(
    base_price: float,
    config: PricePathConfig,
    rng: random.Random,
    now: datetime,
) -> list[PricePoint]:
    """Walk ``config.sample_count`` steps from ``base_price``, ending at ``now``.

    A single trend bias is drawn per call and applied to every step on top of
    the per-step noise. Only the stored price is rounded; the running price
    keeps full precision so rounding error does not compound along the path.
    Prices are expected positive for the configured ranges but not guaranteed
    for arbitrary ones.
    """
    if config.sample_count <= 0:
        return []

    trend = draw_trend(config, rng)
    price = float(base_price)
    points: list[PricePoint] = []
    for timestamp in sample_times(now, config.sample_count, config.interval):
        volatility = rng.uniform(*config.volatility_range)
        noise = (rng.random() - 0.5) * volatility
        price *= 1.0 + noise + trend
        volume = rng.uniform(*config.volume_range)
        points.append(PricePoint(timestamp=timestamp, price=round(price, 2), volume=round(volume, 2)))
    return points
