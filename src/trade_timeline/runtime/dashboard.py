"""Build the per-pair datasets handed to the dashboard renderer."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Optional

from trade_timeline.config.models import DashboardConfig
from trade_timeline.metrics.aggregator import aggregate_metrics
from trade_timeline.monitoring.audit import AuditLog
from trade_timeline.monitoring.monitor import Monitor
from trade_timeline.runtime.context import create_run_context, pair_rng, resolve_seed
from trade_timeline.simulator.models import PairDataset, TimelineMode
from trade_timeline.simulator.price_path import simulate_price_path
from trade_timeline.simulator.reconcile import price_calendar_trades, reconcile_timeline
from trade_timeline.simulator.time import require_aware
from trade_timeline.simulator.trades import synthesize_trades


def base_price_for(pair: str, config: DashboardConfig) -> float:
    try:
        return config.pairs[pair]
    except KeyError as exc:
        raise ValueError(f"Unknown instrument pair: {pair}") from exc


def build_pair_dataset(
    pair: str,
    config: DashboardConfig,
    rng: random.Random,
    now: datetime,
) -> PairDataset:
    require_aware(now)
    base_price = base_price_for(pair, config)
    points = []
    if config.mode == TimelineMode.TIME_SERIES:
        points = simulate_price_path(base_price, config.price_path, rng, now)
    trades = synthesize_trades(config.mode, config.trades, config.price_path, rng, now, config.timezone)

    if config.mode == TimelineMode.TIME_SERIES:
        points, trades = reconcile_timeline(points, trades, config.price_path.interval)
    else:
        trades = price_calendar_trades(trades, base_price, rng, config.trades.price_jitter_pct)

    return PairDataset(
        pair=pair,
        mode=config.mode,
        base_price=base_price,
        generated_at=now,
        trades=trades,
        metrics=aggregate_metrics(points, trades),
        points=points,
    )


def build_dashboard(
    config: DashboardConfig,
    seed: Optional[int | str] = None,
    now: Optional[datetime] = None,
    audit: Optional[AuditLog] = None,
    monitor: Optional[Monitor] = None,
) -> list[PairDataset]:
    """Generate one dataset per configured pair, all anchored at ``now``."""
    if seed is None and audit is not None:
        seed = audit.seed
    seed = resolve_seed(seed)
    if now is None:
        now = datetime.now(timezone.utc)
    if audit is None and config.monitoring.audit_log_path:
        context = create_run_context(config.run_id_prefix, seed=seed)
        audit = AuditLog(config.monitoring.audit_log_path, run_id=context.run_id, seed=context.seed)

    if audit is not None:
        audit.log(
            "dashboard_start",
            {"mode": config.mode.value, "pairs": list(config.pairs), "now": now.isoformat()},
        )

    datasets = []
    for pair in config.pairs:
        dataset = build_pair_dataset(pair, config, pair_rng(seed, pair), now)
        datasets.append(dataset)
        if audit is not None:
            audit.log(
                "pair_generated",
                {
                    "pair": pair,
                    "points": len(dataset.points),
                    "trades": dataset.metrics.trade_count,
                    "unpriced_trades": dataset.metrics.unpriced_trades,
                },
            )
        if monitor is not None:
            monitor.check_dataset(dataset)

    if audit is not None:
        audit.log("dashboard_complete", {"datasets": len(datasets)})
    return datasets
