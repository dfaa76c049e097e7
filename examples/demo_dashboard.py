from datetime import datetime, timezone

from trade_timeline.config import default_config
from trade_timeline.monitoring import LogNotifier, Monitor
from trade_timeline.runtime import build_dashboard
from trade_timeline.simulator import TimelineMode


now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
monitor = Monitor(LogNotifier(prefix="[DEMO]"))

for mode in TimelineMode:
    config = default_config(mode)
    datasets = build_dashboard(config, seed=42, now=now, monitor=monitor)
    print(f"== {mode.value}")
    for dataset in datasets:
        metrics = dataset.metrics
        print(
            f"{dataset.pair}: trades={metrics.trade_count} long={metrics.long_count} "
            f"short={metrics.short_count} avg_funding={metrics.avg_funding:+.2f}%"
        )
        if dataset.points:
            print(
                f"  price={metrics.current_price:,.2f} change={metrics.change_pct:+.2f}% "
                f"opens={metrics.open_markers} closes={metrics.close_markers}"
            )
        for trade in dataset.trades[:3]:
            print(f"  {trade.id} {trade.side.value} {trade.start_time:%Y-%m-%d %H:%M} -> {trade.end_time:%Y-%m-%d %H:%M}")
