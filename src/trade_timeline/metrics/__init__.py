"""Dashboard metrics."""

from trade_timeline.metrics.aggregator import aggregate_metrics, mean_funding, percent_change

__all__ = ["aggregate_metrics", "mean_funding", "percent_change"]
