"""Runtime context exports."""

from trade_timeline.runtime.context import RunContext, create_run_context, pair_rng
from trade_timeline.runtime.dashboard import base_price_for, build_dashboard, build_pair_dataset
from trade_timeline.runtime.export import dashboard_to_payload, dataset_to_payload

__all__ = [
    "RunContext",
    "base_price_for",
    "build_dashboard",
    "build_pair_dataset",
    "create_run_context",
    "dashboard_to_payload",
    "dataset_to_payload",
    "pair_rng",
]
