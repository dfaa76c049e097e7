"""Alert routing for generated datasets."""

from __future__ import annotations

from dataclasses import dataclass

from trade_timeline.monitoring.notifier import Notifier
from trade_timeline.simulator.models import PairDataset


@dataclass
class Monitor:
    notifier: Notifier

    def unpriced_trades(self, pair: str, count: int) -> None:
        self.notifier.notify("UNPRICED_TRADES", f"{pair}: {count} trade(s) without a matching price sample")

    def undefined_change(self, pair: str) -> None:
        self.notifier.notify("UNDEFINED_CHANGE", f"{pair}: no previous price, change reported as 0.00%")

    def check_dataset(self, dataset: PairDataset) -> None:
        metrics = dataset.metrics
        if metrics.unpriced_trades:
            self.unpriced_trades(dataset.pair, metrics.unpriced_trades)
        if dataset.points and not metrics.change_defined:
            self.undefined_change(dataset.pair)
