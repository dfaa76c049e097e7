"""JSON-ready projection of generated datasets."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Iterable

from trade_timeline.simulator.models import PairDataset, PricePoint, TradeEvent


def _serialize_point(point: PricePoint) -> dict[str, Any]:
    payload = asdict(point)
    payload["timestamp"] = point.timestamp.isoformat()
    return payload


def _serialize_trade(trade: TradeEvent) -> dict[str, Any]:
    payload = asdict(trade)
    payload["side"] = trade.side.value
    payload["start_time"] = trade.start_time.isoformat()
    payload["end_time"] = trade.end_time.isoformat()
    return payload


def dataset_to_payload(dataset: PairDataset) -> dict[str, Any]:
    return {
        "pair": dataset.pair,
        "mode": dataset.mode.value,
        "base_price": dataset.base_price,
        "generated_at": dataset.generated_at.isoformat(),
        "metrics": asdict(dataset.metrics),
        "points": [_serialize_point(point) for point in dataset.points],
        "trades": [_serialize_trade(trade) for trade in dataset.trades],
    }


def dashboard_to_payload(datasets: Iterable[PairDataset]) -> dict[str, Any]:
    return {"pairs": [dataset_to_payload(dataset) for dataset in datasets]}
