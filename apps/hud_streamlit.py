from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path

import streamlit as st

from trade_timeline.config import default_config, load_config
from trade_timeline.runtime import build_dashboard
from trade_timeline.simulator import PairDataset, TimelineMode, TradeEvent
from trade_timeline.simulator.time import format_trade_time


def _format_signed_pct(value: float) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def _trade_line(trade: TradeEvent) -> str:
    return (
        f"TRADE {trade.side.value} | "
        f"{format_trade_time(trade.start_time)} → {format_trade_time(trade.end_time)} | "
        f"Funding total (neto): {_format_signed_pct(trade.funding_total)} | "
        f"Periods: {trade.periods} | "
        f"Fee: ${trade.fee:.2f}"
    )


def _render_pair(dataset: PairDataset) -> None:
    metrics = dataset.metrics
    st.subheader(dataset.pair)

    col_a, col_b, col_c = st.columns(3)
    if dataset.mode == TimelineMode.TIME_SERIES:
        col_a.metric("Price", f"{metrics.current_price:,.2f}", _format_signed_pct(metrics.change_pct))
    else:
        col_a.metric("Avg Funding", _format_signed_pct(metrics.avg_funding))
    col_b.metric("Long", str(metrics.long_count))
    col_c.metric("Short", str(metrics.short_count))

    if dataset.mode == TimelineMode.TIME_SERIES:
        st.line_chart(
            {
                "time": [point.timestamp for point in dataset.points],
                "price": [point.price for point in dataset.points],
            },
            x="time",
            y="price",
        )
        st.caption(f"Opens: {metrics.open_markers} | Closes: {metrics.close_markers}")
    else:
        st.bar_chart(
            {
                "trade": [f"{trade.date_label} ({trade.id})" for trade in dataset.trades],
                "duration_days": [trade.duration_days for trade in dataset.trades],
            },
            x="trade",
            y="duration_days",
        )

    st.markdown("**Recent Trades**")
    st.code("\n".join(_trade_line(trade) for trade in dataset.trades) or "No trades")


def main() -> None:
    st.set_page_config(page_title="Trading Dashboard", layout="wide")
    st.title("Trading Dashboard")

    default_config_path = os.getenv("DASHBOARD_CONFIG_PATH", "configs/dashboard_v1.yaml")
    config_path = Path(st.sidebar.text_input("Config path", value=default_config_path))
    seed = st.sidebar.text_input("Seed", value="") or None

    config = load_config(config_path) if config_path.exists() else default_config()
    # reruns regenerate on every interaction; keep them out of the audit trail
    config = replace(config, monitoring=replace(config.monitoring, audit_log_path=None))
    mode = st.sidebar.selectbox(
        "Mode",
        [mode.value for mode in TimelineMode],
        index=[mode.value for mode in TimelineMode].index(config.mode.value),
    )
    if mode != config.mode.value:
        config = replace(config, mode=TimelineMode(mode))

    for dataset in build_dashboard(config, seed=seed):
        _render_pair(dataset)


if __name__ == "__main__":
    main()
