from __future__ import annotations

import argparse
import json
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from trade_timeline.config import load_config, serialize_config
from trade_timeline.monitoring import AuditLog, LogNotifier, Monitor
from trade_timeline.runtime import build_dashboard, create_run_context, dashboard_to_payload
from trade_timeline.simulator import TimelineMode


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", required=True)
    parser.add_argument("--output", required=True)
    parser.add_argument("--seed", default=None)
    parser.add_argument("--mode", choices=[mode.value for mode in TimelineMode], default=None)
    args = parser.parse_args()

    config_path = Path(args.config)
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    config = load_config(config_path)
    if args.mode is not None:
        config = replace(config, mode=TimelineMode(args.mode))
    context = create_run_context(config.run_id_prefix, seed=args.seed, config_path=config_path)

    audit = AuditLog(
        output_path.with_suffix(".audit.log"),
        run_id=context.run_id,
        seed=context.seed,
        config_hash=context.config_hash,
    )
    monitor = Monitor(LogNotifier(prefix=config.monitoring.notify_prefix))
    datasets = build_dashboard(
        config,
        seed=context.seed,
        now=datetime.now(timezone.utc),
        audit=audit,
        monitor=monitor,
    )

    report = {
        "generated_at_utc": context.started_at.isoformat(),
        "run_id": context.run_id,
        "seed": context.seed,
        "config_path": str(config_path),
        "config_hash": context.config_hash,
        "config": serialize_config(config),
        **dashboard_to_payload(datasets),
    }
    output_path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
