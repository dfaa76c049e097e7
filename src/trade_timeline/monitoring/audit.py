"""Append-only audit log for dataset generation runs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


@dataclass
class AuditLog:
    path: Path
    run_id: str | None = None
    seed: str | None = None
    config_hash: str | None = None

    def __init__(
        self,
        path: str | Path,
        run_id: str | None = None,
        seed: str | None = None,
        config_hash: str | None = None,
    ) -> None:
        self.path = Path(path)
        self.run_id = run_id
        self.seed = seed
        self.config_hash = config_hash
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: str, payload: dict[str, Any]) -> None:
        record = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "run_id": self.run_id,
            "seed": self.seed,
            "config_hash": self.config_hash,
            "event": event,
            "payload": payload,
        }
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, default=str))
            handle.write("\n")

    def events(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        records = []
        for line in self.path.read_text(encoding="utf-8").splitlines():
            if line.strip():
                records.append(json.loads(line))
        return records
