"""Run context creation and metadata."""

from __future__ import annotations

import random
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from trade_timeline.config.loader import compute_config_hash


@dataclass(frozen=True)
class RunContext:
    run_id: str
    seed: str
    started_at: datetime
    config_path: Optional[Path] = None
    config_hash: Optional[str] = None


def create_run_context(
    run_id_prefix: str,
    seed: Optional[int | str] = None,
    config_path: Optional[str | Path] = None,
    run_id: Optional[str] = None,
) -> RunContext:
    started_at = datetime.now(timezone.utc)
    seed = resolve_seed(seed)
    path = Path(config_path) if config_path is not None else None
    config_hash = compute_config_hash(path) if path is not None else None
    if run_id is None:
        stamp = started_at.strftime("%Y%m%dT%H%M%SZ")
        run_id = f"{run_id_prefix}-{stamp}-{seed}"
    return RunContext(
        run_id=run_id,
        seed=seed,
        started_at=started_at,
        config_path=path,
        config_hash=config_hash,
    )


def resolve_seed(seed: Optional[int | str] = None) -> str:
    return str(secrets.randbits(32) if seed is None else seed)


def pair_rng(seed: int | str, pair: str) -> random.Random:
    """Independent random source per pair, reproducible from the run seed."""
    return random.Random(f"{seed}:{pair}")
