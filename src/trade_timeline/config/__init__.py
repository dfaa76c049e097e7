"""Config loading and freezing."""

from trade_timeline.config.loader import (
    compute_config_hash,
    freeze_config,
    load_config,
    serialize_config,
    verify_config_lock,
)
from trade_timeline.config.models import (
    DEFAULT_PAIRS,
    DashboardConfig,
    MonitoringConfig,
    PricePathConfig,
    TradeConfig,
    default_config,
)

__all__ = [
    "DEFAULT_PAIRS",
    "DashboardConfig",
    "MonitoringConfig",
    "PricePathConfig",
    "TradeConfig",
    "compute_config_hash",
    "default_config",
    "freeze_config",
    "load_config",
    "serialize_config",
    "verify_config_lock",
]
