"""Monitoring exports."""

from trade_timeline.monitoring.audit import AuditLog
from trade_timeline.monitoring.monitor import Monitor
from trade_timeline.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "AuditLog",
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
