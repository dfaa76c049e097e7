"""Notification backends."""

from __future__ import annotations

from dataclasses import dataclass, field


class Notifier:
    def notify(self, event: str, message: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass
class LogNotifier(Notifier):
    prefix: str = "[DASHBOARD]"

    def notify(self, event: str, message: str) -> None:
        print(f"{self.prefix} {event}: {message}")


@dataclass
class MemoryNotifier(Notifier):
    messages: list[tuple[str, str]] = field(default_factory=list)

    def notify(self, event: str, message: str) -> None:
        self.messages.append((event, message))
