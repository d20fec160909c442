"""Notifier Protocol Interface."""

from typing import Protocol


class INotifier(Protocol):
    """Receives short human-readable state-change messages."""

    def quick_notify(self, message: str) -> None:
        """Display a message for one second."""
        ...

    def short_notify(self, message: str) -> None:
        """Display a message for two seconds."""
        ...
