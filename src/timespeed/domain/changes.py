"""Change-tracking base shared by the stateful controller components."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .models import StateChange

logger = logging.getLogger(__name__)

ChangeObserver = Callable[[StateChange], None]


class TracksChanges:
    """Report every tracked field transition to subscribed observers."""

    def __init__(self) -> None:
        self._observers: list[ChangeObserver] = []

    def subscribe(self, observer: ChangeObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: ChangeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _record(self, field: str, old: object, new: object) -> None:
        if old == new:
            return
        change = StateChange(field=field, old=old, new=new)
        logger.debug("%s", change.describe())
        for observer in list(self._observers):
            observer(change)
