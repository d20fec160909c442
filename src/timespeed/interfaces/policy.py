"""Policy Provider Protocol Interface.

This module defines the protocol (interface) for the provider that decides
when time freezes automatically and how fast it runs.
"""

from typing import Protocol

from timespeed.domain.enums import Season
from timespeed.domain.models import Location


class IPolicyProvider(Protocol):
    """Protocol defining the freeze and speed policy."""

    def should_freeze_location(self, location: Location | None) -> bool:
        """Return whether time freezes automatically at a location."""
        ...

    def should_freeze_time(self, time_of_day: int) -> bool:
        """Return whether time freezes automatically at a time of day.

        Args:
            time_of_day: Host time value, e.g. 2200 for 10:00pm
        """
        ...

    def milliseconds_per_minute(self, location: Location | None) -> int:
        """Return the configured real milliseconds per in-game minute."""
        ...

    def should_rescale(self, season: Season, day_of_month: int) -> bool:
        """Return whether the flow of time is adjusted on a date."""
        ...
