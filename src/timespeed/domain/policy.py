"""Config-backed policy deciding when time freezes and how fast it runs."""

from __future__ import annotations

from .enums import Season
from .models import Location
from .time_config import DEFAULT_CONFIG, TimeConfig

FESTIVAL_DAYS: dict[Season, frozenset[int]] = {
    Season.SPRING: frozenset({13, 24}),
    Season.SUMMER: frozenset({11, 28}),
    Season.FALL: frozenset({16, 27}),
    Season.WINTER: frozenset({8, 25}),
}


def is_festival_day(season: Season, day_of_month: int) -> bool:
    return day_of_month in FESTIVAL_DAYS.get(season, frozenset())


class ConfigPolicy:
    """Answer freeze and speed questions from a :class:`TimeConfig`."""

    def __init__(self, config: TimeConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def should_freeze_location(self, location: Location | None) -> bool:
        if location is None:
            return False
        rules = self.config.freeze_time
        if location.name in rules.except_location_names:
            return False
        return location.name in rules.by_location_name or rules.for_type(location.location_type)

    def should_freeze_time(self, time_of_day: int) -> bool:
        threshold = self.config.freeze_time.anywhere_at_time
        return threshold is not None and time_of_day >= threshold

    def milliseconds_per_minute(self, location: Location | None) -> int:
        if location is None:
            return 0
        seconds = self.config.seconds_per_minute.for_type(location.location_type)
        return round(seconds * 1000)

    def should_rescale(self, season: Season, day_of_month: int) -> bool:
        return self.config.enable_on_festival_days or not is_festival_day(season, day_of_month)
