"""Declarative time-flow configuration read by the policy provider."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import LocationType


@dataclass(frozen=True, slots=True)
class SecondsPerMinute:
    """Real seconds per in-game minute, by location type."""

    indoors: float = 1.4
    outdoors: float = 1.4
    mines: float = 1.4
    skull_cavern: float = 0.9
    volcano_dungeon: float = 0.7

    def for_type(self, location_type: LocationType) -> float:
        return {
            LocationType.INDOORS: self.indoors,
            LocationType.OUTDOORS: self.outdoors,
            LocationType.MINE: self.mines,
            LocationType.SKULL_CAVERN: self.skull_cavern,
            LocationType.VOLCANO_DUNGEON: self.volcano_dungeon,
        }[location_type]


@dataclass(frozen=True, slots=True)
class FreezeRules:
    """When time should stop without the player asking."""

    anywhere_at_time: int | None = None  # host time format, e.g. 2200
    indoors: bool = False
    outdoors: bool = False
    mines: bool = False
    skull_cavern: bool = False
    volcano_dungeon: bool = False
    by_location_name: frozenset[str] = field(default_factory=frozenset)
    except_location_names: frozenset[str] = field(default_factory=frozenset)

    def for_type(self, location_type: LocationType) -> bool:
        return {
            LocationType.INDOORS: self.indoors,
            LocationType.OUTDOORS: self.outdoors,
            LocationType.MINE: self.mines,
            LocationType.SKULL_CAVERN: self.skull_cavern,
            LocationType.VOLCANO_DUNGEON: self.volcano_dungeon,
        }[location_type]


@dataclass(frozen=True, slots=True)
class TimeConfig:
    """Top-level configuration container."""

    seconds_per_minute: SecondsPerMinute = SecondsPerMinute()
    freeze_time: FreezeRules = FreezeRules()
    enable_on_festival_days: bool = False
    location_notify: bool = False


DEFAULT_CONFIG = TimeConfig()
