"""Dataclasses describing the values that flow through the controller.

None of these are persisted.  They are produced fresh by the host (locations,
world context, clock samples) or by the controller itself (state changes) and
consumed immediately.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import LocationType, Season

# In-game time of day is encoded the way the host clock reports it: 600 is
# 6:00am, 1350 is 1:50pm and 2600 is 2:00am the next day.
DAY_START_TIME = 600
DAY_END_TIME = 2600


@dataclass(frozen=True, slots=True)
class Location:
    """A host location as seen by the policy provider and clock source."""

    name: str
    location_type: LocationType = LocationType.OUTDOORS
    extra_ms_per_minute: int = 0


@dataclass(slots=True)
class WorldContext:
    """What the host currently reports about the world."""

    location: Location | None = None
    time_of_day: int = DAY_START_TIME
    season: Season = Season.SPRING
    day_of_month: int = 1
    world_ready: bool = True
    main_player: bool = True
    player_free: bool = True


@dataclass(frozen=True, slots=True)
class ClockSample:
    """Two consecutive raw readings of the elapsed-time-since-tick counter."""

    previous: int
    current: int

    @property
    def boundary_crossed(self) -> bool:
        """The counter wrapped, so one tick of game time elapsed."""

        return self.current < self.previous

    @property
    def difference(self) -> int:
        return self.current - self.previous


@dataclass(frozen=True, slots=True)
class StateChange:
    """A tracked field moved from one value to another."""

    field: str
    old: object
    new: object

    def describe(self) -> str:
        return f"{self.field} changed from {self.old} to {self.new}"


@dataclass(slots=True)
class TickResult:
    """Outcome of processing one world update."""

    sample: ClockSample | None = None
    written: int | None = None
    frozen: bool = False
