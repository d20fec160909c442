"""Tracking of the host's elapsed-time counter plus an in-memory clock."""

from __future__ import annotations

from .models import DAY_START_TIME, ClockSample, Location

BASE_TICK_INTERVAL_MS = 7000
MINUTES_PER_TICK = 10


def next_time_of_day(time_of_day: int) -> int:
    """Advance a host time value (e.g. 1350) by one ten-minute tick."""

    advanced = time_of_day + MINUTES_PER_TICK
    if advanced % 100 >= 60:
        advanced = advanced - advanced % 100 + 100
    return advanced


class ClockTracker:
    """Remember the last elapsed value seen and report changes as samples."""

    def __init__(self, initial: int = 0) -> None:
        self.previous = initial

    def poll(self, elapsed: int) -> ClockSample | None:
        """Return a sample when ``elapsed`` moved since the last poll."""

        if elapsed == self.previous:
            return None
        sample = ClockSample(previous=self.previous, current=elapsed)
        self.previous = elapsed
        return sample

    def written(self, value: int) -> None:
        """Record a value the controller wrote back as the new baseline."""

        self.previous = value


class SimulatedClock:
    """In-memory stand-in for the host clock.

    ``elapsed`` counts real milliseconds since the last ten-minute tick.  Once
    it passes the location's reference interval it resets to zero and the
    time of day moves forward by ten minutes.
    """

    def __init__(
        self,
        *,
        location: Location | None = None,
        time_of_day: int = DAY_START_TIME,
        elapsed: int = 0,
    ) -> None:
        self.location = location
        self.time_of_day = time_of_day
        self.elapsed = elapsed

    def reference_interval(self, location: Location | None) -> int:
        extra = location.extra_ms_per_minute if location is not None else 0
        return BASE_TICK_INTERVAL_MS + extra

    def advance(self, milliseconds: int) -> bool:
        """Add real time; return whether a ten-minute tick elapsed."""

        self.elapsed += max(milliseconds, 0)
        if self.elapsed > self.reference_interval(self.location):
            self.elapsed = 0
            self.time_of_day = next_time_of_day(self.time_of_day)
            return True
        return False
