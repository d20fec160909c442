"""Rescaling of the raw elapsed-time counter."""

from __future__ import annotations

from .changes import TracksChanges
from .models import ClockSample

FALLBACK_INTERVAL_MS = 1000


class RateScaler(TracksChanges):
    """Map one tick of game time onto a configurable real-time duration.

    Progress is scaled against the clock's own reference interval rather than
    the previous target, so changing the target part way through a tick keeps
    the progress already made and only changes the rate from then on.
    """

    def __init__(self, target_interval: int = 0) -> None:
        super().__init__()
        self._target_interval = max(target_interval, 0)

    @property
    def target_interval(self) -> int:
        return self._target_interval

    def set_target_interval(self, ms: int) -> int:
        old, self._target_interval = self._target_interval, max(ms, 0)
        self._record("target_interval", old, self._target_interval)
        return self._target_interval

    def change_interval(self, delta: int) -> int:
        """Apply ``delta``; a decrease removes at most the current interval."""

        min_allowed = min(self._target_interval, abs(delta))
        return self.set_target_interval(max(min_allowed, self._target_interval + delta))

    def scale(self, amount: int, reference_interval: int) -> int:
        return round(amount * reference_interval / self._target_interval)

    def on_clock_sample(
        self,
        sample: ClockSample,
        *,
        frozen: bool,
        rescale_enabled: bool,
        reference_interval: int,
    ) -> int:
        """Return the elapsed value to write back to the clock."""

        if frozen:
            return 0 if sample.boundary_crossed else sample.previous
        if not rescale_enabled:
            return sample.current
        if self._target_interval == 0:
            self.set_target_interval(FALLBACK_INTERVAL_MS)

        if sample.boundary_crossed:
            return self.scale(sample.current, reference_interval)
        return sample.previous + self.scale(sample.difference, reference_interval)
