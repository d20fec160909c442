"""Time-flow controller tying the freeze verdict and rate scaler to host events.

Host callbacks are funnelled through :data:`EVENT_STEPS`, which lists for each
event kind which recomputations run and in what order.  Player actions
(toggle, faster, slower, reset, reload) are plain methods on the controller.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import replace
from enum import StrEnum

from timespeed.domain import messages
from timespeed.domain.clock import ClockTracker
from timespeed.domain.enums import AutoFreezeCause, HostEvent, IntervalStep, Season
from timespeed.domain.freeze import FreezeDecision
from timespeed.domain.models import (
    DAY_START_TIME,
    Location,
    StateChange,
    TickResult,
    WorldContext,
)
from timespeed.domain.policy import ConfigPolicy
from timespeed.domain.rate import RateScaler
from timespeed.domain.time_config import DEFAULT_CONFIG, TimeConfig
from timespeed.interfaces import IClockSource, INotifier, IPolicyProvider
from timespeed.services.notifier_service import LoggingNotifier

logger = logging.getLogger(__name__)

MINUTES_PER_INTERVAL = 10

INTERVAL_STEP_MS: dict[IntervalStep, int] = {
    IntervalStep.SMALL: 100,
    IntervalStep.NORMAL: 1000,
    IntervalStep.MEDIUM: 10_000,
    IntervalStep.LARGE: 100_000,
}


class Step(StrEnum):
    """Recomputations a host event can trigger."""

    START_SESSION = "start_session"
    RESET_FREEZE = "reset_freeze"
    RESCALE_FOR_DAY = "rescale_for_day"
    LOCATION_SETTINGS = "location_settings"
    FREEZE_FOR_TIME = "freeze_for_time"
    ADJUST_TIME = "adjust_time"
    NOTIFY_RELOADED = "notify_reloaded"


EVENT_STEPS: dict[HostEvent, tuple[Step, ...]] = {
    HostEvent.SESSION_LOADED: (Step.START_SESSION,),
    HostEvent.DAY_STARTED: (Step.RESET_FREEZE, Step.RESCALE_FOR_DAY, Step.LOCATION_SETTINGS),
    HostEvent.WARPED: (Step.LOCATION_SETTINGS,),
    HostEvent.TIME_CHANGED: (Step.FREEZE_FOR_TIME,),
    HostEvent.UPDATE_TICKED: (Step.ADJUST_TIME,),
    HostEvent.CONFIG_RELOADED: (
        Step.RESCALE_FOR_DAY,
        Step.LOCATION_SETTINGS,
        Step.NOTIFY_RELOADED,
    ),
}


class TimeFlowController:
    """Decide every world update whether the host clock advances, freezes or rescales."""

    def __init__(
        self,
        clock: IClockSource,
        *,
        config: TimeConfig = DEFAULT_CONFIG,
        policy: IPolicyProvider | None = None,
        notifier: INotifier | None = None,
        world: WorldContext | None = None,
        history_limit: int = 200,
    ) -> None:
        self.clock = clock
        self.config = config
        self.policy: IPolicyProvider = policy or ConfigPolicy(config)
        self.notifier: INotifier = notifier or LoggingNotifier()
        self.world = world or WorldContext()
        self.freeze = FreezeDecision()
        self.rate = RateScaler()
        self.tracker = ClockTracker(clock.elapsed)
        self.rescale_enabled = False
        self.last_tick: TickResult | None = None
        self.history: deque[StateChange] = deque(maxlen=history_limit)
        self._pending: list[StateChange] = []
        self.freeze.subscribe(self._pending.append)
        self.rate.subscribe(self._pending.append)
        self._steps: dict[Step, Callable[[], None]] = {
            Step.START_SESSION: self._start_session,
            Step.RESET_FREEZE: self._reset_freeze,
            Step.RESCALE_FOR_DAY: self._update_scale_for_day,
            Step.LOCATION_SETTINGS: self._update_settings_for_location,
            Step.FREEZE_FOR_TIME: self._update_freeze_for_time,
            Step.ADJUST_TIME: self._adjust_time,
            Step.NOTIFY_RELOADED: self._notify_reloaded,
        }

    # --- Queries ------------------------------------------------------------------

    @property
    def is_frozen(self) -> bool:
        return self.freeze.is_frozen()

    @property
    def target_interval(self) -> int:
        return self.rate.target_interval

    def should_enable(self, *, for_input: bool = False) -> bool:
        """Only the authoritative session in a loaded world may change time."""

        if not self.world.world_ready or not self.world.main_player:
            return False
        if for_input and not self.world.player_free:
            return False
        return True

    def snapshot(self) -> dict[str, object]:
        location = self.world.location
        return {
            "frozen": self.freeze.is_frozen(),
            "manual_override": self.freeze.manual_override,
            "auto_cause": self.freeze.auto_cause,
            "target_interval": self.rate.target_interval,
            "rescale_enabled": self.rescale_enabled,
            "elapsed": self.clock.elapsed,
            "time_of_day": self.world.time_of_day,
            "season": self.world.season,
            "day_of_month": self.world.day_of_month,
            "location": location.name if location is not None else None,
        }

    # --- Host events ----------------------------------------------------------------

    def update_world(self, **changes: object) -> WorldContext:
        """Replace fields of the world context reported by the host."""

        self.world = replace(self.world, **changes)
        return self.world

    def handle(self, event: HostEvent, *, local_player: bool = True) -> None:
        """Run the recomputations registered for ``event`` in order."""

        if event is not HostEvent.SESSION_LOADED and not self.should_enable():
            return
        if event is HostEvent.WARPED and not local_player:
            return

        for step in EVENT_STEPS[event]:
            self._steps[step]()
        self._flush_changes()

    def tick(self) -> TickResult | None:
        """Process one world update and return what was written to the clock."""

        self.last_tick = None
        self.handle(HostEvent.UPDATE_TICKED)
        return self.last_tick

    def load_session(self, *, main_player: bool = True) -> None:
        """Mark the world ready and run the session-load event."""

        self.update_world(main_player=main_player, world_ready=True)
        self.handle(HostEvent.SESSION_LOADED)

    def start_day(
        self,
        season: Season,
        day_of_month: int,
        *,
        location: Location | None = None,
        time_of_day: int = DAY_START_TIME,
    ) -> None:
        """Record the new date and run the day-start event."""

        self.update_world(
            season=season,
            day_of_month=day_of_month,
            time_of_day=time_of_day,
            location=location or self.world.location,
        )
        self.handle(HostEvent.DAY_STARTED)

    def warp(self, location: Location, *, local_player: bool = True) -> None:
        """Move to ``location`` and refresh its freeze and speed settings."""

        if local_player:
            self.update_world(location=location)
        self.handle(HostEvent.WARPED, local_player=local_player)

    def change_time(self, time_of_day: int) -> None:
        """Report a new time of day and re-check the time-of-day freeze."""

        self.update_world(time_of_day=time_of_day)
        self.handle(HostEvent.TIME_CHANGED)

    # --- Control surface ------------------------------------------------------------

    def toggle_freeze(self) -> bool:
        """Flip the freeze verdict for the player and return the new verdict."""

        if not self._accept_input("toggle freeze"):
            return self.freeze.is_frozen()

        frozen = self.freeze.toggle()
        if frozen:
            self.notifier.quick_notify(messages.TIME_STOPPED)
            logger.info("Time is frozen globally.")
        else:
            self.notifier.quick_notify(messages.TIME_RESUMED)
            logger.info('Time is resumed at "%s".', self._location_name())
        self._flush_changes()
        return frozen

    def increase_interval(self, step: IntervalStep = IntervalStep.NORMAL) -> int:
        """Slow time down by one ``step``; return the new interval."""

        return self._change_interval(INTERVAL_STEP_MS[step])

    def decrease_interval(self, step: IntervalStep = IntervalStep.NORMAL) -> int:
        """Speed time up by one ``step``; return the new interval."""

        return self._change_interval(-INTERVAL_STEP_MS[step])

    def reset_to_defaults(self) -> None:
        """Drop the player's override and let the configured settings apply."""

        if not self._accept_input("reset"):
            return

        self._reset_freeze()
        self._update_settings_for_location()
        self.notifier.quick_notify(messages.TIME_RESET)
        logger.info('Time flow is reset at "%s".', self._location_name())
        self._flush_changes()

    def reload_config(self, config: TimeConfig, *, policy: IPolicyProvider | None = None) -> None:
        """Swap in a new configuration and reapply it to the current context."""

        self.config = config
        self.policy = policy or ConfigPolicy(config)
        self.handle(HostEvent.CONFIG_RELOADED)

    # --- Steps ------------------------------------------------------------------------

    def _start_session(self) -> None:
        if not self.world.main_player:
            logger.warning("Disabled time control; only works for the main player in multiplayer.")
            return
        self.tracker = ClockTracker(self.clock.elapsed)
        self._reset_freeze()

    def _reset_freeze(self) -> None:
        self.freeze.reset(*self._freeze_predicates())

    def _update_scale_for_day(self) -> None:
        self.rescale_enabled = self.policy.should_rescale(self.world.season, self.world.day_of_month)

    def _update_settings_for_location(self) -> None:
        self.freeze.apply_auto_freeze_update(*self._freeze_predicates())

        location = self.world.location
        if location is None:
            return
        self.rate.set_target_interval(
            self.policy.milliseconds_per_minute(location) * MINUTES_PER_INTERVAL
        )

        if not self.config.location_notify:
            return
        frozen = self.freeze.is_frozen()
        cause = self.freeze.auto_cause
        if frozen and cause is AutoFreezeCause.TIME_OF_DAY_RULE:
            self.notifier.short_notify(messages.TIME_STOPPED_GLOBALLY)
        elif frozen and cause is AutoFreezeCause.LOCATION_RULE:
            self.notifier.short_notify(messages.TIME_STOPPED_HERE)
        else:
            self.notifier.short_notify(messages.speed_here(self.rate.target_interval))

    def _update_freeze_for_time(self) -> None:
        was_frozen = self.freeze.is_frozen()
        self.freeze.apply_auto_freeze_update(*self._freeze_predicates())

        if not was_frozen and self.freeze.is_frozen():
            self.notifier.short_notify(messages.TIME_STOPPED_AT_TIME)
            logger.info("Time automatically set to frozen at %s.", self.world.time_of_day)

    def _adjust_time(self) -> None:
        sample = self.tracker.poll(self.clock.elapsed)
        if sample is None:
            return

        frozen = self.freeze.is_frozen()
        written = self.rate.on_clock_sample(
            sample,
            frozen=frozen,
            rescale_enabled=self.rescale_enabled,
            reference_interval=self.clock.reference_interval(self.world.location),
        )
        if written != sample.current:
            self.clock.elapsed = written
            self.tracker.written(written)
        self.last_tick = TickResult(sample=sample, written=written, frozen=frozen)

    def _notify_reloaded(self) -> None:
        self.notifier.short_notify(messages.CONFIG_RELOADED)
        logger.info("Reloaded time configuration.")

    # --- Helpers ----------------------------------------------------------------------

    def _freeze_predicates(self) -> tuple[bool, bool]:
        if self.policy.should_freeze_location(self.world.location):
            return True, False
        return False, self.policy.should_freeze_time(self.world.time_of_day)

    def _change_interval(self, amount: int) -> int:
        if not self._accept_input("change interval"):
            return self.rate.target_interval

        interval = self.rate.change_interval(amount)
        self.notifier.quick_notify(messages.speed_changed(interval))
        logger.info("Clock interval set to %s seconds.", messages.format_seconds(interval))
        self._flush_changes()
        return interval

    def _accept_input(self, action: str) -> bool:
        if self.should_enable(for_input=True):
            return True
        if not self.world.main_player:
            logger.warning("Ignored %s; only the main player can change time.", action)
        return False

    def _location_name(self) -> str:
        location = self.world.location
        return location.name if location is not None else "unknown"

    def _flush_changes(self) -> None:
        pending = list(self._pending)
        self._pending.clear()
        for change in pending:
            self.history.append(change)
            if change.field == "auto_cause":
                self.notifier.quick_notify(messages.auto_cause_changed(change.old, change.new))
