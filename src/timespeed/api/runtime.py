"""Runtime primitives backing the time-flow HTTP API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from timespeed.config import Settings, get_settings
from timespeed.domain.clock import SimulatedClock
from timespeed.domain.enums import IntervalStep, Season
from timespeed.domain.models import DAY_START_TIME, Location, TickResult, WorldContext
from timespeed.domain.time_config import TimeConfig
from timespeed.repository import JsonConfigRepository
from timespeed.services import RecordingNotifier, TimeFlowController

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """Raised when a session id is not registered."""


class SessionLimitError(RuntimeError):
    """Raised when registering a session would exceed the configured maximum."""


class ControlAction(StrEnum):
    """Player actions exposed to hosts."""

    TOGGLE_FREEZE = "toggle-freeze"
    INCREASE_INTERVAL = "increase-interval"
    DECREASE_INTERVAL = "decrease-interval"
    RESET = "reset"


@dataclass(slots=True)
class PlayerSession:
    """One player's controller together with the clock and notifier it drives."""

    id: int
    clock: SimulatedClock
    notifier: RecordingNotifier
    controller: TimeFlowController
    ticks_elapsed: int = 0
    updates: int = 0
    last_results: list[TickResult] = field(default_factory=list)

    def advance(self, milliseconds: int, updates: int = 1) -> None:
        """Run ``updates`` world updates, each adding ``milliseconds`` of real time.

        The clock is advanced first; if that crossed a tick boundary the new
        time of day is reported before the update is processed.
        """

        self.last_results = []
        for _ in range(updates):
            if self.clock.advance(milliseconds):
                self.ticks_elapsed += 1
                self.controller.change_time(self.clock.time_of_day)
            result = self.controller.tick()
            self.updates += 1
            if result is not None:
                self.last_results.append(result)

    def warp(self, location: Location, *, local_player: bool = True) -> None:
        if local_player:
            self.clock.location = location
        self.controller.warp(location, local_player=local_player)

    def start_day(self, season: Season, day_of_month: int) -> None:
        self.clock.time_of_day = DAY_START_TIME
        self.clock.elapsed = 0
        self.controller.start_day(season, day_of_month)

    def perform(self, action: ControlAction, step: IntervalStep = IntervalStep.NORMAL) -> None:
        if action is ControlAction.TOGGLE_FREEZE:
            self.controller.toggle_freeze()
        elif action is ControlAction.INCREASE_INTERVAL:
            self.controller.increase_interval(step)
        elif action is ControlAction.DECREASE_INTERVAL:
            self.controller.decrease_interval(step)
        else:
            self.controller.reset_to_defaults()

    def to_dict(self) -> dict[str, object]:
        payload = self.controller.snapshot()
        payload.update(
            id=self.id,
            main_player=self.controller.world.main_player,
            ticks_elapsed=self.ticks_elapsed,
            updates=self.updates,
        )
        return payload


class SessionRegistry:
    """Independent controllers keyed by session id."""

    def __init__(self, repository: JsonConfigRepository, *, max_sessions: int = 32) -> None:
        self._repository = repository
        self._max_sessions = max_sessions
        self._sessions: dict[int, PlayerSession] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._sessions)

    def list_sessions(self) -> list[PlayerSession]:
        return [self._sessions[key] for key in sorted(self._sessions)]

    def get(self, session_id: int) -> PlayerSession:
        try:
            return self._sessions[session_id]
        except KeyError as exc:
            raise SessionNotFoundError(session_id) from exc

    def create(
        self,
        *,
        location: Location,
        season: Season = Season.SPRING,
        day_of_month: int = 1,
        main_player: bool = True,
    ) -> PlayerSession:
        """Register a session and run the session-load and day-start events."""

        if len(self._sessions) >= self._max_sessions:
            raise SessionLimitError(f"at most {self._max_sessions} sessions may be open")

        config = self._repository.load()
        clock = SimulatedClock(location=location)
        notifier = RecordingNotifier()
        controller = TimeFlowController(
            clock,
            config=config,
            notifier=notifier,
            world=WorldContext(location=location, season=season, day_of_month=day_of_month),
        )
        session = PlayerSession(
            id=self._next_id, clock=clock, notifier=notifier, controller=controller
        )
        self._sessions[session.id] = session
        self._next_id += 1

        controller.load_session(main_player=main_player)
        session.start_day(season, day_of_month)
        logger.info("registered session %s at %s", session.id, location.name)
        return session

    def remove(self, session_id: int) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def reload_config(self, session_id: int) -> TimeConfig:
        config = self._repository.load()
        self.get(session_id).controller.reload_config(config)
        return config


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.repository = JsonConfigRepository(self.settings.config_path)
        self.sessions = SessionRegistry(
            self.repository, max_sessions=self.settings.max_sessions
        )


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
