"""End-to-end runs of the controller against the in-memory clock."""

from __future__ import annotations

from timespeed.domain.clock import SimulatedClock
from timespeed.domain.enums import LocationType, Season
from timespeed.domain.models import Location, WorldContext
from timespeed.domain.time_config import DEFAULT_CONFIG, FreezeRules, TimeConfig
from timespeed.services import RecordingNotifier, TimeFlowController

FARM = Location("Farm", LocationType.OUTDOORS)
FRAME_MS = 16


def _setup(config: TimeConfig = DEFAULT_CONFIG, day_of_month: int = 1):
    clock = SimulatedClock(location=FARM)
    controller = TimeFlowController(
        clock,
        config=config,
        notifier=RecordingNotifier(),
        world=WorldContext(location=FARM),
    )
    controller.load_session()
    controller.start_day(Season.SPRING, day_of_month)
    return controller, clock


def _run_frames(controller: TimeFlowController, clock: SimulatedClock, frames: int) -> int:
    """Run frames like a host game loop; return how many ten-minute ticks passed."""

    ticks = 0
    for _ in range(frames):
        if clock.advance(FRAME_MS):
            ticks += 1
            controller.change_time(clock.time_of_day)
        controller.tick()
    return ticks


def _frames_until_tick(controller: TimeFlowController, clock: SimulatedClock, limit: int) -> int:
    start = clock.time_of_day
    for frame in range(1, limit + 1):
        _run_frames(controller, clock, 1)
        if clock.time_of_day != start:
            return frame
    raise AssertionError("clock never ticked")


def test_ten_minutes_last_the_configured_real_time():
    controller, clock = _setup()
    assert controller.target_interval == 14_000

    frames = _frames_until_tick(controller, clock, limit=2_000)
    assert frames * FRAME_MS == 14_000
    assert clock.time_of_day == 610


def test_unscaled_day_uses_host_speed():
    controller, clock = _setup(day_of_month=13)
    assert controller.rescale_enabled is False

    frames = _frames_until_tick(controller, clock, limit=2_000)
    assert frames == 438


def test_time_freezes_at_configured_hour_until_player_resumes():
    config = TimeConfig(freeze_time=FreezeRules(anywhere_at_time=610))
    controller, clock = _setup(config)

    _frames_until_tick(controller, clock, limit=2_000)
    assert controller.is_frozen is True

    assert _run_frames(controller, clock, 3_000) == 0
    assert clock.time_of_day == 610
    assert clock.elapsed == 0

    controller.toggle_freeze()
    assert _run_frames(controller, clock, 875) == 1
    assert clock.time_of_day == 620


def test_slowing_down_mid_tick_keeps_progress():
    controller, clock = _setup()
    _run_frames(controller, clock, 400)
    progress = clock.elapsed
    assert progress == 3_200

    controller.increase_interval()
    _run_frames(controller, clock, 1)
    assert clock.elapsed == progress + round(FRAME_MS * 7000 / 15_000)
