"""Unit tests for the config-backed policy provider."""

from __future__ import annotations

import pytest

from timespeed.domain.enums import LocationType, Season
from timespeed.domain.models import Location
from timespeed.domain.policy import ConfigPolicy, is_festival_day
from timespeed.domain.time_config import FreezeRules, SecondsPerMinute, TimeConfig

FARM = Location("Farm", LocationType.OUTDOORS)
SALOON = Location("Saloon", LocationType.INDOORS)
MINE = Location("UndergroundMine12", LocationType.MINE)


def test_defaults_never_freeze():
    policy = ConfigPolicy()
    assert policy.should_freeze_location(FARM) is False
    assert policy.should_freeze_location(None) is False
    assert policy.should_freeze_time(2600) is False


@pytest.mark.parametrize(
    ("location_type", "expected"),
    [
        (LocationType.INDOORS, 1400),
        (LocationType.OUTDOORS, 1400),
        (LocationType.MINE, 1400),
        (LocationType.SKULL_CAVERN, 900),
        (LocationType.VOLCANO_DUNGEON, 700),
    ],
)
def test_default_milliseconds_per_minute(location_type, expected):
    policy = ConfigPolicy()
    assert policy.milliseconds_per_minute(Location("Somewhere", location_type)) == expected


def test_milliseconds_per_minute_without_location():
    assert ConfigPolicy().milliseconds_per_minute(None) == 0


def test_configured_speed_is_rounded_to_milliseconds():
    config = TimeConfig(seconds_per_minute=SecondsPerMinute(outdoors=0.29))
    assert ConfigPolicy(config).milliseconds_per_minute(FARM) == 290


def test_freeze_by_location_type():
    policy = ConfigPolicy(TimeConfig(freeze_time=FreezeRules(indoors=True)))
    assert policy.should_freeze_location(SALOON) is True
    assert policy.should_freeze_location(FARM) is False


def test_freeze_by_name_and_exceptions():
    rules = FreezeRules(
        mines=True,
        by_location_name=frozenset({"Farm"}),
        except_location_names=frozenset({"UndergroundMine12"}),
    )
    policy = ConfigPolicy(TimeConfig(freeze_time=rules))
    assert policy.should_freeze_location(FARM) is True
    assert policy.should_freeze_location(MINE) is False
    assert policy.should_freeze_location(Location("UndergroundMine40", LocationType.MINE)) is True


def test_freeze_at_time_of_day():
    policy = ConfigPolicy(TimeConfig(freeze_time=FreezeRules(anywhere_at_time=2200)))
    assert policy.should_freeze_time(2150) is False
    assert policy.should_freeze_time(2200) is True
    assert policy.should_freeze_time(2530) is True


def test_festival_days_are_not_rescaled_by_default():
    policy = ConfigPolicy()
    assert is_festival_day(Season.SPRING, 13) is True
    assert policy.should_rescale(Season.SPRING, 13) is False
    assert policy.should_rescale(Season.SPRING, 14) is True
    assert policy.should_rescale(Season.WINTER, 25) is False


def test_festival_days_rescale_when_enabled():
    policy = ConfigPolicy(TimeConfig(enable_on_festival_days=True))
    assert policy.should_rescale(Season.SUMMER, 11) is True
