"""Enumerations used by the time-flow domain."""

from __future__ import annotations

from enum import StrEnum


class ManualOverride(StrEnum):
    """Explicit freeze state requested by the player."""

    FROZEN = "frozen"
    UNFROZEN = "unfrozen"
    UNSET = "unset"

    @classmethod
    def from_flag(cls, value: bool | None) -> ManualOverride:
        if value is None:
            return cls.UNSET
        return cls.FROZEN if value else cls.UNFROZEN


class AutoFreezeCause(StrEnum):
    """Why time would freeze automatically, ignoring player overrides."""

    NONE = "none"
    LOCATION_RULE = "location_rule"
    TIME_OF_DAY_RULE = "time_of_day_rule"


class LocationType(StrEnum):
    """Broad location categories with their own speed and freeze settings."""

    INDOORS = "indoors"
    OUTDOORS = "outdoors"
    MINE = "mine"
    SKULL_CAVERN = "skull_cavern"
    VOLCANO_DUNGEON = "volcano_dungeon"


class Season(StrEnum):
    """Season of the in-world calendar."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class HostEvent(StrEnum):
    """Host callbacks the controller reacts to."""

    SESSION_LOADED = "session_loaded"
    DAY_STARTED = "day_started"
    WARPED = "warped"
    TIME_CHANGED = "time_changed"
    UPDATE_TICKED = "update_ticked"
    CONFIG_RELOADED = "config_reloaded"


class IntervalStep(StrEnum):
    """Size of a single interval change, mirroring the held modifier key."""

    SMALL = "small"
    NORMAL = "normal"
    MEDIUM = "medium"
    LARGE = "large"
