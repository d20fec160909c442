"""Freeze verdict combining automatic causes with the player's override."""

from __future__ import annotations

from .changes import TracksChanges
from .enums import AutoFreezeCause, ManualOverride


def recompute_auto(location_rule_present: bool, time_of_day_rule_present: bool) -> AutoFreezeCause:
    """Return the automatic cause; a location rule outranks a time-of-day rule."""

    if location_rule_present:
        return AutoFreezeCause.LOCATION_RULE
    if time_of_day_rule_present:
        return AutoFreezeCause.TIME_OF_DAY_RULE
    return AutoFreezeCause.NONE


class FreezeDecision(TracksChanges):
    """Decide whether time is frozen.

    Time is frozen when the player froze it explicitly, or when an automatic
    cause applies and the player has not explicitly unfrozen it.  An unset
    override never freezes time on its own.
    """

    def __init__(self) -> None:
        super().__init__()
        self._manual_override = ManualOverride.UNSET
        self._auto_cause = AutoFreezeCause.NONE

    @property
    def manual_override(self) -> ManualOverride:
        return self._manual_override

    @manual_override.setter
    def manual_override(self, value: ManualOverride) -> None:
        old, self._manual_override = self._manual_override, value
        self._record("manual_override", old, value)

    @property
    def auto_cause(self) -> AutoFreezeCause:
        return self._auto_cause

    @auto_cause.setter
    def auto_cause(self, value: AutoFreezeCause) -> None:
        old, self._auto_cause = self._auto_cause, value
        self._record("auto_cause", old, value)

    def is_frozen(self) -> bool:
        if self._manual_override is ManualOverride.FROZEN:
            return True
        return (
            self._auto_cause is not AutoFreezeCause.NONE
            and self._manual_override is not ManualOverride.UNFROZEN
        )

    def set_manual_override(self, value: bool | ManualOverride | None) -> None:
        if not isinstance(value, ManualOverride):
            value = ManualOverride.from_flag(value)
        self.manual_override = value

    def apply_auto_freeze_update(
        self, location_rule_present: bool, time_of_day_rule_present: bool
    ) -> AutoFreezeCause:
        """Refresh the automatic cause and drop an unfreeze override that went stale."""

        self.auto_cause = recompute_auto(location_rule_present, time_of_day_rule_present)
        if (
            self._auto_cause is AutoFreezeCause.NONE
            and self._manual_override is ManualOverride.UNFROZEN
        ):
            self.manual_override = ManualOverride.UNSET
        return self._auto_cause

    def toggle(self) -> bool:
        """Flip the verdict through the manual override and return the new verdict."""

        if self.is_frozen():
            self.manual_override = ManualOverride.UNFROZEN
        else:
            self.manual_override = ManualOverride.FROZEN
        return self.is_frozen()

    def reset(self, location_rule_present: bool, time_of_day_rule_present: bool) -> None:
        self.manual_override = ManualOverride.UNSET
        self.apply_auto_freeze_update(location_rule_present, time_of_day_rule_present)
