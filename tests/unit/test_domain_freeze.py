"""Unit tests for the freeze verdict."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from timespeed.domain.enums import AutoFreezeCause, ManualOverride
from timespeed.domain.freeze import FreezeDecision, recompute_auto
from timespeed.domain.models import StateChange


def test_location_rule_outranks_time_of_day_rule():
    assert recompute_auto(True, True) is AutoFreezeCause.LOCATION_RULE


def test_time_of_day_rule_applies_without_location_rule():
    assert recompute_auto(False, True) is AutoFreezeCause.TIME_OF_DAY_RULE
    assert recompute_auto(False, False) is AutoFreezeCause.NONE


def test_unset_override_never_freezes_on_its_own():
    decision = FreezeDecision()
    assert decision.manual_override is ManualOverride.UNSET
    assert decision.is_frozen() is False


def test_auto_cause_freezes_until_player_unfreezes():
    decision = FreezeDecision()
    decision.apply_auto_freeze_update(False, True)
    assert decision.is_frozen() is True

    decision.set_manual_override(False)
    assert decision.manual_override is ManualOverride.UNFROZEN
    assert decision.is_frozen() is False


def test_unfreeze_override_survives_while_a_cause_applies():
    decision = FreezeDecision()
    decision.apply_auto_freeze_update(True, False)
    decision.set_manual_override(False)

    decision.apply_auto_freeze_update(False, True)
    assert decision.auto_cause is AutoFreezeCause.TIME_OF_DAY_RULE
    assert decision.manual_override is ManualOverride.UNFROZEN
    assert decision.is_frozen() is False


def test_stale_unfreeze_override_is_cleared():
    decision = FreezeDecision()
    decision.apply_auto_freeze_update(True, False)
    decision.set_manual_override(False)

    decision.apply_auto_freeze_update(False, False)
    assert decision.manual_override is ManualOverride.UNSET

    decision.apply_auto_freeze_update(True, False)
    assert decision.is_frozen() is True


def test_manual_freeze_survives_auto_updates():
    decision = FreezeDecision()
    decision.set_manual_override(True)
    decision.apply_auto_freeze_update(False, False)
    assert decision.manual_override is ManualOverride.FROZEN
    assert decision.is_frozen() is True


def test_set_manual_override_accepts_enum_and_none():
    decision = FreezeDecision()
    decision.set_manual_override(ManualOverride.FROZEN)
    assert decision.is_frozen() is True
    decision.set_manual_override(None)
    assert decision.manual_override is ManualOverride.UNSET


@given(
    causes=st.lists(st.tuples(st.booleans(), st.booleans()), max_size=5),
    toggles=st.integers(min_value=1, max_value=20),
)
def test_toggle_alternates_regardless_of_auto_cause(causes, toggles):
    decision = FreezeDecision()
    for location_rule, time_rule in causes:
        decision.apply_auto_freeze_update(location_rule, time_rule)

    for _ in range(toggles):
        before = decision.is_frozen()
        after = decision.toggle()
        assert after is not before
        assert decision.is_frozen() is after


def test_toggle_sets_explicit_overrides():
    decision = FreezeDecision()
    decision.toggle()
    assert decision.manual_override is ManualOverride.FROZEN
    decision.toggle()
    assert decision.manual_override is ManualOverride.UNFROZEN


def test_reset_is_idempotent():
    decision = FreezeDecision()
    decision.apply_auto_freeze_update(True, False)
    decision.toggle()

    decision.reset(True, False)
    once = (decision.manual_override, decision.auto_cause, decision.is_frozen())
    decision.reset(True, False)
    twice = (decision.manual_override, decision.auto_cause, decision.is_frozen())

    assert once == twice == (ManualOverride.UNSET, AutoFreezeCause.LOCATION_RULE, True)


def test_transitions_are_reported_to_observers():
    decision = FreezeDecision()
    changes: list[StateChange] = []
    decision.subscribe(changes.append)

    decision.apply_auto_freeze_update(True, False)
    decision.toggle()

    assert changes == [
        StateChange("auto_cause", AutoFreezeCause.NONE, AutoFreezeCause.LOCATION_RULE),
        StateChange("manual_override", ManualOverride.UNSET, ManualOverride.UNFROZEN),
    ]


def test_unchanged_values_are_not_reported():
    decision = FreezeDecision()
    changes: list[StateChange] = []
    decision.subscribe(changes.append)

    decision.apply_auto_freeze_update(False, False)
    decision.set_manual_override(None)

    assert changes == []


def test_unsubscribed_observer_stops_receiving():
    decision = FreezeDecision()
    changes: list[StateChange] = []
    decision.subscribe(changes.append)
    decision.unsubscribe(changes.append)

    decision.toggle()
    assert changes == []
