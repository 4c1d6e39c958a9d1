import random

import pytest
from appliance.analysis.savings import calculate_savings_for_day, determine_new_state
from appliance.analysis.usage import calculate_usage_for_day, slice_day, validate_day
from appliance.exceptions import DayOutOfRange, InvalidDay
from appliance.models import MAX_IN_PERIOD, ApplianceEvent, Profile

from ..factories import AUTO_OFF, OFF, ON, make_profile


def test_slice_day_keeps_midnight_event_at_end_of_day(month_profile):
    """An event at the next midnight lands on local minute 1440."""
    day_profile = slice_day(month_profile, 1)

    assert day_profile.initial == OFF
    assert day_profile.events == (
        ApplianceEvent(1000, ON),
        ApplianceEvent(MAX_IN_PERIOD, OFF),
    )


def test_slice_day_carries_state(month_profile):
    day_profile = slice_day(month_profile, 2)

    assert day_profile.initial == ON
    assert day_profile.events == (
        ApplianceEvent(0, OFF),
        ApplianceEvent(560, ON),
        ApplianceEvent(660, OFF),
    )


@pytest.mark.parametrize(
    "day,expected",
    [
        (1, MAX_IN_PERIOD - 1000),
        (2, 100),
        (3, MAX_IN_PERIOD - 1120),
        (4, MAX_IN_PERIOD),
        (10, MAX_IN_PERIOD),
    ],
)
def test_usage_for_day(month_profile, day, expected):
    assert calculate_usage_for_day(month_profile, day) == expected


def test_usage_for_day_before_any_event():
    profile = make_profile(ON, [(OFF, 5 * MAX_IN_PERIOD + 60)])
    assert calculate_usage_for_day(profile, 1) == MAX_IN_PERIOD
    assert calculate_usage_for_day(profile, 6) == 60
    assert calculate_usage_for_day(profile, 7) == 0


def test_usage_for_day_unsorted_month(month_profile):
    """Month events are sorted before slicing rather than truncated."""
    events = list(month_profile.events)
    rng = random.Random(5)
    for _ in range(10):
        rng.shuffle(events)
        shuffled = Profile(initial=month_profile.initial, events=tuple(events))
        for day in (1, 2, 3, 4):
            assert calculate_usage_for_day(shuffled, day) == calculate_usage_for_day(
                month_profile, day
            )


def test_usage_for_day_accepts_integral_float(month_profile):
    assert calculate_usage_for_day(month_profile, 2.0) == 100


@pytest.mark.parametrize("day", [1.5, "3", None, True])
def test_usage_for_day_not_integer(month_profile, day):
    with pytest.raises(InvalidDay, match="Day must be an integer"):
        calculate_usage_for_day(month_profile, day)


@pytest.mark.parametrize("day", [0, -1, 366])
def test_usage_for_day_out_of_range(month_profile, day):
    with pytest.raises(DayOutOfRange, match="Day out of range"):
        calculate_usage_for_day(month_profile, day)


def test_validate_day_checks_integer_first():
    with pytest.raises(InvalidDay):
        validate_day(400.5)
    assert validate_day(365) == 365


def test_savings_for_day():
    profile = make_profile(ON, [(AUTO_OFF, 1000), (ON, MAX_IN_PERIOD + 60)])

    assert calculate_savings_for_day(profile, 1) == MAX_IN_PERIOD - 1000
    # Carried auto-off state is ended by the "on" one hour into day 2
    assert calculate_savings_for_day(profile, 2) == 60
    assert calculate_savings_for_day(profile, 3) == 0


def test_savings_for_day_validates_day():
    with pytest.raises(DayOutOfRange):
        calculate_savings_for_day(make_profile(ON, []), 366)


def test_savings_for_day_manual_off_after_auto_off_carries():
    """A redundant manual off before midnight keeps the auto-off saving going."""
    profile = make_profile(ON, [(AUTO_OFF, 100), (OFF, 150), (ON, MAX_IN_PERIOD + 60)])

    assert calculate_savings_for_day(profile, 2) == 60
    # Usage still carries the raw last state
    assert slice_day(profile, 2).initial == OFF


def test_savings_for_day_auto_off_after_manual_off_not_carried():
    """The device can't claim an appliance the user already switched off."""
    profile = make_profile(ON, [(OFF, 100), (AUTO_OFF, 150), (ON, MAX_IN_PERIOD + 60)])

    assert calculate_savings_for_day(profile, 2) == 0


def test_slice_day_with_carry():
    profile = make_profile(ON, [(AUTO_OFF, 100), (OFF, 150)])

    day_profile = slice_day(profile, 2, carry=determine_new_state)

    assert day_profile.initial == AUTO_OFF
    assert day_profile.events == ()
