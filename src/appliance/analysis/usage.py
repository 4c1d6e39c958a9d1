"""Energy usage from appliance on/off events."""

from ..exceptions import DayOutOfRange, InvalidDay, InvalidTimestamp
from ..models import MAX_DAY, MAX_IN_PERIOD, ApplianceEvent, ApplianceState, Profile, sort_events


def calculate_usage(profile: Profile, period: int = MAX_IN_PERIOD) -> int:
    """Calculate the minutes an appliance spent switched on over one period.

    Algorithm:
    1. Sort a copy of the events by timestamp.
    2. Append a closing event at the end of the period so the final
       interval is counted.
    3. Walk the events, adding the elapsed time whenever the appliance
       was on since the previous event.

    Raises InvalidTimestamp if any event lies outside [0, period].
    """
    energy_used = 0
    current_state = profile.initial
    last_timestamp = 0

    # Closing state is never measured, any value works
    events = sort_events(profile.events)
    events.append(ApplianceEvent(timestamp=period, state=ApplianceState.OFF))

    for event in events:
        if current_state == ApplianceState.ON:
            energy_used += event.timestamp - last_timestamp

        if event.timestamp < 0 or event.timestamp > period:
            raise InvalidTimestamp(event.timestamp, period)

        current_state = event.state
        last_timestamp = event.timestamp

    return energy_used


def validate_day(day) -> int:
    """Check a 1-based day number and return it as an int.

    Integral floats such as 2.0 are accepted; booleans are not.
    """
    if isinstance(day, bool):
        raise InvalidDay()
    if isinstance(day, float) and day.is_integer():
        day = int(day)
    if not isinstance(day, int):
        raise InvalidDay()
    if day < 1 or day > MAX_DAY:
        raise DayOutOfRange()
    return day


def slice_day(
    month_profile: Profile, day, period: int = MAX_IN_PERIOD, carry=None
) -> Profile:
    """Build the single-day profile for `day` from a month-long profile.

    Events before the day only carry their state forward. By default the
    last raw state wins; `carry(current, incoming)` overrides how earlier
    events fold into the starting state. Events inside the day are re-based
    to local minutes; an event exactly on the next midnight is kept at
    local minute `period`.
    """
    day = validate_day(day)

    day_start = (day - 1) * period
    day_end = day * period

    last_state = month_profile.initial
    day_events = []

    for event in sort_events(month_profile.events):
        if event.timestamp < day_start:
            last_state = carry(last_state, event.state) if carry else event.state
        elif event.timestamp <= day_end:
            day_events.append(
                ApplianceEvent(timestamp=event.timestamp - day_start, state=event.state)
            )
        else:
            # Past the day we're interested in
            break

    return Profile(initial=last_state, events=tuple(day_events))


def calculate_usage_for_day(
    month_profile: Profile, day, period: int = MAX_IN_PERIOD
) -> int:
    """Calculate usage for a single day of a month-long profile.

    Raises InvalidDay for non-integer days and DayOutOfRange outside 1..365.
    """
    return calculate_usage(slice_day(month_profile, day, period), period)
