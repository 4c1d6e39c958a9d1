"""Energy savings attributed to the device's automatic switch-off."""

from ..models import MAX_IN_PERIOD, ApplianceEvent, ApplianceState, Profile, sort_events
from .usage import slice_day

ON = ApplianceState.ON
OFF = ApplianceState.OFF
AUTO_OFF = ApplianceState.AUTO_OFF

# (current, incoming) pairs that actually change the tracked state.
# Anything else (off -> off, auto-off -> off, on -> on, ...) is a no-op.
SIGNIFICANT_TRANSITIONS = frozenset(
    {
        (ON, OFF),
        (ON, AUTO_OFF),
        (OFF, ON),
        (AUTO_OFF, ON),
    }
)


def is_significant(current_state: ApplianceState, new_state: ApplianceState) -> bool:
    """Whether moving from `current_state` to `new_state` changes anything."""
    return (current_state, new_state) in SIGNIFICANT_TRANSITIONS


def determine_new_state(
    current_state: ApplianceState, new_state: ApplianceState
) -> ApplianceState:
    """Return the state after an event, ignoring redundant transitions."""
    return new_state if is_significant(current_state, new_state) else current_state


def calculate_savings_for_event(
    current_state: ApplianceState,
    last_auto_off_timestamp: int,
    event: ApplianceEvent,
) -> int:
    """Minutes saved when this event ends an auto-off interval, else 0."""
    if current_state == AUTO_OFF and event.state == ON:
        return event.timestamp - last_auto_off_timestamp
    return 0


def prepare_events(
    events, initial_state: ApplianceState, period: int = MAX_IN_PERIOD
) -> list[ApplianceEvent]:
    """Sort a copy of the events and close the period with the initial state."""
    sorted_events = sort_events(events)
    sorted_events.append(ApplianceEvent(timestamp=period, state=initial_state))
    return sorted_events


def calculate_savings(profile: Profile, period: int = MAX_IN_PERIOD) -> int:
    """Calculate minutes saved by the device switching the appliance off.

    Manual switch-offs are not savings. A manual "off" arriving while the
    device already has the appliance off is ignored, so the saving runs
    until the appliance is next switched on (or the period ends).
    """
    energy_saved = 0
    current_state = profile.initial
    last_auto_off_timestamp = 0

    for event in prepare_events(profile.events, profile.initial, period):
        energy_saved += calculate_savings_for_event(
            current_state, last_auto_off_timestamp, event
        )

        if current_state == ON and event.state == AUTO_OFF:
            last_auto_off_timestamp = event.timestamp

        current_state = determine_new_state(current_state, event.state)

    # Still auto-off at the end of the period
    if current_state == AUTO_OFF:
        energy_saved += period - last_auto_off_timestamp

    return energy_saved


def calculate_savings_for_day(
    month_profile: Profile, day, period: int = MAX_IN_PERIOD
) -> int:
    """Calculate savings for a single day of a month-long profile.

    Redundant events before the day are ignored when working out the
    starting state, the same way they are within a day.
    """
    day_profile = slice_day(month_profile, day, period, carry=determine_new_state)
    return calculate_savings(day_profile, period)
