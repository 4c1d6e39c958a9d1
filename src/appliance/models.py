"""Data models for appliance state profiles."""

from dataclasses import dataclass, field
from enum import Enum

# Minutes in one measurement period (a day)
MAX_IN_PERIOD = 1440

# Last valid day number on the uniform-day calendar
MAX_DAY = 365


class ApplianceState(str, Enum):
    """State an appliance can be switched into."""

    ON = "on"
    OFF = "off"  # manual switch off
    AUTO_OFF = "auto-off"  # switched off by the energy-saving device


@dataclass(frozen=True)
class ApplianceEvent:
    """A single state change, stamped in minutes."""

    timestamp: int
    state: ApplianceState


@dataclass(frozen=True)
class Profile:
    """An initial state plus the state changes that follow it.

    Events may arrive in any order and may be redundant.
    """

    initial: ApplianceState
    events: tuple[ApplianceEvent, ...] = field(default_factory=tuple)


def sort_events(events) -> list[ApplianceEvent]:
    """Return a new list of events ordered by timestamp.

    The sort is stable, so events sharing a timestamp keep their input order
    and the last one decides the state from that minute onwards.
    """
    return sorted(events, key=lambda e: e.timestamp)
