"""Loading appliance profiles from YAML files."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .exceptions import ProfileConfigError, ProfileFormatError
from .models import ApplianceEvent, ApplianceState, Profile

load_dotenv()

PROFILE_ENV_VAR = "APPLIANCE_PROFILE"


def get_profile_path() -> Path:
    """Get the default profile path from environment variables."""
    path = os.environ.get(PROFILE_ENV_VAR)
    if not path:
        raise ProfileConfigError(
            f"No profile given and {PROFILE_ENV_VAR} environment variable not set"
        )
    return Path(path)


def parse_state(value) -> ApplianceState:
    """Parse a state value from a profile file.

    YAML 1.1 reads bare `on`/`off` as booleans, so those are mapped back.
    """
    if value is True:
        return ApplianceState.ON
    if value is False:
        return ApplianceState.OFF
    try:
        return ApplianceState(str(value).strip().lower())
    except ValueError:
        raise ProfileFormatError(f"Unknown appliance state: {value!r}")


def parse_event(data: dict) -> ApplianceEvent:
    """Parse a single {state, timestamp} mapping."""
    if not isinstance(data, dict) or "state" not in data or "timestamp" not in data:
        raise ProfileFormatError(f"Event must have 'state' and 'timestamp': {data!r}")

    timestamp = data["timestamp"]
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise ProfileFormatError(f"Event timestamp must be an integer: {timestamp!r}")

    return ApplianceEvent(timestamp=timestamp, state=parse_state(data["state"]))


def parse_profile(data: dict) -> Profile:
    """Build a Profile from already-decoded YAML/JSON data."""
    if not isinstance(data, dict) or "initial" not in data:
        raise ProfileFormatError("Profile must have an 'initial' state")

    events = data.get("events") or []
    if not isinstance(events, list):
        raise ProfileFormatError("Profile 'events' must be a list")

    return Profile(
        initial=parse_state(data["initial"]),
        events=tuple(parse_event(e) for e in events),
    )


def load_profile_from_yaml(profile_path: Path | None = None) -> Profile:
    """Load a profile from a YAML file.

    Expected format:
        initial: on
        events:
          - {state: off, timestamp: 50}
          - {state: auto-off, timestamp: 600}
    """
    path = profile_path or get_profile_path()
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ProfileConfigError(f"Profile file not found: {path}")
    except yaml.YAMLError as e:
        raise ProfileFormatError(f"Invalid YAML in {path}: {e}") from e
    return parse_profile(data)
