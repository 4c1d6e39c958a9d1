import pytest

from .factories import OFF, ON, make_profile


@pytest.fixture
def month_profile():
    """Off until minute 1000 of day 1, a short burst on day 2, on from day 3."""
    return make_profile(
        OFF,
        [
            (ON, 1000),
            (OFF, 1440),  # exactly midnight between day 1 and day 2
            (ON, 2000),
            (OFF, 2100),
            (ON, 4000),
        ],
    )
