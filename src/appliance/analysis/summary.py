"""Summaries of appliance usage and savings."""

from ..exceptions import DayOutOfRange
from ..models import MAX_IN_PERIOD, Profile
from .savings import calculate_savings, calculate_savings_for_day
from .usage import calculate_usage, slice_day, validate_day


def get_daily_summary(profile: Profile, period: int = MAX_IN_PERIOD) -> dict:
    """Generate a summary for a single-day profile."""
    return _build_summary(
        profile,
        calculate_usage(profile, period),
        calculate_savings(profile, period),
        period,
    )


def _build_summary(profile: Profile, usage: int, savings: int, period: int) -> dict:
    return {
        "initial": profile.initial.value,
        "event_count": len(profile.events),
        "usage_minutes": usage,
        "usage_percent": round(usage / period * 100, 1),
        "savings_minutes": savings,
        "savings_percent": round(savings / period * 100, 1),
    }


def get_period_summary(
    month_profile: Profile, start_day, end_day, period: int = MAX_IN_PERIOD
) -> dict:
    """Generate per-day usage and savings for a range of days (inclusive)."""
    start_day = validate_day(start_day)
    end_day = validate_day(end_day)
    if end_day < start_day:
        raise DayOutOfRange()

    days = []
    for day in range(start_day, end_day + 1):
        day_profile = slice_day(month_profile, day, period)
        summary = _build_summary(
            day_profile,
            calculate_usage(day_profile, period),
            calculate_savings_for_day(month_profile, day, period),
            period,
        )
        summary["day"] = day
        days.append(summary)

    total_usage = sum(d["usage_minutes"] for d in days)
    total_savings = sum(d["savings_minutes"] for d in days)

    return {
        "start_day": start_day,
        "end_day": end_day,
        "total_usage_minutes": total_usage,
        "total_savings_minutes": total_savings,
        "average_usage_minutes": round(total_usage / len(days), 1),
        "days": days,
    }


def format_daily_summary_text(data: dict) -> str:
    """Format a daily summary as plain text."""
    lines = [
        f"Initial state: {data['initial']} ({data['event_count']} events)",
        f"Usage: {data['usage_minutes']} min ({data['usage_percent']}% of day)",
        f"Savings: {data['savings_minutes']} min ({data['savings_percent']}% of day)",
    ]
    return "\n".join(lines)


def format_period_summary_text(data: dict) -> str:
    """Format a period summary as plain text."""
    lines = [
        f"Days {data['start_day']}-{data['end_day']}",
        f"Total usage: {data['total_usage_minutes']} min "
        f"(avg {data['average_usage_minutes']} min/day)",
        f"Total savings: {data['total_savings_minutes']} min",
        "",
    ]
    for d in data["days"]:
        lines.append(
            f"  Day {d['day']:>3}: usage {d['usage_minutes']:>4} min, "
            f"savings {d['savings_minutes']:>4} min"
        )
    return "\n".join(lines)
