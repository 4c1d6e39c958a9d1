"""Command-line interface for appliance energy analysis."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .analysis import summary
from .analysis.savings import calculate_savings, calculate_savings_for_day
from .analysis.usage import calculate_usage, calculate_usage_for_day
from .exceptions import ApplianceError
from .profiles import load_profile_from_yaml

console = Console()


def _load(profile_path):
    return load_profile_from_yaml(Path(profile_path) if profile_path else None)


@click.group()
def cli():
    """Appliance energy analysis - usage and device savings from state events."""
    pass


@cli.command()
@click.argument("profile_path", required=False, type=click.Path(exists=True))
@click.option("--day", type=float, help="Day of a month profile (1-365)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def usage(profile_path, day, as_json):
    """Calculate minutes the appliance was switched on.

    PROFILE_PATH defaults to the APPLIANCE_PROFILE environment variable.
    """
    try:
        profile = _load(profile_path)
        if day is None:
            minutes = calculate_usage(profile)
        else:
            minutes = calculate_usage_for_day(profile, day)
    except ApplianceError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if as_json:
        console.print(json.dumps({"usage_minutes": minutes}))
    else:
        console.print(f"[green]Usage: {minutes} min[/green]")


@cli.command()
@click.argument("profile_path", required=False, type=click.Path(exists=True))
@click.option("--day", type=float, help="Day of a month profile (1-365)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def savings(profile_path, day, as_json):
    """Calculate minutes saved by the device's automatic switch-off."""
    try:
        profile = _load(profile_path)
        if day is None:
            minutes = calculate_savings(profile)
        else:
            minutes = calculate_savings_for_day(profile, day)
    except ApplianceError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if as_json:
        console.print(json.dumps({"savings_minutes": minutes}))
    else:
        console.print(f"[green]Savings: {minutes} min[/green]")


@cli.command("summary")
@click.argument("profile_path", required=False, type=click.Path(exists=True))
@click.option("--from-day", type=int, help="First day of a month profile")
@click.option("--to-day", type=int, help="Last day (defaults to --from-day)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def summary_cmd(profile_path, from_day, to_day, as_json):
    """Summarise usage and savings for a day profile or a range of days."""
    if to_day is not None and from_day is None:
        raise click.UsageError("--to-day requires --from-day")

    try:
        profile = _load(profile_path)
        if from_day is None:
            data = summary.get_daily_summary(profile)
        else:
            data = summary.get_period_summary(
                profile, from_day, to_day if to_day is not None else from_day
            )
    except ApplianceError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if as_json:
        console.print(json.dumps(data, indent=2))
        return

    if from_day is None:
        console.print(summary.format_daily_summary_text(data))
        return

    table = Table(title=f"Appliance Usage (days {data['start_day']}-{data['end_day']})")
    table.add_column("Day", style="cyan", justify="right")
    table.add_column("Initial")
    table.add_column("Events", justify="right")
    table.add_column("Usage", justify="right")
    table.add_column("Savings", justify="right")

    for d in data["days"]:
        table.add_row(
            str(d["day"]),
            d["initial"],
            str(d["event_count"]),
            f"{d['usage_minutes']} min",
            f"{d['savings_minutes']} min",
        )

    console.print(table)
    console.print(
        f"Total usage: {data['total_usage_minutes']} min, "
        f"savings: {data['total_savings_minutes']} min"
    )


if __name__ == "__main__":
    cli()
