"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config import AppConfig, get_default_config_path
from ..domain.dates import CalendarDate
from ..domain.timeslots import WeekdaySlot
from ..services.availability import AvailabilityService

app = typer.Typer(
    name="weekschedule",
    help="Inspect recurring weekly availability schedules",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]
ScheduleOption = Annotated[
    Optional[List[str]],
    typer.Option("--schedule", "-s", help="Schedule name to include (repeatable). Defaults to all.")
]


def _load_service(config_file: Optional[Path]) -> AvailabilityService:
    """Load the configuration, set up logging and build the service."""
    config_path = config_file or get_default_config_path()
    config = AppConfig.load_from_yaml(config_path)

    logging.basicConfig(
        level=config.get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True
    )
    return AvailabilityService(config)


def _format_slot(weekday_slot: WeekdaySlot) -> str:
    if weekday_slot.is_all_day():
        return "all day"
    return str(weekday_slot.slot)


def _resolve_limit(
    service: AvailabilityService,
    until: Optional[str],
    days: Optional[int]
) -> CalendarDate:
    """
    Resolve the last date to expand from --until or --days, falling back
    to the configured horizon.
    """
    if until and days:
        console.print("[red]Error: --until and --days can not be used together.[/red]")
        raise typer.Exit(1)

    if until:
        return CalendarDate.parse(until)

    if days is not None:
        if days <= 0:
            console.print("[red]Error: --days must be greater than zero.[/red]")
            raise typer.Exit(1)
        return CalendarDate.today().add(days=days - 1)

    return service.default_limit()


@app.command()
def calendar(
    config_file: ConfigOption = None,
    schedule: ScheduleOption = None,
    until: Annotated[Optional[str], typer.Option("--until", help="Last date to show (YYYY-MM-DD)")] = None,
    days: Annotated[Optional[int], typer.Option("--days", "-d", help="Number of days to show from today")] = None,
    merge: Annotated[bool, typer.Option("--merge", help="Show the merged schedule instead of each schedule.")] = False,
):
    """
    Show the time slots of every date covered by the schedules.

    Examples:

        weekschedule calendar

        weekschedule calendar --days 7 --merge

        weekschedule calendar -s office --until 2024-02-29
    """
    try:
        service = _load_service(config_file)
        limit = _resolve_limit(service, until, days)
        by_date = service.calendar(limit=limit, merge=merge, names=schedule)

        if not by_date:
            console.print("[yellow]No dates in range.[/yellow]")
            return

        table = Table(
            title=f"Calendar until {limit}",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Date", style="bold yellow")
        table.add_column("Weekday")
        table.add_column("Time slots", style="green")

        for date in sorted(by_date):
            slots = ", ".join(_format_slot(slot) for slot in by_date[date])
            table.add_row(str(date), str(date.weekday), slots or "[dim]-[/dim]")

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def merge(
    config_file: ConfigOption = None,
    schedule: ScheduleOption = None,
):
    """
    Merge the schedules in order (the first one is the parent) and show the result.
    """
    try:
        service = _load_service(config_file)
        merged = service.merged(schedule)

        lines = [f"[bold]Date range:[/bold] {merged.date_range}"]
        if merged.time_slots:
            lines.extend(f"  {slot}" for slot in merged.time_slots)
        else:
            lines.append("  [yellow]no time slots[/yellow]")

        title = "Merged schedule (empty)" if merged.is_empty() else "Merged schedule"
        console.print(Panel.fit("\n".join(lines), title=title))

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def overlaps(
    name: Annotated[str, typer.Argument(help="Schedule name")],
    config_file: ConfigOption = None,
):
    """
    List time slots of a schedule that overlap each other.
    """
    try:
        service = _load_service(config_file)
        pairs = service.overlapping_slots(name)

        if not pairs:
            console.print(f"[green]✓ No overlapping time slots in '{name}'.[/green]")
            return

        table = Table(
            title=f"Overlapping time slots in '{name}'",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Slot", style="bold yellow")
        table.add_column("Overlaps with", style="bold yellow")
        for first, second in pairs:
            table.add_row(str(first), str(second))

        console.print(table)

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def validate(
    config_file: ConfigOption = None,
):
    """
    Load the configuration and report problems.
    """
    try:
        service = _load_service(config_file)
        for schedule in service.schedules():
            if schedule.is_empty():
                console.print(f"[yellow]⚠ Empty schedule: {schedule}[/yellow]")
        console.print("[green]✓ Configuration is valid.[/green]")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]weekschedule[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
