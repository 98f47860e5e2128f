# schedule_printer.py
# Default schedule sink: renders a schedule as a period-by-weekday table.

from typing import Any, Dict, List

from tabulate import tabulate

from catalog import ScheduleOptions
from slots import Day, Period, Schedule

__all__ = ["schedule_rows", "format_schedule", "print_schedule", "schedule_to_json", "HEADERS"]

HEADERS = ["Period"] + [day.label for day in Day]


def schedule_rows(schedule: Schedule, options: ScheduleOptions) -> List[List[Any]]:
    # One row per declared period, one column per weekday; unoccupied cells are blank.
    return [
        [number] + [schedule.get(Period(day, number), "") for day in Day]
        for number in options.periods
    ]


def format_schedule(schedule: Schedule, options: ScheduleOptions) -> str:
    return tabulate(schedule_rows(schedule, options), headers=HEADERS, tablefmt="grid")


def print_schedule(schedule: Schedule, options: ScheduleOptions) -> None:
    """Print one schedule as a grid, followed by a blank line."""
    print(format_schedule(schedule, options))
    print()


def schedule_to_json(schedule: Schedule) -> List[Dict[str, Any]]:
    return [
        {"day": period.day.label, "period": period.number, "className": name}
        for period, name in schedule.items()
    ]
