# schedule_finder.py
# Exhaustively enumerates all conflict-free class schedules using a backtracking DFS.

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from catalog import ScheduleOptions
from slots import Period, Schedule

__all__ = ["generate_schedules", "find_schedules", "section_conflicts", "find_unresolvable_pairs"]

logger = logging.getLogger(__name__)

ScheduleSink = Callable[[Schedule, ScheduleOptions], None]


class _StopSearch(Exception):
    pass


def generate_schedules(
    options: ScheduleOptions,
    sink: ScheduleSink,
    limit: Optional[int] = None,
) -> int:
    # Hand every clash-free schedule to `sink`, in depth-first order. Returns how many were found.

    # Expand each class's sections once, keeping declared order.
    per_class: List[Tuple[str, List[List[Period]]]] = [
        (c.name, c.section_periods()) for c in options.classes
    ]

    found = 0

    def dfs(i: int, schedule: Schedule) -> None:
        nonlocal found
        if i == len(per_class):
            # Base case: every class has a section. The sink owns this dict from here on.
            sink(schedule, options)
            found += 1
            if limit is not None and found >= limit:
                raise _StopSearch
            return

        class_name, sections = per_class[i]
        for periods in sections:
            # Work on a copy so the next section starts from the same parent state.
            child = dict(schedule)
            for period in periods:
                if period in child:
                    break
                child[period] = class_name
            else:
                dfs(i + 1, child)

    if limit is None or limit > 0:
        try:
            dfs(0, {})
        except _StopSearch:
            logger.debug("Stopped after %d schedules", found)

    logger.debug("Found %d schedules for %d classes", found, len(per_class))
    return found


def find_schedules(options: ScheduleOptions, limit: Optional[int] = None) -> List[Schedule]:
    # Return every clash-free schedule as a list.
    schedules: List[Schedule] = []
    generate_schedules(options, lambda schedule, _: schedules.append(schedule), limit=limit)
    return schedules


def section_conflicts(a: Sequence[Period], b: Sequence[Period]) -> bool:
    # Determines if two expanded sections share any slot.
    return not set(a).isdisjoint(b)


def find_unresolvable_pairs(options: ScheduleOptions) -> List[List[str]]:
    # Identifies pairs of classes for which no non-conflicting section combination exists.
    expanded = [(c.name, c.section_periods()) for c in options.classes]
    bad_pairs = []

    for i in range(len(expanded)):
        for j in range(i + 1, len(expanded)):
            (name_a, secs_a), (name_b, secs_b) = expanded[i], expanded[j]
            if not any(not section_conflicts(sa, sb) for sa in secs_a for sb in secs_b):
                bad_pairs.append([name_a, name_b])
    return bad_pairs
