# slots.py
# Weekly slot model and the parser for compact day/period notation ("MWF3", "TR5-6").

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence

__all__ = [
    "Day",
    "Period",
    "Schedule",
    "InvalidDayError",
    "PERIOD_PATTERN",
    "parse_period_string",
    "expand_section",
]


class InvalidDayError(ValueError):
    # Raised for a day character outside M, T, W, R, F.
    pass


class Day(Enum):
    MONDAY = "M"
    TUESDAY = "T"
    WEDNESDAY = "W"
    THURSDAY = "R"
    FRIDAY = "F"

    @classmethod
    def from_char(cls, c: str) -> "Day":
        try:
            return cls(c)
        except ValueError:
            raise InvalidDayError(f"Unknown day character {c!r}") from None

    @property
    def label(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Period:
    day: Day
    number: int

    def __str__(self) -> str:
        return f"{self.day.value}{self.number}"


# A (possibly partial) assignment of slots to the class occupying them.
Schedule = Dict[Period, str]

# Day letters, a start period and an optional inclusive end period.
PERIOD_PATTERN = re.compile(r"([MTWRF]{1,5})(\d{1,2})(?:-(\d{1,2}))?")


def parse_period_string(text: str) -> List[Period]:
    # Expand every day/period token found in `text`; anything else in the string is ignored.
    periods: List[Period] = []

    for match in PERIOD_PATTERN.finditer(text):
        days = match.group(1)
        start = int(match.group(2))
        end = int(match.group(3)) if match.group(3) else start

        # Period outer, day inner: "TR5-6" -> T5, R5, T6, R6.
        for number in range(start, end + 1):
            for c in days:
                periods.append(Period(Day.from_char(c), number))

    return periods


def expand_section(section: Sequence[str]) -> List[Period]:
    # Concatenate the periods of each slot string, in order and without deduplication.
    # A slot repeated inside one section makes that section conflict with itself.
    periods: List[Period] = []
    for text in section:
        periods.extend(parse_period_string(text))
    return periods
