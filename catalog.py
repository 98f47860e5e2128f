# catalog.py
# Loads and validates the class catalog: declared periods plus every class and its sections.

import json
import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from slots import Period, expand_section

__all__ = ["ConfigError", "Course", "ScheduleOptions", "load_options", "DEFAULT_OPTIONS_FILE"]

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_OPTIONS_FILE = os.path.join(BASE_DIR, "Classes.toml")


class ConfigError(ValueError):
    # The input document is missing, unparsable or malformed. Always fatal.
    pass


@dataclass(frozen=True)
class Course:
    name: str
    sections: List[List[str]]

    def section_periods(self) -> List[List[Period]]:
        return [expand_section(section) for section in self.sections]


@dataclass(frozen=True)
class ScheduleOptions:
    """The full search input.

    ``periods`` only orders the rows of a rendered schedule; slot numbers in
    the sections are not checked against it.
    """

    periods: List[int]
    classes: List[Course]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleOptions":
        if not isinstance(data, dict):
            raise ConfigError("Schedule options must be a table/object")

        periods = data.get("periods")
        if not isinstance(periods, list):
            raise ConfigError("'periods' must be a list of period numbers")
        for p in periods:
            if isinstance(p, bool) or not isinstance(p, int) or p < 0:
                raise ConfigError(f"Invalid period number: {p!r}")

        raw_classes = data.get("classes")
        if not isinstance(raw_classes, list):
            raise ConfigError("'classes' must be a list")

        classes: List[Course] = []
        for c in raw_classes:
            if not isinstance(c, dict) or not isinstance(c.get("name"), str):
                raise ConfigError(f"Class entry needs a string 'name': {c!r}")
            sections = c.get("sections")
            if not isinstance(sections, list):
                raise ConfigError(f"Class {c['name']!r} needs a list of 'sections'")
            for s in sections:
                if not isinstance(s, list) or not all(isinstance(t, str) for t in s):
                    raise ConfigError(f"Section of {c['name']!r} must be a list of strings: {s!r}")
            classes.append(Course(name=c["name"], sections=[list(s) for s in sections]))

        options = cls(periods=list(periods), classes=classes)

        # Expand every section once now so a bad slot string stops the run at startup.
        # PERIOD_PATTERN only admits known day letters today; this still catches a
        # Day.from_char failure if the pattern is ever widened.
        for course in options.classes:
            try:
                course.section_periods()
            except ValueError as e:
                raise ConfigError(f"Class {course.name!r}: {e}") from e

        return options

    def to_dict(self) -> Dict[str, Any]:
        return {
            "periods": list(self.periods),
            "classes": [{"name": c.name, "sections": [list(s) for s in c.sections]} for c in self.classes],
        }

    def select(self, chosen: List[Dict[str, Any]]) -> "ScheduleOptions":
        # Narrow the catalog to the chosen classes, and to chosen section indices when given.
        by_name = {c.name: c for c in self.classes}
        picked: List[Course] = []

        for entry in chosen:
            name = entry.get("name")
            course = by_name.get(name)
            if course is None:
                logger.info("Ignoring unknown class %r", name)
                continue

            wanted: Optional[set] = None
            if entry.get("sections") is not None:
                wanted = set(entry["sections"])

            sections = [s for i, s in enumerate(course.sections) if wanted is None or i in wanted]
            picked.append(Course(name=course.name, sections=sections))

        return ScheduleOptions(periods=self.periods, classes=picked)


def load_options(path: str = DEFAULT_OPTIONS_FILE) -> ScheduleOptions:
    # Reads a .toml or .json document; any failure is reported as ConfigError.
    try:
        if path.endswith(".json"):
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Error parsing {path}: {e}") from e

    options = ScheduleOptions.from_dict(data)
    logger.debug("Loaded %d classes and %d periods from %s", len(options.classes), len(options.periods), path)
    return options
