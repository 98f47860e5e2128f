import pytest

from catalog import Course, ScheduleOptions


@pytest.fixture
def options():
    return ScheduleOptions(
        periods=[1, 2, 3, 4, 5, 6, 7, 8],
        classes=[
            Course("Calculus", [["MWF3"], ["MWF5", "R5"]]),
            Course("Physics", [["MWF3", "T7-8"], ["TR5-6"]]),
            Course("English", [["MW1"], ["TR2"], ["F1-2"]]),
        ],
    )
