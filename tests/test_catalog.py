import json
import re

import pytest

import slots
from catalog import ConfigError, Course, ScheduleOptions, load_options

TOML_DOC = """
periods = [1, 2, 3]

[[classes]]
name = "Calculus"
sections = [["MWF3"], ["TR1-2"]]

[[classes]]
name = "Art"
sections = [["F1"]]
"""

DICT_DOC = {
    "periods": [1, 2, 3],
    "classes": [
        {"name": "Calculus", "sections": [["MWF3"], ["TR1-2"]]},
        {"name": "Art", "sections": [["F1"]]},
    ],
}


def test_load_toml_and_json_agree(tmp_path):
    toml_path = tmp_path / "Classes.toml"
    toml_path.write_text(TOML_DOC, encoding="utf-8")
    json_path = tmp_path / "classes.json"
    json_path.write_text(json.dumps(DICT_DOC), encoding="utf-8")

    from_toml = load_options(str(toml_path))
    assert from_toml == load_options(str(json_path))
    assert from_toml.periods == [1, 2, 3]
    assert from_toml.classes[0] == Course("Calculus", [["MWF3"], ["TR1-2"]])


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_options(str(tmp_path / "nope.toml"))


@pytest.mark.parametrize("name,text", [
    ("bad.toml", "periods = [1,"),
    ("bad.json", "{\"periods\": "),
])
def test_unparsable_document(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_options(str(path))


@pytest.mark.parametrize("data", [
    [],
    {"classes": []},
    {"periods": [1, "2"], "classes": []},
    {"periods": [1, -1], "classes": []},
    {"periods": [1], "classes": {}},
    {"periods": [1], "classes": [{"sections": [["M1"]]}]},
    {"periods": [1], "classes": [{"name": "A"}]},
    {"periods": [1], "classes": [{"name": "A", "sections": ["M1"]}]},
    {"periods": [1], "classes": [{"name": "A", "sections": [[1]]}]},
])
def test_malformed_options(data):
    with pytest.raises(ConfigError):
        ScheduleOptions.from_dict(data)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        ScheduleOptions.from_dict({"periods": None, "classes": []})


def test_to_dict_round_trips():
    options = ScheduleOptions.from_dict(DICT_DOC)
    assert options.to_dict() == DICT_DOC


def test_select_classes_and_sections():
    options = ScheduleOptions.from_dict(DICT_DOC)
    picked = options.select([
        {"name": "Art"},
        {"name": "Calculus", "sections": [1]},
        {"name": "Unknown"},
    ])
    assert picked.periods == options.periods
    assert picked.classes == [
        Course("Art", [["F1"]]),
        Course("Calculus", [["TR1-2"]]),
    ]


def test_bad_day_letter_becomes_config_error(monkeypatch):
    # Widen the day letters so Day.from_char sees a character it does not know.
    monkeypatch.setattr(slots, "PERIOD_PATTERN", re.compile(r"([A-Z]{1,5})(\d{1,2})(?:-(\d{1,2}))?"))
    with pytest.raises(ConfigError, match="Unknown day character 'S'"):
        ScheduleOptions.from_dict({"periods": [1], "classes": [{"name": "A", "sections": [["S1"]]}]})
