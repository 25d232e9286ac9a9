import pytest

from octane.formatting import (
    ascii_art,
    format_duration,
    format_key_value,
    format_list,
    format_score,
)


def test_duration_in_seconds_below_a_minute():
    assert format_duration(59).endswith(" seconds")
    assert format_duration(59).startswith("59")


def test_duration_in_minutes():
    assert format_duration(120) == "2 minutes"


def test_duration_truncates_minutes():
    assert format_duration(179) == format_duration(120)


def test_duration_in_hours():
    assert format_duration(3600) == "1 hours"
    assert format_duration(7199) == format_duration(3600)


@pytest.mark.parametrize("seconds", [0, 60, 3599, 3600, 86400])
def test_duration_unit_boundaries(seconds):
    unit = format_duration(seconds).split(" ")[1]
    expected = "seconds" if seconds < 60 else "minutes" if seconds < 3600 else "hours"
    assert unit == expected


def test_score_has_two_decimals_and_percent():
    assert format_score(50) == "50.00%"


def test_score_rounds_to_two_places():
    assert format_score(12.3456) == format_score(12.35)


def test_list_round_trip():
    items = ["cpu", "memory", "gpu"]
    assert format_list(items).split(", ") == items


def test_empty_list():
    assert format_list([]) == ""


def test_key_value_plain():
    assert format_key_value("threads", 8) == "threads: 8"


def test_key_value_bool_and_none():
    assert format_key_value("on", True) == "on: true"
    assert format_key_value("on", False) == "on: false"
    assert format_key_value("x", None) == "x: <nil>"


def test_key_value_list():
    assert format_key_value("tags", ["a", "b"]) == "tags: [a b]"


def test_ascii_art_contains_banner_and_text():
    art = ascii_art("Octane")
    assert art.startswith("\n  ____")
    assert art.endswith("\nOctane")
    assert "|___/ " in art
    assert len(art.splitlines()) == 10