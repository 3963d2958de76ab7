import pytest

from feast_recipes.app.services.url_parsing.parsing_utils import parse_iso8601_duration


@pytest.mark.parametrize(
    "duration,expected",
    [
        ("PT30M", 30),
        ("PT5M", 5),
        ("PT120M", 120),
        ("PT1H", 60),
        ("PT2H", 120),
        ("PT1H30M", 90),
        ("PT2H15M", 135),
    ],
)
def test_parse_hours_and_minutes(duration, expected):
    assert parse_iso8601_duration(duration) == expected


def test_seconds_are_ignored():
    assert parse_iso8601_duration("PT30M30S") == 30
    assert parse_iso8601_duration("PT1H30M45S") == 90
    assert parse_iso8601_duration("PT45S") == 0


def test_missing_prefix_returns_zero():
    assert parse_iso8601_duration("") == 0
    assert parse_iso8601_duration("invalid") == 0
    assert parse_iso8601_duration("30") == 0
    assert parse_iso8601_duration("T30M") == 0
    assert parse_iso8601_duration("pt30m") == 0


def test_non_string_returns_zero():
    assert parse_iso8601_duration(None) == 0
    assert parse_iso8601_duration(30) == 0


def test_date_components_are_dropped():
    # Days are not converted into minutes
    assert parse_iso8601_duration("P1D") == 0
    assert parse_iso8601_duration("P1DT2H") == 120
    assert parse_iso8601_duration("P0DT1H15M") == 75


def test_letter_without_digits_adds_nothing():
    assert parse_iso8601_duration("PTHM") == 0
    assert parse_iso8601_duration("P") == 0
    assert parse_iso8601_duration("PT") == 0
