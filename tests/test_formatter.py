"""Tests for the display formatting helpers."""

import pytest

from weather_widget.core.formatter import (
    format_hour,
    format_long_date,
    format_temperature,
    normalize_icon_url,
    sort_week_starting_monday,
    weekday_name,
)
from weather_widget.models.weather import DayForecast


def test_long_date_from_localtime():
    assert format_long_date("2024-06-05 14:30") == "Wednesday, June 5, 2024"


def test_long_date_from_plain_date():
    assert format_long_date("2024-12-25") == "Wednesday, December 25, 2024"


@pytest.mark.parametrize("value", ["", "not a date", "2024-13-45"])
def test_long_date_malformed_does_not_raise(value):
    assert format_long_date(value) == value


def test_long_date_none():
    assert format_long_date(None) == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-06-03", "Monday"),
        ("2024-06-05", "Wednesday"),
        ("2024-06-09", "Sunday"),
    ],
)
def test_weekday_name(value, expected):
    assert weekday_name(value) == expected


def test_format_hour():
    assert format_hour("2024-06-05 06:00") == "06:00"


@pytest.mark.parametrize(
    "value, expected",
    [(23.6, "24°"), (23.4, "23°"), (23.5, "24°"), (-0.4, "0°"), (-2.6, "-3°")],
)
def test_format_temperature(value, expected):
    assert format_temperature(value) == expected


def test_normalize_icon_url():
    assert (
        normalize_icon_url("//cdn.weatherapi.com/a.png")
        == "https://cdn.weatherapi.com/a.png"
    )
    assert normalize_icon_url("http://x/a.png") == "http://x/a.png"


def test_sort_week_starting_monday():
    names = ["Wednesday", "Thursday", "Friday", "Saturday", "Sunday", "Monday", "Tuesday"]
    days = [DayForecast(day=name, temp="1°", condition="", icon="") for name in names]

    result = sort_week_starting_monday(days)

    assert [d.day for d in result] == [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]


def test_sort_is_stable_for_unknown_names():
    days = [
        DayForecast(day=name, temp=temp, condition="", icon="")
        for name, temp in [("Someday", "1°"), ("Friday", "2°"), ("Otherday", "3°")]
    ]

    result = sort_week_starting_monday(days)

    assert [d.temp for d in result] == ["2°", "1°", "3°"]
