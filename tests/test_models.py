"""Simple tests for Pydantic models."""

import pytest
from pydantic import ValidationError
from weather_widget.models.weather import (
    DayForecast,
    Location,
    LocationSelection,
    TabSelection,
    ForecastTab,
)
from weather_widget.models.weatherapi import ApiForecastResponse


def test_location_full_name():
    """Test the derived display label."""
    location = Location(name="Paris", region="Ile-de-France", country="France")
    assert location.full_name == "Paris, France"
    assert location.model_dump()["full_name"] == "Paris, France"


@pytest.mark.parametrize(
    "name, country, expected",
    [
        ("London", "United Kingdom", "London, United Kingdom"),
        ("Tokyo", "Japan", "Tokyo, Japan"),
        ("Springfield", "", "Springfield, "),
    ],
)
def test_different_locations(name, country, expected):
    """Test labels for different cities."""
    assert Location(name=name, country=country).full_name == expected


def test_location_is_immutable():
    location = Location(name="Paris", country="France")
    with pytest.raises(ValidationError):
        location.name = "Rome"


def test_selection_round_trips_to_location():
    selection = LocationSelection(name="Paris", region="Ile-de-France", country="France")
    assert selection.to_location() == Location(
        name="Paris", region="Ile-de-France", country="France"
    )


def test_selection_requires_name():
    with pytest.raises(ValidationError):
        LocationSelection(name="", country="France")


def test_tab_selection():
    assert TabSelection(tab="hourly").tab == ForecastTab.HOURLY
    with pytest.raises(ValidationError):
        TabSelection(tab="monthly")


def test_day_forecast_creation():
    day = DayForecast(day="Monday", temp="24°", condition="Sunny", icon="https://x/y.png")
    assert day.temp == "24°"


def test_forecast_payload_requires_current(forecast_payload):
    payload = forecast_payload()
    del payload["current"]
    with pytest.raises(ValidationError):
        ApiForecastResponse.model_validate(payload)
