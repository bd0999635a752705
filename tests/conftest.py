"""Shared fixtures: upstream payload builders and a scripted weather client."""

import asyncio
from datetime import date, timedelta

import pytest

from weather_widget.core.errors import WeatherFetchError
from weather_widget.models.weather import (
    CurrentConditions,
    DayForecast,
    HourForecast,
    Location,
    WeatherReport,
)


@pytest.fixture
def forecast_payload():
    """Build a forecast.json body; days run today-first as the API sends them."""

    def wrapper(
        temp_c=18.4,
        start=date(2024, 6, 5),
        avg_temps=(21.2, 23.6, 19.5, 17.4, 20.0, 22.5, 18.1),
        name="Paris",
        country="France",
    ):
        forecastday = []
        for offset, avg in enumerate(avg_temps):
            day = start + timedelta(days=offset)
            forecastday.append(
                {
                    "date": day.isoformat(),
                    "day": {
                        "avgtemp_c": avg,
                        "condition": {
                            "text": "Sunny",
                            "icon": "//cdn.weatherapi.com/weather/64x64/day/113.png",
                        },
                    },
                    "hour": [
                        {
                            "time": f"{day.isoformat()} {hour:02d}:00",
                            "temp_c": 10 + hour + 0.4,
                        }
                        for hour in range(24)
                    ],
                }
            )
        return {
            "location": {
                "name": name,
                "region": "Ile-de-France",
                "country": country,
                "localtime": f"{start.isoformat()} 14:30",
            },
            "current": {
                "temp_c": temp_c,
                "condition": {
                    "text": "Partly cloudy",
                    "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
                },
                "wind_kph": 11.2,
                "wind_dir": "WSW",
                "humidity": 64,
            },
            "forecast": {"forecastday": forecastday},
        }

    return wrapper


def make_report(location: str, temperature: float = 18.4) -> WeatherReport:
    days = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    return WeatherReport(
        current=CurrentConditions(
            temperature=temperature,
            condition="Sunny",
            icon="https://cdn.weatherapi.com/weather/64x64/day/113.png",
            wind_kph=9.0,
            wind_dir="N",
            humidity=50,
            location=location,
            date="Wednesday, June 5, 2024",
        ),
        forecast=[
            DayForecast(day=day, temp="20°", condition="Sunny", icon="")
            for day in days
        ],
        hourly=[HourForecast(time=f"{hour:02d}:00", temp="15°") for hour in range(0, 16, 2)],
    )


class FakeWeatherClient:
    """Stands in for WeatherApiClient; records calls and can delay or fail."""

    def __init__(self):
        self.suggestion_calls = []
        self.weather_calls = []
        self.weather_days = []
        self.suggestions = {}
        self.failures = {}
        self.delays = {}

    async def fetch_suggestions(self, query):
        self.suggestion_calls.append(query)
        await asyncio.sleep(self.delays.get(query, 0))
        if len(query.strip()) < 3:
            return []
        return self.suggestions.get(
            query, [Location(name=query.strip().title(), region="", country="France")]
        )

    async def fetch_weather(self, location_query, days=7):
        self.weather_calls.append(location_query)
        self.weather_days.append(days)
        await asyncio.sleep(self.delays.get(location_query, 0))
        if location_query in self.failures:
            raise WeatherFetchError("boom", reason=self.failures[location_query])
        return make_report(location_query)


@pytest.fixture
def fake_client():
    return FakeWeatherClient()


@pytest.fixture
def report():
    return make_report
