"""Pydantic models for the widget's display data and API requests."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, StringConstraints, computed_field
from typing import List, Optional, Annotated


class ForecastTab(str, Enum):
    """Which forecast list the view shows."""

    WEEKLY = "weekly"
    HOURLY = "hourly"


class Location(BaseModel):
    """A candidate location returned by the search endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    region: str = ""
    country: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None

    @computed_field
    @property
    def full_name(self) -> str:
        """Display label, e.g. "Paris, France"."""
        return f"{self.name}, {self.country}"


class CurrentConditions(BaseModel):
    """Current weather at the resolved location."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    condition: str
    icon: str
    wind_kph: float
    wind_dir: str
    humidity: int
    location: str
    date: str


class DayForecast(BaseModel):
    """One day of the weekly forecast."""

    model_config = ConfigDict(frozen=True)

    day: str
    temp: str
    condition: str
    icon: str


class HourForecast(BaseModel):
    """One slot of the hourly forecast."""

    model_config = ConfigDict(frozen=True)

    time: str
    temp: str


class WeatherReport(BaseModel):
    """Everything a single forecast lookup produces."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    forecast: List[DayForecast]
    hourly: List[HourForecast]


class SearchInput(BaseModel):
    """Text typed into the search box"""

    text: str


class TabSelection(BaseModel):
    """Forecast tab click"""

    tab: ForecastTab


class LocationSelection(BaseModel):
    """Suggestion click"""

    name: Annotated[str, StringConstraints(min_length=1)]
    region: str = ""
    country: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None

    def to_location(self) -> Location:
        return Location(**self.model_dump())
