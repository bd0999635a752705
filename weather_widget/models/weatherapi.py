"""Pydantic models for the parts of the WeatherAPI payloads the widget reads."""

from pydantic import BaseModel
from typing import List, Optional


class ApiCondition(BaseModel):
    text: str
    icon: str


class ApiCurrent(BaseModel):
    temp_c: float
    condition: ApiCondition
    wind_kph: float
    wind_dir: str
    humidity: int


class ApiLocation(BaseModel):
    name: str
    region: str = ""
    country: str = ""
    localtime: str = ""


class ApiDay(BaseModel):
    avgtemp_c: float
    condition: ApiCondition


class ApiHour(BaseModel):
    time: str
    temp_c: float


class ApiForecastDay(BaseModel):
    date: str
    day: ApiDay
    hour: List[ApiHour] = []


class ApiForecast(BaseModel):
    forecastday: List[ApiForecastDay]


class ApiForecastResponse(BaseModel):
    """Body of a successful forecast.json call."""

    location: ApiLocation
    current: ApiCurrent
    forecast: ApiForecast


class ApiSearchResult(BaseModel):
    """One item of a search.json response."""

    id: Optional[int] = None
    name: str
    region: str = ""
    country: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None
