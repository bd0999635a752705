"""Immutable view state and the transitions the controller applies to it.

Every transition takes a snapshot and returns a new one; a fetch result is
applied in a single assignment.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from weather_widget.models.weather import (
    CurrentConditions,
    DayForecast,
    ForecastTab,
    HourForecast,
    Location,
    WeatherReport,
)


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ViewState(BaseModel):
    """Everything the presentation layer reads."""

    model_config = ConfigDict(frozen=True)

    status: Status = Status.IDLE
    current: Optional[CurrentConditions] = None
    forecast: List[DayForecast] = []
    hourly: List[HourForecast] = []
    loading: bool = False
    error: Optional[str] = None
    search_text: str = ""
    suggestions: List[Location] = []
    show_suggestions: bool = False
    fetching_suggestions: bool = False
    active_tab: ForecastTab = ForecastTab.WEEKLY
    revealed: bool = False


def set_search_text(state: ViewState, text: str) -> ViewState:
    return state.model_copy(update={"search_text": text})


def begin_suggestions(state: ViewState) -> ViewState:
    return state.model_copy(update={"fetching_suggestions": True})


def apply_suggestions(state: ViewState, locations: List[Location]) -> ViewState:
    return state.model_copy(
        update={
            "suggestions": list(locations),
            "show_suggestions": bool(locations),
            "fetching_suggestions": False,
        }
    )


def clear_suggestions(state: ViewState) -> ViewState:
    return apply_suggestions(state, [])


def close_suggestions(state: ViewState) -> ViewState:
    return state.model_copy(update={"show_suggestions": False})


def begin_weather(state: ViewState) -> ViewState:
    """Enter loading. Displayed data stays until the fetch resolves."""
    return state.model_copy(
        update={
            "status": Status.LOADING,
            "loading": True,
            "error": None,
            "show_suggestions": False,
        }
    )


def apply_weather(state: ViewState, report: WeatherReport) -> ViewState:
    return state.model_copy(
        update={
            "status": Status.SUCCESS,
            "current": report.current,
            "forecast": list(report.forecast),
            "hourly": list(report.hourly),
            "loading": False,
            "error": None,
            "revealed": False,
        }
    )


def fail_weather(state: ViewState, message: str) -> ViewState:
    """Record a failed fetch; current, forecast and hourly are left alone."""
    return state.model_copy(
        update={"status": Status.ERROR, "loading": False, "error": message}
    )


def reveal(state: ViewState) -> ViewState:
    return state.model_copy(update={"revealed": True})


def select_tab(state: ViewState, tab: ForecastTab) -> ViewState:
    return state.model_copy(update={"active_tab": ForecastTab(tab)})
