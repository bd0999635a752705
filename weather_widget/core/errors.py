"""Exceptions raised by the weather widget core."""

from typing import Optional


class WeatherWidgetError(Exception):
    """Base class for widget errors."""


class MissingApiKeyError(WeatherWidgetError):
    """No API key was configured."""


class SuggestionFetchError(WeatherWidgetError):
    """A location search failed (HTTP status, transport or bad payload)."""


class WeatherFetchError(WeatherWidgetError):
    """A forecast lookup failed.

    ``reason`` is one of the ``REASON_*`` constants so callers can tell
    "location not found" apart from "network unreachable" or quota problems.
    """

    REASON_NOT_FOUND = "not_found"
    REASON_UNAUTHORIZED = "unauthorized"
    REASON_QUOTA = "quota_exceeded"
    REASON_TIMEOUT = "timeout"
    REASON_NETWORK = "network"
    REASON_INVALID = "invalid_response"
    REASON_HTTP = "http"

    def __init__(
        self, message: str, reason: str = REASON_HTTP, status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code


GENERIC_WEATHER_ERROR = "Failed to fetch weather data. Please try again."

USER_MESSAGES = {
    WeatherFetchError.REASON_NOT_FOUND: "Location not found. Please try another search.",
    WeatherFetchError.REASON_TIMEOUT: "The weather service took too long to respond. Please try again.",
    WeatherFetchError.REASON_NETWORK: "Could not reach the weather service. Check your connection and try again.",
}


def user_message(error: WeatherFetchError) -> str:
    """Message shown in the view for a failed forecast lookup."""
    return USER_MESSAGES.get(error.reason, GENERIC_WEATHER_ERROR)
