"""Client for the WeatherAPI search and forecast endpoints."""

import httpx
from typing import List, Optional, Dict, Any
from pydantic import ValidationError
from weather_widget.config import settings
from weather_widget.core.errors import (
    MissingApiKeyError,
    SuggestionFetchError,
    WeatherFetchError,
)
from weather_widget.core.formatter import (
    format_hour,
    format_long_date,
    format_temperature,
    normalize_icon_url,
    sort_week_starting_monday,
    weekday_name,
)
from weather_widget.models.weather import (
    CurrentConditions,
    DayForecast,
    HourForecast,
    Location,
    WeatherReport,
)
from weather_widget.models.weatherapi import ApiForecastResponse, ApiSearchResult
import logging

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
HOURLY_STEP = 2
HOURLY_LIMIT = 8

# WeatherAPI error codes carried in {"error": {"code": ...}}
API_CODE_NOT_FOUND = 1006
API_CODE_QUOTA = 2007


class WeatherApiClient:
    """Async client for location search and forecast lookups."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Builds the client; the API key must come from configuration."""
        self.api_key = api_key or settings.weather_api_key
        if not self.api_key:
            raise MissingApiKeyError(
                "WEATHER_API_KEY is not set; add it to the environment or .env file"
            )
        self.base_url = (base_url or settings.weather_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def close(self):
        """Close the underlying HTTP client if we created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_suggestions(self, query: str) -> List[Location]:
        """
        Search-as-you-type lookup. Never raises: failures are logged and an
        empty list is returned, as are queries shorter than three characters.
        """
        if len(query.strip()) < MIN_QUERY_LENGTH:
            return []

        try:
            return await self.search_locations(query)
        except SuggestionFetchError as e:
            logger.warning(f"Suggestion lookup for '{query}' failed: {e}")
            return []

    async def search_locations(self, query: str) -> List[Location]:
        """Query search.json; raises SuggestionFetchError on any failure."""
        try:
            response = await self._client.get(
                f"{self.base_url}/search.json",
                params={"key": self.api_key, "q": query},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise SuggestionFetchError(f"transport error: {e}") from e

        if response.status_code != 200:
            raise SuggestionFetchError(f"HTTP {response.status_code}")

        try:
            items = [ApiSearchResult.model_validate(item) for item in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise SuggestionFetchError(f"malformed response: {e}") from e

        locations = [
            Location(
                name=item.name,
                region=item.region,
                country=item.country,
                lat=item.lat,
                lon=item.lon,
            )
            for item in items
        ]
        logger.info(f"Found {len(locations)} suggestions for '{query}'")
        return locations

    async def fetch_weather(
        self, location_query: str, days: Optional[int] = None
    ) -> WeatherReport:
        """Fetch current conditions, the weekly and the hourly forecast."""
        days = days or settings.forecast_days
        logger.info(f"Fetching {days}-day forecast for '{location_query}'")

        try:
            response = await self._client.get(
                f"{self.base_url}/forecast.json",
                params={
                    "key": self.api_key,
                    "q": location_query,
                    "days": days,
                    "aqi": "no",
                    "alerts": "no",
                },
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise WeatherFetchError(
                f"Timed out after {self.timeout}s", reason=WeatherFetchError.REASON_TIMEOUT
            ) from e
        except httpx.HTTPError as e:
            raise WeatherFetchError(
                f"Transport error: {e}", reason=WeatherFetchError.REASON_NETWORK
            ) from e

        if response.status_code != 200:
            raise self._error_from_response(response)

        try:
            payload = ApiForecastResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise WeatherFetchError(
                f"Malformed forecast payload: {e}",
                reason=WeatherFetchError.REASON_INVALID,
            ) from e

        return self._convert_forecast(payload)

    def _error_from_response(self, response: httpx.Response) -> WeatherFetchError:
        """Map an error status (and WeatherAPI error code) to a WeatherFetchError."""
        status = response.status_code
        code = None
        message = f"HTTP {status}"
        try:
            body: Dict[str, Any] = response.json()
            code = body.get("error", {}).get("code")
            message = body.get("error", {}).get("message") or message
        except (ValueError, AttributeError):
            pass

        if code == API_CODE_NOT_FOUND:
            reason = WeatherFetchError.REASON_NOT_FOUND
        elif code == API_CODE_QUOTA:
            reason = WeatherFetchError.REASON_QUOTA
        elif status in (401, 403):
            reason = WeatherFetchError.REASON_UNAUTHORIZED
        else:
            reason = WeatherFetchError.REASON_HTTP

        logger.error(f"Forecast request failed ({status}, code={code}): {message}")
        return WeatherFetchError(message, reason=reason, status_code=status)

    def _convert_forecast(self, payload: ApiForecastResponse) -> WeatherReport:
        """Map the raw forecast payload to the display models."""
        current = CurrentConditions(
            temperature=payload.current.temp_c,
            condition=payload.current.condition.text,
            icon=normalize_icon_url(payload.current.condition.icon),
            wind_kph=payload.current.wind_kph,
            wind_dir=payload.current.wind_dir,
            humidity=payload.current.humidity,
            location=f"{payload.location.name}, {payload.location.country}",
            date=format_long_date(payload.location.localtime),
        )

        forecast_days = payload.forecast.forecastday
        days = sort_week_starting_monday(
            DayForecast(
                day=weekday_name(entry.date),
                temp=format_temperature(entry.day.avgtemp_c),
                condition=entry.day.condition.text,
                icon=normalize_icon_url(entry.day.condition.icon),
            )
            for entry in forecast_days
        )

        hours = forecast_days[0].hour if forecast_days else []
        hourly = [
            HourForecast(time=format_hour(hour.time), temp=format_temperature(hour.temp_c))
            for hour in hours[::HOURLY_STEP][:HOURLY_LIMIT]
        ]

        return WeatherReport(current=current, forecast=days, hourly=hourly)
