"""Display formatting for dates, times and temperatures from the weather API."""

import math
from datetime import datetime
from typing import Iterable, List, Optional
from weather_widget.models.weather import DayForecast

WEEKDAYS = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]
MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# The API sends "2024-06-05 14:30" for times and "2024-06-05" for dates
_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d")


def _parse(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    text = value.strip()
    for fmt in _FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def format_long_date(value: Optional[str]) -> str:
    """Render e.g. "Wednesday, June 5, 2024". Unparseable input comes back as-is."""
    parsed = _parse(value)
    if parsed is None:
        return value or ""
    return (
        f"{WEEKDAYS[parsed.weekday()]}, {MONTHS[parsed.month - 1]} "
        f"{parsed.day}, {parsed.year}"
    )


def weekday_name(value: Optional[str]) -> str:
    """Render just the weekday ("Wednesday")."""
    parsed = _parse(value)
    if parsed is None:
        return value or ""
    return WEEKDAYS[parsed.weekday()]


def format_hour(value: Optional[str]) -> str:
    """Render the clock time of an hourly entry ("14:00")."""
    parsed = _parse(value)
    if parsed is None:
        return value or ""
    return parsed.strftime("%H:%M")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_temperature(value: float) -> str:
    """Rounded temperature with a degree sign, e.g. 23.6 -> "24°"."""
    return f"{round_half_up(value)}°"


def normalize_icon_url(url: str) -> str:
    """Icons come back scheme-relative ("//cdn..."); give them a scheme."""
    if url.startswith("//"):
        return f"https:{url}"
    return url


def sort_week_starting_monday(days: Iterable[DayForecast]) -> List[DayForecast]:
    """Reorder forecast days Monday→Sunday. Unknown names go last."""

    def key(entry: DayForecast) -> int:
        try:
            return WEEKDAYS.index(entry.day)
        except ValueError:
            return len(WEEKDAYS)

    return sorted(days, key=key)
