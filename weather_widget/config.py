"""Application configuration management using Pydantic's BaseSettings."""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Defines all configuration settings for the widget, loaded from .env file."""

    # API Keys
    weather_api_key: Optional[str] = None

    # App settings
    debug: bool = True
    log_level: str = "INFO"

    # WeatherAPI settings
    weather_api_base_url: str = "https://api.weatherapi.com/v1"
    request_timeout: float = 10.0
    forecast_days: int = 7
    default_location: str = "London"

    # Interaction timing
    debounce_seconds: float = 0.3
    reveal_delay_seconds: float = 0.3

    # Session housekeeping
    session_idle_minutes: int = 30
    session_timeout_minutes: int = 240

    class Config:
        """Pydantic model configuration."""

        env_file = ".env"


settings = Settings()
