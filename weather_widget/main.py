"""Main FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from weather_widget.config import settings
from weather_widget.core.session_manager import session_manager
from weather_widget.core.weather_api import WeatherApiClient
from weather_widget.middleware.session import SessionMiddleware
import logging

from weather_widget.api.weather import router as weather_router
from weather_widget.api.session import router as session_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages application startup and shutdown events."""
    # Startup
    logger.info("Starting Weather Widget API")
    owned_client = None
    if not session_manager.is_configured:
        owned_client = WeatherApiClient()
        session_manager.configure(owned_client)
        logger.info(f"Weather client ready ({settings.weather_api_base_url})")

    await session_manager.start()

    yield

    # Shutdown
    logger.info("Shutting down Weather Widget API")
    await session_manager.stop()

    if owned_client:
        await owned_client.close()
        session_manager.configure(None)
        logger.info("Weather client closed")


app = FastAPI(
    title="Weather Widget API",
    description="Location search, current conditions and forecasts for the weather widget",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(SessionMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(weather_router)
app.include_router(session_router)


@app.get("/")
async def root():
    """Provides basic information about the running API."""
    return {
        "message": "Weather Widget API",
        "status": "running",
        "default_location": settings.default_location,
        "forecast_days": settings.forecast_days,
    }


@app.get("/health")
async def health_check():
    """Performs a health check of the API and its dependent services."""
    return {
        "status": "healthy",
        "weather_client": session_manager.is_configured,
        "active_sessions": session_manager.active_sessions,
    }


@app.get("/sessions")
async def get_sessions():
    """(Admin) Gets information about all active widget sessions."""
    return session_manager.get_session_info()
