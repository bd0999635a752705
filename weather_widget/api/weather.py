from fastapi import APIRouter, Depends, HTTPException, Request, Query
from typing import List
from weather_widget.config import settings
from weather_widget.core.errors import WeatherFetchError, user_message
from weather_widget.core.session_manager import WidgetSession, session_manager
from weather_widget.core.view_state import ViewState
from weather_widget.models.weather import (
    Location,
    LocationSelection,
    SearchInput,
    TabSelection,
    WeatherReport,
)

router = APIRouter(prefix="/weather", tags=["weather"])


async def get_widget_session(request: Request) -> WidgetSession:
    """FastAPI dependency returning (or creating) the caller's widget session."""
    session_id = getattr(request.state, "session_id", None)
    return await session_manager.get_or_create_session(session_id)


@router.get("/state", response_model=ViewState)
async def get_state(session: WidgetSession = Depends(get_widget_session)):
    """Current view state of this session's widget"""
    return session.controller.state


@router.post("/input", response_model=ViewState)
async def type_text(
    search: SearchInput, session: WidgetSession = Depends(get_widget_session)
):
    """Search box changed; suggestions follow once typing settles"""
    return session.controller.on_input(search.text)


@router.post("/submit", response_model=ViewState)
async def submit_search(session: WidgetSession = Depends(get_widget_session)):
    """Enter key / search icon"""
    return await session.controller.submit()


@router.post("/select", response_model=ViewState)
async def select_suggestion(
    selection: LocationSelection,
    session: WidgetSession = Depends(get_widget_session),
):
    """Suggestion clicked"""
    return await session.controller.select_suggestion(selection.to_location())


@router.post("/dismiss", response_model=ViewState)
async def dismiss_suggestions(session: WidgetSession = Depends(get_widget_session)):
    """Click outside the search region"""
    return session.controller.dismiss_suggestions()


@router.post("/tab", response_model=ViewState)
async def select_tab(
    selection: TabSelection, session: WidgetSession = Depends(get_widget_session)
):
    """Switch between the weekly and hourly forecast"""
    return session.controller.select_tab(selection.tab)


@router.get("/search", response_model=List[Location])
async def search_locations(q: str = Query(..., description="Partial location name")):
    """Stateless location lookup"""
    return await session_manager.client.fetch_suggestions(q)


@router.get("/forecast/{location}", response_model=WeatherReport)
async def get_forecast(
    location: str, days: int = Query(settings.forecast_days, ge=1, le=14)
):
    """Stateless forecast for a location"""
    try:
        return await session_manager.client.fetch_weather(location, days)
    except WeatherFetchError as e:
        if e.reason == WeatherFetchError.REASON_NOT_FOUND:
            status_code = 404
        elif e.reason == WeatherFetchError.REASON_TIMEOUT:
            status_code = 504
        else:
            status_code = 502
        raise HTTPException(status_code=status_code, detail=user_message(e))
