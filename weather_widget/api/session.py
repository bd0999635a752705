"""Endpoints for inspecting, resetting and closing the caller's widget session"""

from fastapi import APIRouter, Depends, HTTPException, Request
from weather_widget.core.session_manager import WidgetSession, session_manager
from weather_widget.core.view_state import ViewState
from weather_widget.models.session import SessionClosed, SessionInfo

router = APIRouter(prefix="/session", tags=["session"])


async def require_session(request: Request) -> WidgetSession:
    """Look up the caller's existing session without creating one"""
    session_id = getattr(request.state, "session_id", None)
    session = await session_manager.get_session(session_id) if session_id else None
    if not session:
        raise HTTPException(status_code=404, detail="No widget session for this client")
    return session


@router.get("/", response_model=SessionInfo)
async def describe_session(session: WidgetSession = Depends(require_session)):
    state = session.controller.state
    return SessionInfo(
        session_id=session.session_id,
        created_at=session.created_at,
        age_minutes=round(session.age_minutes, 2),
        idle_minutes=round(session.idle_minutes, 2),
        status=state.status,
        search_text=state.search_text,
        location=state.current.location if state.current else None,
    )


@router.post("/reset", response_model=ViewState)
async def reset_session(session: WidgetSession = Depends(require_session)):
    """Drop the widget and start over from the default location"""
    await session_manager.destroy_session(session.session_id)
    fresh = await session_manager.get_or_create_session(session.session_id)
    return fresh.controller.state


@router.delete("/", response_model=SessionClosed)
async def close_session(session: WidgetSession = Depends(require_session)):
    await session_manager.destroy_session(session.session_id)
    return SessionClosed(session_id=session.session_id, message="Session closed")
