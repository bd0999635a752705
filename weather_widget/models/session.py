"""Pydantic models for the session endpoints."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional
from weather_widget.core.view_state import Status


class SessionInfo(BaseModel):
    """What the caller's widget session currently holds"""

    session_id: str
    created_at: datetime
    age_minutes: float
    idle_minutes: float
    status: Status
    search_text: str
    location: Optional[str] = None


class SessionClosed(BaseModel):
    session_id: str
    message: str
