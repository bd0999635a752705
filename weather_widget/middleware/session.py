"""FastAPI middleware assigning each browser a widget session ID via cookies."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from weather_widget.config import settings
from typing import Optional
import uuid

SESSION_HEADER = "X-Session-ID"


class SessionMiddleware(BaseHTTPMiddleware):
    """Binds each request to the widget session its browser owns"""

    def __init__(self, app, cookie_name: str = "widget_session_id"):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.max_age = settings.session_timeout_minutes * 60

    async def dispatch(self, request: Request, call_next):
        """Attach ``request.state.session_id`` and hand the ID back to the browser."""
        session_id = self._read_session_id(request)
        issued = session_id is None
        if issued:
            session_id = uuid.uuid4().hex

        request.state.session_id = session_id
        response = await call_next(request)

        # Header-based clients (the Streamlit page, tests) read it from here
        response.headers[SESSION_HEADER] = session_id
        if issued and response.status_code < 400:
            response.set_cookie(
                key=self.cookie_name,
                value=session_id,
                max_age=self.max_age,
                httponly=True,
                samesite="lax",
            )

        return response

    def _read_session_id(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.cookie_name) or request.headers.get(
            SESSION_HEADER
        )
