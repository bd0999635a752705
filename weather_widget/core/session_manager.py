"""Session management: one interaction controller per browser session"""

import asyncio
import uuid
from typing import Dict, Optional, Any
from datetime import datetime
from weather_widget.config import settings
from weather_widget.core.controller import InteractionController
import logging

logger = logging.getLogger(__name__)


class WidgetSession:
    """Represents one browser's widget instance"""

    def __init__(self, session_id: str, controller: InteractionController):
        self.session_id = session_id
        self.controller = controller
        self.created_at = datetime.now()
        self.last_accessed = datetime.now()

    def touch(self):
        """Update last accessed time"""
        self.last_accessed = datetime.now()

    @property
    def age_minutes(self) -> float:
        """Get session age in minutes"""
        return (datetime.now() - self.created_at).total_seconds() / 60

    @property
    def idle_minutes(self) -> float:
        """Get idle time in minutes"""
        return (datetime.now() - self.last_accessed).total_seconds() / 60


class SessionManager:
    """Manages widget sessions for users"""

    _instance: Optional["SessionManager"] = None

    def __new__(cls):
        """Implements the singleton pattern for the SessionManager."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initializes the session manager's state."""
        if not hasattr(self, "_initialized"):
            self._initialized = True
            self._sessions: Dict[str, WidgetSession] = {}
            self._lock = asyncio.Lock()
            self._cleanup_task: Optional[asyncio.Task] = None
            self.client = None
            self.session_timeout_minutes = settings.session_timeout_minutes
            self.idle_timeout_minutes = settings.session_idle_minutes

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def configure(self, client):
        """Set the weather client shared by every session's controller"""
        self.client = client

    async def start(self):
        """Start session manager and cleanup task"""
        if not self._cleanup_task:
            self._cleanup_task = asyncio.create_task(self._cleanup_loop())
            logger.info("Session manager started")

    async def stop(self):
        """Stop session manager and close all sessions"""
        if self._cleanup_task:
            self._cleanup_task.cancel()
            try:
                await self._cleanup_task
            except asyncio.CancelledError:
                pass
            self._cleanup_task = None

        async with self._lock:
            for session in self._sessions.values():
                await session.controller.close()
            self._sessions.clear()

        logger.info("Session manager stopped")

    async def get_or_create_session(
        self, session_id: Optional[str] = None
    ) -> WidgetSession:
        """Get existing session or create new one, loading the default location"""
        if self.client is None:
            raise RuntimeError("SessionManager.configure() must be called first")

        async with self._lock:
            if not session_id:
                session_id = str(uuid.uuid4())

            if session_id in self._sessions:
                session = self._sessions[session_id]
                session.touch()
                return session

            logger.info(f"Creating new session {session_id}")
            session = WidgetSession(session_id, InteractionController(self.client))
            self._sessions[session_id] = session

        await session.controller.start()
        return session

    async def get_session(self, session_id: str) -> Optional[WidgetSession]:
        """Get existing session by ID"""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session:
                session.touch()
            return session

    async def destroy_session(self, session_id: str):
        """Destroy a specific session"""
        async with self._lock:
            session = self._sessions.pop(session_id, None)
        if session:
            await session.controller.close()
            logger.info(f"Destroyed session {session_id}")

    async def _cleanup_loop(self):
        """Background task to clean up expired sessions"""
        while True:
            try:
                await asyncio.sleep(60)
                await self._cleanup_expired_sessions()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Error in cleanup loop: {e}")

    async def _cleanup_expired_sessions(self):
        """Remove expired or idle sessions"""
        async with self._lock:
            expired = [
                session_id
                for session_id, session in self._sessions.items()
                if session.age_minutes > self.session_timeout_minutes
                or session.idle_minutes > self.idle_timeout_minutes
            ]
            closing = [self._sessions.pop(session_id) for session_id in expired]

        for session in closing:
            logger.info(f"Cleaning up expired session {session.session_id}")
            await session.controller.close()

    @property
    def active_sessions(self) -> int:
        """Get count of active sessions"""
        return len(self._sessions)

    def get_session_info(self) -> Dict[str, Any]:
        """Get information about all sessions"""
        return {
            "active_sessions": self.active_sessions,
            "sessions": [
                {
                    "session_id": session.session_id,
                    "age_minutes": round(session.age_minutes, 2),
                    "idle_minutes": round(session.idle_minutes, 2),
                    "status": session.controller.state.status.value,
                    "created_at": session.created_at.isoformat(),
                }
                for session in self._sessions.values()
            ],
        }


# Global instance
session_manager = SessionManager()
