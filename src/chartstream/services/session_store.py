import threading
import uuid
from typing import Dict, Optional

from chartstream.config.settings import settings
from chartstream.schemas.chart_config import ChartConfig
from chartstream.services.chart_session import ChartSession, ClickHandler
from chartstream.services.errors import SessionLimitError, UnknownSessionError


class SessionRegistry:
    def __init__(self, max_sessions: int) -> None:
        self._sessions: Dict[str, ChartSession] = {}
        self._lock = threading.Lock()
        self.max_sessions = max_sessions

    def create(self, config: ChartConfig, on_click: Optional[ClickHandler] = None) -> str:
        session_id = uuid.uuid4().hex
        session = ChartSession(config, on_click=on_click, session_id=session_id)
        with self._lock:
            if len(self._sessions) >= self.max_sessions:
                raise SessionLimitError(f"Session limit reached ({self.max_sessions})")
            self._sessions[session_id] = session
        return session_id

    def get(self, session_id: str) -> ChartSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise UnknownSessionError(f"Unknown chart session: {session_id}")
        return session

    def drop(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise UnknownSessionError(f"Unknown chart session: {session_id}")

    def list_keys(self) -> list[str]:
        return sorted(self._sessions.keys())


registry = SessionRegistry(settings.max_sessions)
