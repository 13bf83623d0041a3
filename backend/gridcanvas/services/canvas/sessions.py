from typing import Dict, Optional

from gridcanvas.errors import InvalidInput, SessionNotFound
from gridcanvas.models import Session


class SessionRegistry:
    """Maps a live connection id to its Session.

    The registry is the only owner of Session objects; callers mutate a
    session only through the cooldown policy.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}

    def register(self, sid: str, display_name) -> Session:
        """Create or replace the session for ``sid``.

        Re-registering the same connection starts over with no cooldown.
        """
        if not isinstance(display_name, str) or not display_name.strip():
            raise InvalidInput()
        session = Session(sid=sid, name=display_name.strip())
        self._sessions[sid] = session
        return session

    def lookup(self, sid: str) -> Session:
        session = self._sessions.get(sid)
        if session is None:
            raise SessionNotFound(sid)
        return session

    def get(self, sid: str) -> Optional[Session]:
        return self._sessions.get(sid)

    def remove(self, sid: str) -> Optional[Session]:
        return self._sessions.pop(sid, None)

    def count(self) -> int:
        return len(self._sessions)

    def __contains__(self, sid) -> bool:
        return sid in self._sessions
