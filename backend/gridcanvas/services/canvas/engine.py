import logging
import threading
import time
import unicodedata
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional

from gridcanvas.errors import (
    CanvasError,
    CooldownActive,
    InvalidCharacter,
    NotRegistered,
    OutOfBounds,
)
from gridcanvas.models import EditRecord

from .broadcast import BROADCAST, Notification
from .cooldown import CooldownPolicy
from .edit_log import EditLog
from .grid import GridStore
from .sessions import SessionRegistry


def is_single_character(value) -> bool:
    """True for exactly one printable code point (space included)."""
    if not isinstance(value, str) or len(value) != 1:
        return False
    # Cc, Cf, Cn, Co, Cs: control, format, unassigned, private, surrogate
    return not unicodedata.category(value).startswith('C')


class SyncEngine:
    """Owns the canvas state and serializes every change to it.

    Each operation returns the notifications it produced instead of sending
    them; the transport fans them out while still holding ``serialized()``
    so broadcasts leave in the same order the edits were accepted.

    Connection lifecycle: connect() -> register() -> disconnect(). A sid is
    never reused after disconnect; events from an unknown sid are rejected.

    ``clock`` is wall time and only stamps cells and history records.
    ``timer`` is monotonic and drives the cooldown, so stepping the system
    clock never shortens or stretches a cooldown.
    """

    def __init__(self, grid_size: int = 10, cooldown_sec: float = 60,
                 history_window: int = 50, history_retention: Optional[int] = None,
                 clock: Callable[[], float] = time.time,
                 timer: Callable[[], float] = time.monotonic, logger=None):
        self.registry = SessionRegistry()
        self.grid = GridStore(grid_size)
        self.log = EditLog(max(history_window, history_retention or history_window))
        self.policy = CooldownPolicy(cooldown_sec)
        self.history_window = history_window
        self.clock = clock
        self.timer = timer
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        # sid -> connect time; insertion order is broadcast order
        self._connections: Dict[str, float] = {}

    @classmethod
    def from_config(cls, config, logger=None, clock: Callable[[], float] = time.time,
                    timer: Callable[[], float] = time.monotonic):
        return cls(
            grid_size=int(config.get('GRID_SIZE', 10)),
            cooldown_sec=int(config.get('COOLDOWN_SEC', 60)),
            history_window=int(config.get('HISTORY_WINDOW', 50)),
            history_retention=int(config.get('HISTORY_RETENTION', 0)) or None,
            clock=clock,
            timer=timer,
            logger=logger,
        )

    @contextmanager
    def serialized(self):
        with self._lock:
            yield self

    # ---- Snapshots ----

    def presence(self) -> int:
        with self._lock:
            return self.registry.count()

    def connections(self) -> List[str]:
        with self._lock:
            return list(self._connections)

    def history_payload(self) -> list:
        with self._lock:
            return [r.to_dict() for r in self.log.recent(self.history_window)]

    def state_payload(self) -> dict:
        with self._lock:
            return {
                'grid': self.grid.to_wire(),
                'onlinePlayers': self.registry.count(),
                'history': self.history_payload(),
            }

    def _presence_broadcast(self) -> Notification:
        return Notification('playerCountUpdate', {'onlinePlayers': self.registry.count()}, BROADCAST)

    def _reject(self, sid: str, err: CanvasError, action: str) -> List[Notification]:
        self.logger.info(f"[{action}-reject] sid={sid} code={err.code} message={err.message!r}")
        return [Notification('error', err.to_dict(), sid)]

    # ---- Transitions ----

    def connect(self, sid: str) -> List[Notification]:
        with self._lock:
            self._connections.setdefault(sid, self.clock())
            self.logger.info(f"[connect] sid={sid} connections={len(self._connections)}")
            return []

    def register(self, sid: str, display_name) -> List[Notification]:
        with self._lock:
            if sid not in self._connections:
                self.logger.warning(f"[register-drop] sid={sid} not connected")
                return []
            try:
                session = self.registry.register(sid, display_name)
            except CanvasError as err:
                return self._reject(sid, err, 'register')
            self.logger.info(
                f"[register] sid={sid} name={session.name!r} online={self.registry.count()}"
            )
            return [
                Notification('gridUpdate', self.state_payload(), sid),
                self._presence_broadcast(),
            ]

    def validate_edit(self, sid: str, row, col, character, tick: float):
        """Return the session allowed to make this edit, or raise CanvasError.

        Checks run in a fixed order and stop at the first failure.
        """
        session = self.registry.get(sid)
        if session is None:
            raise NotRegistered()
        if not self.grid.in_bounds(row, col):
            raise OutOfBounds()
        if not is_single_character(character):
            raise InvalidCharacter()
        if not self.policy.may_edit(session, tick):
            raise CooldownActive(self.policy.remaining(session, tick))
        return session

    def request_edit(self, sid: str, row, col, character) -> List[Notification]:
        with self._lock:
            now = self.clock()
            tick = self.timer()
            try:
                session = self.validate_edit(sid, row, col, character, tick)
            except CanvasError as err:
                return self._reject(sid, err, 'edit')

            self.grid.set(row, col, character, session.sid, session.name, now)
            self.log.append(EditRecord(
                row=row,
                col=col,
                character=character,
                author_id=session.sid,
                author_name=session.name,
                timestamp=now,
            ))
            self.policy.arm(session, tick)
            self.logger.info(
                f"[edit-accept] sid={sid} name={session.name!r} cell=[{row}, {col}] char={character!r} "
                f"total_edits={self.log.total}"
            )
            return [
                Notification('gridUpdate', self.state_payload(), BROADCAST),
                Notification('updateSuccess', {'message': 'Grid updated successfully'}, sid),
            ]

    def disconnect(self, sid: str) -> List[Notification]:
        with self._lock:
            was_connected = self._connections.pop(sid, None) is not None
            session = self.registry.remove(sid)
            self.logger.info(
                f"[disconnect] sid={sid} registered={session is not None} online={self.registry.count()}"
            )
            if not was_connected and session is None:
                return []
            return [self._presence_broadcast()]

    # ---- Read-only queries ----

    def grid_state(self, sid: str) -> List[Notification]:
        with self._lock:
            return [Notification('gridUpdate', self.state_payload(), sid)]

    def history(self, sid: str) -> List[Notification]:
        with self._lock:
            return [Notification('historyUpdate', {'history': self.history_payload()}, sid)]

    def cooldown_status(self, sid: str) -> List[Notification]:
        with self._lock:
            session = self.registry.get(sid)
            on_cooldown, remaining = (False, 0)
            if session is not None:
                on_cooldown, remaining = self.policy.status(session, self.timer())
            return [Notification('cooldownStatus', {
                'onCooldown': on_cooldown,
                'remainingSeconds': remaining,
            }, sid)]
