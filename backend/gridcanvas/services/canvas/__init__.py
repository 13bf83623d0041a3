"""Canvas domain services: sessions, cooldown, grid, edit log and the engine.

This package contains pure domain logic that socket handlers and HTTP
routes call into, keeping transport concerns separated from the canvas
rules. Nothing in here talks to Flask or Socket.IO directly.
"""

from .broadcast import BROADCAST, Notification, fan_out
from .cooldown import CooldownPolicy
from .edit_log import EditLog
from .engine import SyncEngine
from .grid import GridStore
from .sessions import SessionRegistry

__all__ = [
    'BROADCAST',
    'CooldownPolicy',
    'EditLog',
    'GridStore',
    'Notification',
    'SessionRegistry',
    'SyncEngine',
    'fan_out',
]
