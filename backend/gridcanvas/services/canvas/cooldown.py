import math
from typing import Tuple

from gridcanvas.models import Session


class CooldownPolicy:
    """Decides whether a session may edit the grid right now.

    Times are monotonic seconds supplied by the caller, so the policy itself
    never reads a clock.
    """

    def __init__(self, duration: float = 60):
        self.duration = duration

    def may_edit(self, session: Session, now: float) -> bool:
        if session.last_edit_at is None:
            return True
        return now >= session.cooldown_expiry

    def arm(self, session: Session, now: float) -> None:
        """Start the cooldown; only call this for an accepted edit."""
        session.cooldown_expiry = now + self.duration
        session.last_edit_at = now

    def remaining(self, session: Session, now: float) -> int:
        return max(0, math.ceil(session.cooldown_expiry - now))

    def status(self, session: Session, now: float) -> Tuple[bool, int]:
        if self.may_edit(session, now):
            return False, 0
        return True, self.remaining(session, now)
