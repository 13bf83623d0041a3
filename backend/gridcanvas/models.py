from dataclasses import dataclass
from typing import Optional


def to_millis(ts: float) -> int:
    """Epoch seconds -> integer epoch milliseconds used on the wire."""
    return int(ts * 1000)


@dataclass
class Session:
    """Server-side state for one registered connection."""
    sid: str
    name: str
    # Monotonic seconds; only meaningful once last_edit_at is set
    cooldown_expiry: float = 0.0
    last_edit_at: Optional[float] = None


@dataclass(frozen=True)
class Occupant:
    character: str
    author_id: str
    author_name: str
    timestamp: float

    def to_dict(self):
        return {
            'character': self.character,
            'authorId': self.author_id,
            'authorName': self.author_name,
            'timestamp': to_millis(self.timestamp),
        }


@dataclass(frozen=True)
class EditRecord:
    row: int
    col: int
    character: str
    author_id: str
    author_name: str
    timestamp: float

    def to_dict(self):
        return {
            'row': self.row,
            'col': self.col,
            'character': self.character,
            'authorId': self.author_id,
            'authorName': self.author_name,
            'timestamp': to_millis(self.timestamp),
        }
