from dataclasses import dataclass
from typing import Any, Callable, Iterable

# Target marker for notifications addressed to every connected sink
BROADCAST = '*'


@dataclass(frozen=True)
class Notification:
    event: str
    payload: Any
    to: str = BROADCAST

    @property
    def is_broadcast(self) -> bool:
        return self.to == BROADCAST


def fan_out(notifications: Iterable[Notification], sinks: Iterable[str],
            send: Callable[[str, Any, str], None]) -> int:
    """Deliver notifications in order and return the number of sends.

    Broadcasts go to every sink in ``sinks``; direct notifications go to
    their target only. ``send(event, payload, sid)`` is the transport.
    """
    sinks = list(sinks)
    sent = 0
    for note in notifications:
        targets = sinks if note.is_broadcast else [note.to]
        for sid in targets:
            send(note.event, note.payload, sid)
            sent += 1
    return sent
