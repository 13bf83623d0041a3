from collections import deque
from itertools import islice
from typing import Deque, List, Optional

from gridcanvas.models import EditRecord


class EditLog:
    """Time-ordered record of accepted edits.

    Only the newest ``retention`` records are kept in memory. ``total``
    keeps counting past that so callers can tell how many edits were ever
    accepted.
    """

    def __init__(self, retention: Optional[int] = None):
        self._records: Deque[EditRecord] = deque(maxlen=retention)
        self.total = 0

    def append(self, record: EditRecord) -> None:
        self._records.append(record)
        self.total += 1

    def recent(self, k: int) -> List[EditRecord]:
        """Return the last ``k`` records, oldest first."""
        if k <= 0:
            return []
        n = len(self._records)
        if k >= n:
            return list(self._records)
        return list(islice(self._records, n - k, n))

    def __len__(self) -> int:
        return len(self._records)
