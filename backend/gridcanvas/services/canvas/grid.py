from typing import List, Optional, Tuple

from gridcanvas.errors import OutOfBounds
from gridcanvas.models import Occupant

Snapshot = Tuple[Tuple[Optional[Occupant], ...], ...]


class GridStore:
    """Authoritative size x size matrix of cells.

    A cell is either None (empty) or an immutable Occupant. Writes are
    last-write-wins: whichever set() reaches the store last is visible.
    """

    def __init__(self, size: int = 10):
        self.size = size
        self._cells: List[List[Optional[Occupant]]] = [[None] * size for _ in range(size)]

    def in_bounds(self, row, col) -> bool:
        for v in (row, col):
            # bool is an int subclass but never a coordinate
            if isinstance(v, bool) or not isinstance(v, int):
                return False
            if not 0 <= v < self.size:
                return False
        return True

    def get(self) -> Snapshot:
        return tuple(tuple(r) for r in self._cells)

    def cell(self, row: int, col: int) -> Optional[Occupant]:
        if not self.in_bounds(row, col):
            raise OutOfBounds()
        return self._cells[row][col]

    def set(self, row: int, col: int, character: str, author_id: str, author_name: str,
            timestamp: float) -> Optional[Occupant]:
        """Overwrite a cell and return its previous occupant (None if empty)."""
        if not self.in_bounds(row, col):
            raise OutOfBounds()
        previous = self._cells[row][col]
        self._cells[row][col] = Occupant(
            character=character,
            author_id=author_id,
            author_name=author_name,
            timestamp=timestamp,
        )
        return previous

    def to_wire(self):
        return [[c.to_dict() if c else None for c in r] for r in self._cells]
