"""Transposition table of hash boards with their search values."""

from __future__ import annotations

from dataclasses import dataclass

from .board import HASH_TABLE_SIZE
from .hashboard import HashBoard

DEFAULT_CAPACITY = 60000


@dataclass(slots=True)
class _Entry:
    board: HashBoard
    depth: int
    alpha_beta: int
    value: int


class HashTable:
    """Chained hash table holding at most ``capacity`` positions."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.size = HASH_TABLE_SIZE
        self.boards_used = 0
        self._buckets: dict[int, list[_Entry]] = {}

    def __len__(self) -> int:
        return self.boards_used

    def clear_table(self) -> int:
        """Empty the table; returns how many buckets had been in use."""
        used = sum(1 for chain in self._buckets.values() if chain)
        self._buckets.clear()
        self.boards_used = 0
        return used

    def add_to_table(
        self, board: HashBoard, value: int, depth: int, alpha_beta: int
    ) -> bool:
        """Store a position; returns False when the table is full."""
        if self.boards_used >= self.capacity:
            return False
        entry = _Entry(board.copy(), depth, alpha_beta, value)
        self._buckets.setdefault(board.hashvalue(), []).append(entry)
        self.boards_used += 1
        return True

    def check_table(
        self, board: HashBoard, depth: int, alpha_beta: int, comp_color: int
    ) -> int | None:
        """Stored value of the position, or None if no usable entry exists.

        An entry is usable when it was searched no deeper than ``depth`` and
        its alpha-beta bound is wide enough for the side to move.
        """
        chain = self._buckets.get(board.hashvalue(), ())
        maximising = board.mover == comp_color
        for entry in reversed(chain):
            if entry.depth > depth or entry.board != board:
                continue
            if maximising:
                if entry.alpha_beta >= alpha_beta or entry.value > alpha_beta:
                    return entry.value
            elif entry.alpha_beta <= alpha_beta or entry.value < alpha_beta:
                return entry.value
        return None