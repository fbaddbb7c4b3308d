"""Killer moves remembered per search level."""

from __future__ import annotations

from dataclasses import dataclass

from .board import GenMove, square_name

LEVELS = 20
MAX_KILLERS = 10
KILLERS_TO_SEARCH = 5


@dataclass(slots=True)
class _Killer:
    code: int
    count: int = 1

    def __str__(self) -> str:
        return f"{square_name(self.code >> 8)}-{square_name(self.code & 0xFF)}"


class KillerTable:
    """For each level, the moves that caused cutoffs, most frequent first."""

    def __init__(self) -> None:
        self._levels: list[list[_Killer]] = [[] for _ in range(LEVELS)]

    def _level(self, level: int) -> list[_Killer]:
        if not 0 <= level < LEVELS:
            raise ValueError(f"level {level} out of range 0..{LEVELS - 1}")
        return self._levels[level]

    def save_killer(self, level: int, move: GenMove) -> None:
        """Count a killer move at a level, keeping the list ordered by count."""
        killers = self._level(level)
        code = move.code
        for i, killer in enumerate(killers):
            if killer.code == code:
                killer.count += 1
                while i and killers[i].count > killers[i - 1].count:
                    killers[i - 1], killers[i] = killers[i], killers[i - 1]
                    i -= 1
                return
        if len(killers) < MAX_KILLERS:
            killers.append(_Killer(code))

    def is_killer(self, level: int, move: GenMove) -> bool:
        """True if the move is among the most common killers of the level."""
        code = move.code
        return any(k.code == code for k in self._level(level)[:KILLERS_TO_SEARCH])

    def clear_killers(self) -> None:
        """Forget all killer moves."""
        for killers in self._levels:
            killers.clear()

    def format_killers(self) -> str:
        """One line per level with killers, listing the searched ones."""
        lines = []
        for level in range(1, LEVELS):
            killers = self._levels[level]
            if killers:
                listed = "".join(
                    f"{k} {k.count}  " for k in killers[:KILLERS_TO_SEARCH]
                )
                lines.append(f"Killers for level {level}  {listed}")
        return "\n".join(lines)