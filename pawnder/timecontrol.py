"""Clock bookkeeping for both sides: conventional and Fischer time controls."""

from __future__ import annotations

from dataclasses import dataclass, field

from .board import Color

DEFAULT_MOVES_PER_TC = 30
DEFAULT_TIME_PER_TC = 30 * 10

_DIGITS = frozenset("0123456789")


def _pair(value: int) -> list[int]:
    return [value, value]


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass
class TimeControl:
    """Time used and remaining for each color, indexed by Color.

    In a conventional control each side gets ``time_per_tc`` seconds for
    every ``moves_per_tc`` moves.  With Fischer timing each move adds
    ``fischer_time_inc`` seconds, less ``operator_time``, to the clock.
    """

    total_time: list[int] = field(default_factory=lambda: _pair(0))
    moves_per_tc: list[int] = field(default_factory=lambda: _pair(DEFAULT_MOVES_PER_TC))
    time_per_tc: list[int] = field(default_factory=lambda: _pair(DEFAULT_TIME_PER_TC))
    moves_left_in_tc: list[int] = field(
        default_factory=lambda: _pair(DEFAULT_MOVES_PER_TC)
    )
    time_left_in_tc: list[int] = field(
        default_factory=lambda: _pair(DEFAULT_TIME_PER_TC)
    )
    use_fischer_timing: bool = False
    fischer_base_time: list[int] = field(default_factory=lambda: _pair(0))
    fischer_time_inc: list[int] = field(default_factory=lambda: _pair(0))
    operator_time: int = 0

    def move_budget(self, color: Color) -> tuple[int, int]:
        """Seconds (max_time, soft_limit) the given side may spend on a move.

        The search stops starting new work once ``soft_limit`` has passed.
        Under Fischer timing this first credits the side's clock with the
        increment, less the operator time.
        """
        time_left = self.time_left_in_tc[color]
        if self.use_fischer_timing:
            gain = self.fischer_time_inc[color] - self.operator_time
            time_left += gain
            self.time_left_in_tc[color] = time_left
            max_time = _cdiv(time_left + 29 * gain, 30)
            if max_time * 2 > time_left:
                max_time = _cdiv(time_left, 2)
            return max_time, max_time
        moves_left = self.moves_left_in_tc[color]
        # Leave half a move's worth of time for overshoot.
        max_time = _cdiv(time_left - _cdiv(time_left, 2 * moves_left), moves_left)
        return max_time, _cdiv(9 * max_time, 10)

    def charge(self, color: Color, elapsed: int) -> None:
        """Record a move by the given side that took ``elapsed`` seconds.

        In a conventional control, finishing the moves of a period starts a
        new one and adds its time to the clock.
        """
        self.total_time[color] += elapsed
        self.time_left_in_tc[color] -= elapsed
        if self.use_fischer_timing:
            return
        self.moves_left_in_tc[color] -= 1
        if self.moves_left_in_tc[color] == 0:
            self.moves_left_in_tc[color] = self.moves_per_tc[color]
            self.time_left_in_tc[color] += self.time_per_tc[color]

    def adjust(self, color: Color, delta: int) -> int:
        """Add ``delta`` seconds to a side's clock; returns the new time left."""
        self.time_left_in_tc[color] += delta
        return self.time_left_in_tc[color]


def parse_time_adjustment(text: str) -> int | None:
    """Signed seconds of a clock adjustment such as '+30' or '-15'.

    Returns None when the text does not start with '+' or '-'.  Raises
    ValueError when anything after the sign is not a digit.  A bare sign
    means zero.
    """
    if not text or text[0] not in "+-":
        return None
    digits = text[1:]
    if any(ch not in _DIGITS for ch in digits):
        raise ValueError("Non-digit input.  No change made to time control.")
    value = int(digits) if digits else 0
    return -value if text[0] == "-" else value