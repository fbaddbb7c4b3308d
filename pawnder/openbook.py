"""Opening book: reading book files and choosing weighted book moves."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, TextIO

from .board import Color, GenMove, single_index_from_chars

MIN_PROBABILITY = 0
MAX_PROBABILITY = 10

_WHITESPACE = frozenset(" \t\n\r\f\v")
_DIGITS = frozenset("0123456789")


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class OpeningBookError(ValueError):
    """Raised when an opening book file holds a malformed entry."""


@dataclass(frozen=True, slots=True)
class BookEntry:
    """One line of an opening book file."""

    move_number: int
    color: Color
    from_loc: int
    to_loc: int
    probability: int


class _Reader:
    """Character-level cursor over the text of a book file."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def skip_whitespace(self) -> None:
        while not self.at_end and self.peek() in _WHITESPACE:
            self.pos += 1

    def skip_line(self) -> bool:
        """Move past the next newline; False if the text ends first."""
        newline = self.text.find("\n", self.pos)
        if newline < 0:
            self.pos = len(self.text)
            return False
        self.pos = newline + 1
        return True

    def take_digits(self) -> str:
        start = self.pos
        while not self.at_end and self.peek() in _DIGITS:
            self.pos += 1
        return self.text[start:self.pos]

    def take(self, count: int) -> str:
        chunk = self.text[self.pos:self.pos + count]
        self.pos += len(chunk)
        return chunk


def _error(entry: str) -> OpeningBookError:
    return OpeningBookError(
        "There has been an error in the openings file. "
        f"The problem occurred at the following entry: {entry}"
    )


def _read_integer(reader: _Reader, entry: str) -> int:
    reader.skip_whitespace()
    sign = 1
    if not reader.at_end and reader.peek() in "+-":
        sign = -1 if reader.peek() == "-" else 1
        reader.pos += 1
    digits = reader.take_digits()
    if not digits:
        raise _error(entry)
    return sign * int(digits)


def _parse_color(char: str) -> Color | None:
    if char in "wW":
        return Color.WHITE
    if char in "bB":
        return Color.BLACK
    return None


def _normalise_move(move: str) -> str | None:
    """Lower-case the file letters; None if the move is not four valid chars."""
    chars = list(move)
    for i in (0, 2):
        if "A" <= chars[i] <= "H":
            chars[i] = chars[i].lower()
        if not "a" <= chars[i] <= "h":
            return None
    for i in (1, 3):
        if not "1" <= chars[i] <= "8":
            return None
    return "".join(chars)


def read_book_entries(stream: TextIO) -> Iterator[BookEntry]:
    """Yield the entries of an opening book file in order.

    Each entry is a move number, a colour letter (w or b), a move such as
    e2e4 and a probability from 0 to 10.  Leading whitespace is ignored and
    lines starting with '#' are comments.  A malformed entry raises
    OpeningBookError.
    """
    reader = _Reader(stream.read())
    while True:
        reader.skip_whitespace()
        while not reader.at_end and reader.peek() == "#":
            if not reader.skip_line():
                return
            reader.skip_whitespace()
        if reader.at_end:
            return

        digits = reader.take_digits()
        move_number = int(digits) if digits else 0
        if reader.at_end:
            raise _error(digits)

        reader.skip_whitespace()
        if reader.at_end:
            raise _error(digits)
        color_char = reader.take(1)

        reader.skip_whitespace()
        move = reader.take(4)
        if len(move) < 4:
            raise _error(move)

        probability = _read_integer(reader, move)

        if move_number < 1:
            raise _error(move)
        if not MIN_PROBABILITY <= probability <= MAX_PROBABILITY:
            raise _error(move)
        normalised = _normalise_move(move)
        if normalised is None:
            raise _error(move)
        color = _parse_color(color_char)
        if color is None:
            raise _error(move)

        yield BookEntry(
            move_number=move_number,
            color=color,
            from_loc=single_index_from_chars(normalised[0], normalised[1]),
            to_loc=single_index_from_chars(normalised[2], normalised[3]),
            probability=probability,
        )


class OpeningBook:
    """Book moves keyed by the Forsyth code of the position they are played in.

    Each position holds a list of weighted moves; a move is chosen with
    probability proportional to its weight.
    """

    def __init__(self) -> None:
        self._positions: dict[str, list[tuple[int, int, int]]] = {}

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, code: object) -> bool:
        return code in self._positions

    def add_opening(
        self, code: str, from_loc: int, to_loc: int, probability: int
    ) -> bool:
        """Record a move for a position; returns False if it was already known.

        A move already stored for the position keeps its original weight.
        New moves go to the front of the position's list.
        """
        if probability < 0:
            raise ValueError("probability must not be negative")
        moves = self._positions.get(code)
        if moves is None:
            self._positions[code] = [(from_loc, to_loc, probability)]
            return True
        if any(f == from_loc and t == to_loc for f, t, _ in moves):
            return False
        moves.insert(0, (from_loc, to_loc, probability))
        return True

    def moves_for(self, code: str) -> list[tuple[int, int, int]]:
        """The (from_loc, to_loc, probability) moves stored for a position."""
        return list(self._positions.get(code, ()))

    def check_library(
        self, code: str, rng: _RandRange | None = None
    ) -> GenMove | None:
        """A book move for the position chosen by weight, or None.

        None is returned when the position is not in the book or when all of
        its moves have weight zero.
        """
        moves = self._positions.get(code)
        if not moves:
            return None
        total = sum(probability for _, _, probability in moves)
        if total == 0:
            return None
        source = rng if rng is not None else random
        pick = source.randrange(total) + 1
        for from_loc, to_loc, probability in moves:
            if pick <= probability:
                return GenMove(from_loc, to_loc, 0)
            pick -= probability
        raise AssertionError("weighted choice ran past the move list")