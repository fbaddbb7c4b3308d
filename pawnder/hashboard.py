"""A compact, hashable image of the board used as a transposition-table key."""

from __future__ import annotations

from collections.abc import Sequence

from .board import (
    BBISHOP,
    BKING,
    BKNIGHT,
    BPAWN,
    BQUEEN,
    BROOK,
    EMPTY,
    H_BBISHOP,
    H_BKING,
    H_BKNIGHT,
    H_BPAWN,
    H_BQUEEN,
    H_BROOK,
    H_EMPTY,
    H_WBISHOP,
    H_WKING,
    H_WKNIGHT,
    H_WPAWN,
    H_WQUEEN,
    H_WROOK,
    HASH_BITS,
    WBISHOP,
    WKING,
    WKNIGHT,
    WPAWN,
    WQUEEN,
    WROOK,
    Color,
    file_number,
    rank_number,
    single_index_from_double,
)

WORDS = 16
HASH_MASK_OFF = 0x7 << HASH_BITS
HASH_MASK_ON = (1 << HASH_BITS) - 1

_WORD_MASK = 0xFFFF
_LONG_MASK = 0xFFFFFFFFFFFFFFFF
_CLEAR_MASK = (0xFFF0, 0xFF0F, 0xF0FF, 0x0FFF)

_HASH_PIECES = {
    EMPTY: H_EMPTY,
    WPAWN: H_WPAWN,
    WKNIGHT: H_WKNIGHT,
    WBISHOP: H_WBISHOP,
    WROOK: H_WROOK,
    WQUEEN: H_WQUEEN,
    WKING: H_WKING,
    BPAWN: H_BPAWN,
    BKNIGHT: H_BKNIGHT,
    BBISHOP: H_BBISHOP,
    BROOK: H_BROOK,
    BQUEEN: H_BQUEEN,
    BKING: H_BKING,
}


def to_hash_piece(piece: int) -> int:
    """Compact 4-bit number of a piece; anything unknown counts as empty."""
    return _HASH_PIECES.get(piece, H_EMPTY)


def _playing_squares():
    for f in range(1, 9):
        for r in range(1, 9):
            yield single_index_from_double(f, r)


class HashBoard:
    """Sixteen 16-bit words holding four squares each, plus the side to move."""

    __slots__ = ("words", "mover")
    __hash__ = None  # mutable

    def __init__(self) -> None:
        self.words: list[int] = [0] * WORDS
        self.mover: int = Color.WHITE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashBoard):
            return NotImplemented
        return self.mover == other.mover and self.words == other.words

    def __repr__(self) -> str:
        return f"HashBoard(mover={self.mover!r}, words={self.words!r})"

    def copy(self) -> HashBoard:
        """An independent copy of this board."""
        dup = HashBoard()
        dup.words = list(self.words)
        dup.mover = self.mover
        return dup

    def clear_board(self) -> None:
        """Remove all pieces."""
        self.words = [0] * WORDS

    def add_hash_piece(self, location: int, hash_piece: int) -> None:
        """Put an already-converted hash piece on the given square."""
        column = file_number(location)
        row = rank_number(location)
        if column == 0 or row == 0:
            raise ValueError(f"location {location} is not a playing square")
        field = (column - 1) & 0x3
        index = ((row - 1) << 1) + ((column - 1) >> 2)
        value = (self.words[index] & _CLEAR_MASK[field]) | (hash_piece << (field << 2))
        self.words[index] = value & _WORD_MASK

    def add_piece(self, location: int, piece: int) -> None:
        """Put a board piece on the given square."""
        self.add_hash_piece(location, to_hash_piece(piece))

    def hashvalue(self) -> int:
        """Bucket number of this position, below 2 ** HASH_BITS."""
        h = int(self.mover)
        for word in self.words:
            h = ((h << 3) + word) & _LONG_MASK
            g = h & HASH_MASK_OFF
            if g:
                h ^= g >> HASH_BITS
        return h & HASH_MASK_ON

    def set_like_board(self, board: Sequence[int], mover: int) -> None:
        """Copy the pieces of a full 144-square board and the side to move."""
        for loc in _playing_squares():
            self.add_piece(loc, board[loc])
        self.mover = mover

    def consistent_with(self, board: Sequence[int], mover: int) -> bool:
        """True when this hash board matches the given board and mover."""
        other = HashBoard()
        other.set_like_board(board, mover)
        return other == self

    def format_hex(self) -> str:
        """The board words in hex, two per line, one line per rank."""
        return "\n".join(
            f"{self.words[i * 2]:x} {self.words[i * 2 + 1]:x}" for i in range(8)
        )