"""Board geometry, piece encodings, piece-square tables and the move record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

# Board geometry.
#
# The board is a 12 x 12 array stored flat.  The playing squares sit in the
# middle 8 x 8 block; the two-square border on each side lets move generation
# run off the edge without bounds checks.  The file is the major index and the
# rank the minor one.

TOTAL_FILES = 12
TOTAL_RANKS = 12
BOARD_SIZE = TOTAL_FILES * TOTAL_RANKS

CHECK_EXTENSION = True
USE_HASHTABLE = True
HASH_BITS = 15
HASH_TABLE_SIZE = 1 << HASH_BITS

TOLERANCE = 0
MAX_VALUE = 32000
CHECKMATE_VALUE = MAX_VALUE - 2


class Color(IntEnum):
    """Side to move."""

    WHITE = 0
    BLACK = 1

    @property
    def other(self) -> Color:
        return other_color(self)


class Player(IntEnum):
    HUMAN = 0
    COMPUTER = 1


# Piece values (bit flags).

EMPTY = 0x0
OUT = 0x1
WPAWN = 0x2
WKNIGHT = 0x4
WBISHOP = 0x8
WROOK = 0x10
WQUEEN = 0x20
WKING = 0x40
BPAWN = 0x80
BKNIGHT = 0x100
BBISHOP = 0x200
BROOK = 0x400
BQUEEN = 0x800
BKING = 0x1000
MAX_PIECE = 0x1FFF

# Compact piece numbers used by the hash board.

H_EMPTY = 0
H_WPAWN = 1
H_WKNIGHT = 2
H_WBISHOP = 3
H_WROOK = 4
H_WQUEEN = 5
H_WKING = 6
H_BPAWN = 7
H_BKNIGHT = 8
H_BBISHOP = 9
H_BROOK = 10
H_BQUEEN = 11
H_BKING = 12

WHITE_MASK = WPAWN | WKNIGHT | WBISHOP | WROOK | WQUEEN | WKING
BLACK_MASK = BPAWN | BKNIGHT | BBISHOP | BROOK | BQUEEN | BKING
PAWN_MASK = WPAWN | BPAWN
KNIGHT_MASK = WKNIGHT | BKNIGHT
BISHOP_MASK = WBISHOP | BBISHOP
ROOK_MASK = WROOK | BROOK
QUEEN_MASK = WQUEEN | BQUEEN
KING_MASK = WKING | BKING

_PIECE_CODES = {
    WPAWN: "P",
    WKNIGHT: "N",
    WBISHOP: "B",
    WROOK: "R",
    WQUEEN: "Q",
    WKING: "K",
    BPAWN: "p",
    BKNIGHT: "n",
    BBISHOP: "b",
    BROOK: "r",
    BQUEEN: "q",
    BKING: "k",
}

# Direction offsets.

NEXT_LD_DIAG = -TOTAL_RANKS - 1
NEXT_LU_DIAG = -TOTAL_RANKS + 1
NEXT_RD_DIAG = TOTAL_RANKS - 1
NEXT_RU_DIAG = TOTAL_RANKS + 1

NEXT_D_FILE = -1
NEXT_U_FILE = 1
NEXT_L_RANK = -TOTAL_RANKS
NEXT_R_RANK = TOTAL_RANKS

KNIGHT_LDD = -TOTAL_RANKS - 2
KNIGHT_LLD = -(TOTAL_RANKS * 2) - 1
KNIGHT_LLU = -(TOTAL_RANKS * 2) + 1
KNIGHT_LUU = -TOTAL_RANKS + 2
KNIGHT_RUU = TOTAL_RANKS + 2
KNIGHT_RRU = TOTAL_RANKS * 2 + 1
KNIGHT_RRD = TOTAL_RANKS * 2 - 1
KNIGHT_RDD = TOTAL_RANKS - 2

KING_NEXT_MOVES = (
    NEXT_LD_DIAG,
    NEXT_L_RANK,
    NEXT_LU_DIAG,
    NEXT_U_FILE,
    NEXT_RU_DIAG,
    NEXT_R_RANK,
    NEXT_RD_DIAG,
    NEXT_D_FILE,
)

KNIGHT_NEXT_MOVES = (
    KNIGHT_LDD,
    KNIGHT_LLD,
    KNIGHT_LLU,
    KNIGHT_LUU,
    KNIGHT_RUU,
    KNIGHT_RRU,
    KNIGHT_RRD,
    KNIGHT_RDD,
)

BISHOP_NEXT_MOVES = (NEXT_LD_DIAG, NEXT_LU_DIAG, NEXT_RU_DIAG, NEXT_RD_DIAG)

ROOK_NEXT_MOVES = (NEXT_D_FILE, NEXT_L_RANK, NEXT_U_FILE, NEXT_R_RANK)


def single_index_from_double(file: int, rank: int) -> int:
    """Flat board index of the square at file and rank (both 1 to 8)."""
    return (file + 1) * TOTAL_FILES + rank + 1


def single_index_from_chars(file_char: str, rank_char: str) -> int:
    """Flat board index from characters such as 'e' and '4'."""
    return single_index_from_double(
        ord(file_char) - ord("a") + 1, ord(rank_char) - ord("1") + 1
    )


def _coordinate_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    files = [0] * BOARD_SIZE
    ranks = [0] * BOARD_SIZE
    for f in range(1, 9):
        for r in range(1, 9):
            loc = single_index_from_double(f, r)
            files[loc] = f
            ranks[loc] = r
    return tuple(files), tuple(ranks)


FILE_NUMB, RANK_NUMB = _coordinate_tables()


def file_number(loc: int) -> int:
    """File (1 to 8) of a board index; 0 on the border."""
    return FILE_NUMB[loc]


def rank_number(loc: int) -> int:
    """Rank (1 to 8) of a board index; 0 on the border."""
    return RANK_NUMB[loc]


def file_as_char(loc: int) -> str:
    """File letter ('a' to 'h') of a board index."""
    return chr(file_number(loc) + ord("a") - 1)


def rank_as_char(loc: int) -> str:
    """Rank digit ('1' to '8') of a board index."""
    return chr(rank_number(loc) + ord("0"))


def same_file(loc1: int, loc2: int) -> bool:
    return FILE_NUMB[loc1] == FILE_NUMB[loc2]


def is_on_rank(loc: int, rank: int) -> bool:
    return rank_number(loc) == rank


def square_name(loc: int) -> str:
    """Algebraic name of a square, such as 'e4'."""
    return file_as_char(loc) + rank_as_char(loc)


def other_color(color: int) -> Color:
    """The opposing color."""
    return Color.BLACK if color == Color.WHITE else Color.WHITE


def piece_sets(color: int) -> tuple[int, int]:
    """Masks (friendly, enemy) for the side to move."""
    if color == Color.WHITE:
        return WHITE_MASK, BLACK_MASK
    return BLACK_MASK, WHITE_MASK


def piece_code(piece: int) -> str:
    """Forsyth letter of a piece; raises ValueError for anything else."""
    try:
        return _PIECE_CODES[piece]
    except KeyError:
        raise ValueError(f"no piece code for value {piece:#x}") from None


WHITE_KING_HOME = single_index_from_chars("e", "1")
BLACK_KING_HOME = single_index_from_chars("e", "8")
WHITE_LEFT_ROOK_HOME = single_index_from_chars("a", "1")
WHITE_RIGHT_ROOK_HOME = single_index_from_chars("h", "1")
BLACK_LEFT_ROOK_HOME = single_index_from_chars("a", "8")
BLACK_RIGHT_ROOK_HOME = single_index_from_chars("h", "8")
WHITE_LEFT_KNIGHT_HOME = single_index_from_chars("b", "1")
WHITE_RIGHT_KNIGHT_HOME = single_index_from_chars("g", "1")
BLACK_LEFT_KNIGHT_HOME = single_index_from_chars("b", "8")
BLACK_RIGHT_KNIGHT_HOME = single_index_from_chars("g", "8")
WHITE_LEFT_BISHOP_HOME = single_index_from_chars("c", "1")
WHITE_RIGHT_BISHOP_HOME = single_index_from_chars("f", "1")
BLACK_LEFT_BISHOP_HOME = single_index_from_chars("c", "8")
BLACK_RIGHT_BISHOP_HOME = single_index_from_chars("f", "8")


# Piece-square tables.  Each is given per file (a to h), listing ranks 1 to 8.


def _expand(files: list[list[int]]) -> tuple[int, ...]:
    table = [0] * BOARD_SIZE
    for f, ranks in enumerate(files, start=1):
        for r, value in enumerate(ranks, start=1):
            table[single_index_from_double(f, r)] = value
    return tuple(table)


def _mirror_files(half: list[list[int]]) -> list[list[int]]:
    return half + half[::-1]


_PAWN_EDGE = [0, 100, 100, 100, 115, 200, 300, 0]
_PAWN_CENTRE = [0, 100, 100, 123, 123, 200, 300, 0]
_PAWN_FILES = _mirror_files([_PAWN_EDGE, _PAWN_EDGE, _PAWN_EDGE, _PAWN_CENTRE])

WHITE_PAWN_VALUES = _expand(_PAWN_FILES)
BLACK_PAWN_VALUES = _expand([ranks[::-1] for ranks in _PAWN_FILES])

KNIGHT_VALUES = _expand(
    _mirror_files(
        [
            [270, 290, 290, 290, 290, 290, 290, 270],
            [290, 300, 300, 300, 300, 300, 300, 290],
            [290, 300, 310, 310, 310, 310, 300, 290],
            [290, 300, 310, 320, 320, 310, 300, 290],
        ]
    )
)

BISHOP_VALUES = _expand(
    _mirror_files(
        [
            [305, 315, 315, 315, 315, 315, 315, 305],
            [315, 325, 325, 325, 325, 325, 325, 315],
            [315, 325, 335, 335, 335, 335, 325, 315],
            [315, 325, 335, 345, 345, 335, 325, 315],
        ]
    )
)

QUEEN_VALUES = _expand(
    _mirror_files(
        [
            [895, 895, 895, 895, 895, 895, 895, 895],
            [895, 900, 900, 900, 900, 900, 900, 895],
            [895, 900, 910, 910, 910, 910, 900, 895],
            [895, 900, 910, 920, 920, 910, 900, 895],
        ]
    )
)


@dataclass(slots=True)
class GenMove:
    """A generated move with its search value and attached lines."""

    from_loc: int
    to_loc: int
    val: int = 0
    continuation: list[GenMove] = field(default_factory=list)
    next_lev_moves: list[GenMove] = field(default_factory=list)

    @property
    def code(self) -> int:
        """Packed from/to squares, used to identify the move."""
        return (self.from_loc << 8) | self.to_loc

    def __str__(self) -> str:
        return f"{square_name(self.from_loc)}-{square_name(self.to_loc)}"