"""Parsing of moves typed by the user, such as 'e2e4' or 'E2-E4'."""

from __future__ import annotations

from .board import single_index_from_chars


class MoveInputError(ValueError):
    """Raised when typed text is not a well-formed move."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Bad input, try again: {text!r}")
        self.text = text


def _file_letter(char: str) -> str | None:
    if "A" <= char <= "H":
        char = char.lower()
    return char if "a" <= char <= "h" else None


def _rank_digit(char: str) -> str | None:
    return char if "1" <= char <= "8" else None


def parse_move_input(text: str) -> tuple[int, int]:
    """Board indexes (from_loc, to_loc) of a typed move.

    Both 'e2e4' and forms with a separator such as 'e2-e4' are accepted, and
    file letters may be upper case.  The text must be four or five
    characters long.  Legality on the board is not checked here.
    """
    if not 4 <= len(text) <= 5:
        raise MoveInputError(text)
    dest = 2 if _file_letter(text[2]) is not None else 3
    if dest + 1 >= len(text):
        raise MoveInputError(text)
    from_file = _file_letter(text[0])
    from_rank = _rank_digit(text[1])
    to_file = _file_letter(text[dest])
    to_rank = _rank_digit(text[dest + 1])
    if None in (from_file, from_rank, to_file, to_rank):
        raise MoveInputError(text)
    return (
        single_index_from_chars(from_file, from_rank),
        single_index_from_chars(to_file, to_rank),
    )