"""Console messages shown to the player or to a chess GUI."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from .board import Color, file_number, rank_number

LIST_FILE_PREFIX = "chess_lst."
PROGRESS_INTERVAL = 10


def _cdivmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Quotient and remainder with the quotient truncated toward zero."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def _minutes_seconds(seconds: int) -> str:
    minutes, rest = _cdivmod(seconds, 60)
    return f"{minutes} min {rest} sec."


class Console:
    """Writes game messages to a text stream.

    In GUI mode (``winboard``) the chatty messages are suppressed and moves
    are written in the terse form a chess GUI expects.
    """

    def __init__(self, out: TextIO, winboard: bool = False) -> None:
        self.out = out
        self.winboard = winboard
        self._progress_calls = 0

    def _write(self, text: str, *, flush: bool = False) -> None:
        self.out.write(text)
        if flush:
            self.out.flush()

    def _chat(self, text: str, *, flush: bool = False) -> None:
        if not self.winboard:
            self._write(text, flush=flush)

    def thinking(self) -> None:
        self._chat("Please wait, I'm thinking...\n", flush=True)

    def newline(self) -> None:
        if not self.winboard:
            self.out.write("\n")
        self.out.flush()

    def move_prefix(self, move_number: int) -> None:
        if self.winboard:
            self._write(f"{move_number}. ... ", flush=True)
        else:
            self._write(f"Move #: {move_number}  My move is ", flush=True)

    def _square(self, loc: int) -> str:
        letter = chr(ord("A") + file_number(loc) - 1)
        if self.winboard:
            letter = letter.lower()
        return f"{letter}{rank_number(loc)}"

    def computer_move(
        self, move_number: int, from_loc: int, to_loc: int, taken: bool, value: int
    ) -> None:
        """Announce the move the computer has chosen."""
        self.move_prefix(move_number)
        if self.winboard:
            text = f"{self._square(from_loc)}{self._square(to_loc)}\n"
        else:
            separator = "x" if taken else "-"
            text = (
                f"{self._square(from_loc)}{separator}{self._square(to_loc)}"
                f" with a value of {value}"
            )
        self._write(text, flush=True)

    def time_report(
        self,
        color: Color,
        elapsed: int,
        total_time: int,
        time_left: int,
        fischer: bool,
    ) -> None:
        """Report the time a side took and its clock."""
        if not self.winboard:
            side = "White" if color == Color.WHITE else "Black"
            if fischer:
                text = (
                    f"\n{side} Time: {elapsed}    Available: "
                    f"{_minutes_seconds(time_left)}\n"
                )
            else:
                text = (
                    f"\n{side} Time: {elapsed}    Total time: "
                    f"{_minutes_seconds(total_time)}\n"
                )
            self.out.write(text)
        self.out.flush()

    def request_move(self) -> None:
        self._chat("What is your move? (X for a command or quit) ")

    def bad_input(self) -> None:
        self._chat("Bad input, try again.\n\n")

    def echo_move_input(self, move_number: int, text: str) -> None:
        if self.winboard:
            self._write(f"{move_number}. {text}\n", flush=True)

    def check(self) -> None:
        self._chat(" Check!")

    def checkmate(self) -> None:
        self._chat("Checkmate!\n")

    def draw_50(self) -> None:
        self._chat("Draw by 50 move rule.\n")

    def draw_repetition(self) -> None:
        self._chat("Draw by repetition.\n")

    def stalemate(self) -> None:
        self._chat("Stalemate.\n")

    def reading_library(self) -> None:
        self._chat("Reading opening library", flush=True)

    def note_progress(self) -> None:
        """Write a dot for every tenth opening move processed."""
        if self.winboard:
            return
        self._progress_calls += 1
        if self._progress_calls == PROGRESS_INTERVAL:
            self._write(".", flush=True)
            self._progress_calls = 0


def unique_list_file_name(exists: Callable[[str], bool]) -> str:
    """First name of the form chess_lst.N, counting from 1, that is unused."""
    count = 1
    while exists(f"{LIST_FILE_PREFIX}{count}"):
        count += 1
    return f"{LIST_FILE_PREFIX}{count}"