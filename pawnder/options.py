"""Command-line options of the chess program."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_FLAGS = {
    "-moves_generated": "moves_generated",
    "-moves_and_values": "moves_and_values",
    "-evaluator_call_count": "evaluator_call_count",
    "-to_forsyth_debug": "to_forsyth_debug",
    "-check_data_after_move": "check_data_after_move",
    "-expected_line_of_play": "expected_line_of_play",
    "-print_detailed_timings": "print_detailed_timings",
    "-xboard": "winboard",
    "-winboard": "winboard",
}


class UsageError(ValueError):
    """Raised for a command-line argument that is not understood."""


@dataclass
class Options:
    """Settings chosen on the command line."""

    moves_generated: bool = False
    moves_and_values: bool = False
    evaluator_call_count: bool = False
    to_forsyth_debug: bool = False
    check_data_after_move: bool = False
    expected_line_of_play: bool = False
    print_detailed_timings: bool = False
    winboard: bool = False
    show_help: bool = False


def usage_text() -> str:
    """The usage message."""
    return (
        "Usage: pawnder [-xboard, -winboard] [-moves_generated] [-moves_and_values]\n"
        "         [-evaluator_call_count] [-to_forsyth_debug] [-check_data_after_move]\n"
        "         [-expected_line_of_play] [-print_detailed_timings]\n"
    )


def parse_arguments(argv: Sequence[str]) -> Options:
    """Options from the arguments that follow the program name.

    '-help' sets ``show_help`` and stops processing; any later arguments are
    ignored.  An unknown argument raises UsageError.
    """
    options = Options()
    for arg in argv:
        if arg == "-help":
            options.show_help = True
            break
        name = _FLAGS.get(arg)
        if name is None:
            raise UsageError(f"Invalid command line argument: {arg}")
        setattr(options, name, True)
    return options