import io
import random

import pytest

from pawnder.board import Color, GenMove, single_index_from_chars
from pawnder.openbook import (
    BookEntry,
    OpeningBook,
    OpeningBookError,
    read_book_entries,
)

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"


def sq(name):
    return single_index_from_chars(name[0], name[1])


def entries(text):
    return list(read_book_entries(io.StringIO(text)))


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


def test_reads_simple_entries():
    result = entries("1 w e2e4 5\n1 b e7e5 3\n")
    assert result == [
        BookEntry(1, Color.WHITE, sq("e2"), sq("e4"), 5),
        BookEntry(1, Color.BLACK, sq("e7"), sq("e5"), 3),
    ]


def test_comments_and_whitespace_are_skipped():
    text = "# a comment\n   \n  # another\n2 W d2d4 7\n# trailing comment"
    assert entries(text) == [BookEntry(2, Color.WHITE, sq("d2"), sq("d4"), 7)]


def test_uppercase_files_and_colour_letters_accepted():
    result = entries("3 B G8F6 1")
    assert result == [BookEntry(3, Color.BLACK, sq("g8"), sq("f6"), 1)]


def test_colour_may_follow_number_directly():
    assert entries("4w g1f3 2") == [BookEntry(4, Color.WHITE, sq("g1"), sq("f3"), 2)]


def test_empty_and_comment_only_files_give_nothing():
    assert entries("") == []
    assert entries("# nothing here\n\n") == []


def test_probability_bounds_are_inclusive():
    result = entries("1 w e2e4 0\n1 w d2d4 10\n")
    assert [e.probability for e in result] == [0, 10]


@pytest.mark.parametrize(
    "text",
    [
        "1 w e2e4 11",
        "1 w e2e4 -1",
        "0 w e2e4 5",
        "1 x e2e4 5",
        "1 w i2e4 5",
        "1 w e9e4 5",
        "1 w e2-e4 5",
        "1 w e2e4",
        "1 w e2",
        "12",
        "w e2e4 5",
    ],
)
def test_malformed_entries_raise(text):
    with pytest.raises(OpeningBookError):
        entries(text)


def test_error_is_a_value_error_and_names_entry():
    with pytest.raises(ValueError, match="z2e4"):
        entries("1 w z2e4 5")


def test_entries_before_error_are_yielded():
    gen = read_book_entries(io.StringIO("1 w e2e4 5\n1 q e7e5 5\n"))
    first = next(gen)
    assert first.from_loc == sq("e2")
    with pytest.raises(OpeningBookError):
        next(gen)


def test_add_opening_new_moves_go_first():
    book = OpeningBook()
    assert book.add_opening(START, sq("e2"), sq("e4"), 5)
    assert book.add_opening(START, sq("d2"), sq("d4"), 3)
    assert book.moves_for(START) == [
        (sq("d2"), sq("d4"), 3),
        (sq("e2"), sq("e4"), 5),
    ]
    assert len(book) == 1
    assert START in book


def test_duplicate_move_keeps_first_weight():
    book = OpeningBook()
    book.add_opening(START, sq("e2"), sq("e4"), 5)
    assert book.add_opening(START, sq("e2"), sq("e4"), 9) is False
    assert book.moves_for(START) == [(sq("e2"), sq("e4"), 5)]


def test_negative_probability_rejected():
    with pytest.raises(ValueError):
        OpeningBook().add_opening(START, sq("e2"), sq("e4"), -1)


def test_moves_for_unknown_position_is_empty():
    assert OpeningBook().moves_for("unknown") == []


def test_moves_for_returns_a_copy():
    book = OpeningBook()
    book.add_opening(START, sq("e2"), sq("e4"), 5)
    book.moves_for(START).clear()
    assert book.moves_for(START) == [(sq("e2"), sq("e4"), 5)]


def test_check_library_unknown_position():
    assert OpeningBook().check_library("unknown", FixedRng(0)) is None


def test_check_library_all_zero_weights():
    book = OpeningBook()
    book.add_opening(START, sq("e2"), sq("e4"), 0)
    book.add_opening(START, sq("d2"), sq("d4"), 0)
    rng = FixedRng(0)
    assert book.check_library(START, rng) is None
    assert rng.calls == []


def test_check_library_weighted_choice():
    book = OpeningBook()
    book.add_opening(START, sq("e2"), sq("e4"), 2)
    book.add_opening(START, sq("d2"), sq("d4"), 3)
    # List order is d2d4 (weight 3) then e2e4 (weight 2).
    low = FixedRng(0)
    assert book.check_library(START, low) == GenMove(sq("d2"), sq("d4"), 0)
    assert low.calls == [5]
    assert book.check_library(START, FixedRng(2)) == GenMove(sq("d2"), sq("d4"), 0)
    assert book.check_library(START, FixedRng(3)) == GenMove(sq("e2"), sq("e4"), 0)
    assert book.check_library(START, FixedRng(4)) == GenMove(sq("e2"), sq("e4"), 0)


def test_zero_weight_move_never_chosen():
    book = OpeningBook()
    book.add_opening(START, sq("e2"), sq("e4"), 4)
    book.add_opening(START, sq("a2"), sq("a3"), 0)
    book.add_opening(START, sq("d2"), sq("d4"), 4)
    rng = random.Random(7)
    chosen = {
        (m.from_loc, m.to_loc) for m in (book.check_library(START, rng) for _ in range(200))
    }
    assert chosen == {(sq("e2"), sq("e4")), (sq("d2"), sq("d4"))}


def test_book_built_from_entries():
    text = "1 w e2e4 5\n1 w d2d4 3\n1 w e2e4 1\n"
    book = OpeningBook()
    for entry in entries(text):
        book.add_opening(START, entry.from_loc, entry.to_loc, entry.probability)
    assert book.moves_for(START) == [
        (sq("d2"), sq("d4"), 3),
        (sq("e2"), sq("e4"), 5),
    ]