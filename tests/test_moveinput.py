import pytest

from pawnder.board import single_index_from_chars, square_name
from pawnder.moveinput import MoveInputError, parse_move_input


def test_plain_move():
    assert parse_move_input("e2e4") == (
        single_index_from_chars("e", "2"),
        single_index_from_chars("e", "4"),
    )


@pytest.mark.parametrize("text", ["E2E4", "e2-e4", "E2-E4", "e2xe4", "e2e4q"])
def test_equivalent_spellings(text):
    assert parse_move_input(text) == parse_move_input("e2e4")


@pytest.mark.parametrize("move", ["a1h8", "h8a1", "b1c3", "g7g5", "d8d1"])
def test_round_trip_through_square_names(move):
    from_loc, to_loc = parse_move_input(move)
    assert square_name(from_loc) + square_name(to_loc) == move


def test_separated_form_round_trip():
    from_loc, to_loc = parse_move_input("G1-F3")
    assert (square_name(from_loc), square_name(to_loc)) == ("g1", "f3")


@pytest.mark.parametrize(
    "text",
    ["", "e2e", "e2-e4-x", "i2e4", "e9e4", "e2e0", "e2-e9", "e2-i4", "quit", "e2--4", "e2-4e"],
)
def test_rejects_malformed_input(text):
    with pytest.raises(MoveInputError) as info:
        parse_move_input(text)
    assert info.value.text == text


def test_error_is_value_error():
    with pytest.raises(ValueError, match="Bad input"):
        parse_move_input("zz")