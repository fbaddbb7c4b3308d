import pytest

from pawnder.board import GenMove, single_index_from_chars
from pawnder.killer import KillerTable


def mv(text):
    return GenMove(
        single_index_from_chars(text[0], text[1]),
        single_index_from_chars(text[2], text[3]),
    )


def test_saved_move_is_killer_on_its_level_only():
    killers = KillerTable()
    killers.save_killer(2, mv("e2e4"))
    assert killers.is_killer(2, mv("e2e4"))
    assert not killers.is_killer(3, mv("e2e4"))
    assert not killers.is_killer(2, mv("d2d4"))


def test_more_frequent_moves_first():
    killers = KillerTable()
    killers.save_killer(1, mv("e2e4"))
    killers.save_killer(1, mv("d2d4"))
    killers.save_killer(1, mv("d2d4"))
    text = killers.format_killers()
    assert text.index("d2-d4 2") < text.index("e2-e4 1")


def test_only_first_five_are_searched():
    killers = KillerTable()
    names = ["a2a3", "b2b3", "c2c3", "d2d3", "e2e3", "f2f3"]
    for name in names:
        killers.save_killer(4, mv(name))
    assert all(killers.is_killer(4, mv(n)) for n in names[:5])
    assert not killers.is_killer(4, mv("f2f3"))


def test_promotion_into_searched_range():
    killers = KillerTable()
    names = ["a2a3", "b2b3", "c2c3", "d2d3", "e2e3", "f2f3"]
    for name in names:
        killers.save_killer(4, mv(name))
    killers.save_killer(4, mv("f2f3"))
    assert killers.is_killer(4, mv("f2f3"))
    assert killers.format_killers().startswith("Killers for level 4  f2-f3 2")


def test_full_level_ignores_new_moves():
    killers = KillerTable()
    starts = ["a2a3", "b2b3", "c2c3", "d2d3", "e2e3",
              "f2f3", "g2g3", "h2h3", "a7a6", "b7b6"]
    for name in starts:
        killers.save_killer(1, mv(name))
    for _ in range(3):
        killers.save_killer(1, mv("c7c6"))
    assert not killers.is_killer(1, mv("c7c6"))


def test_clear_killers():
    killers = KillerTable()
    killers.save_killer(5, mv("g1f3"))
    killers.clear_killers()
    assert not killers.is_killer(5, mv("g1f3"))
    assert killers.format_killers() == ""


def test_format_lists_each_level():
    killers = KillerTable()
    killers.save_killer(1, mv("e2e4"))
    killers.save_killer(3, mv("g8f6"))
    lines = killers.format_killers().splitlines()
    assert lines == [
        "Killers for level 1  e2-e4 1  ",
        "Killers for level 3  g8-f6 1  ",
    ]


def test_bad_level_raises():
    with pytest.raises(ValueError):
        KillerTable().save_killer(20, mv("e2e4"))