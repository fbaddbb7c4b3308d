# pawnder

Parts of a small alpha-beta chess engine, each usable on its own:

- `pawnder.board` – the 12×12 padded board used for move generation.
  Squares are single integer indices, with helpers such as
  `single_index_from_double`, `single_index_from_chars`, `file_number`,
  `rank_number`, `file_as_char`, `rank_as_char`, `same_file`, `is_on_rank`,
  `square_name`, `other_color`, `piece_sets` and `piece_code`. It defines the
  piece bit values (`WPAWN` … `BKING`), direction offsets, piece-square
  tables, the `Color` enum and the `GenMove` record for a generated move.
- `pawnder.hashboard` – `HashBoard`, a packed form of a position (four bits
  per square in sixteen 16-bit words, plus the side to move) that can be
  compared, copied, checked against a full board with `consistent_with`, and
  turned into a bucket number with `hashvalue()`. `to_hash_piece` converts a
  board piece to its 4-bit number.
- `pawnder.hashtable` – `HashTable`, a transposition table holding at most
  `capacity` positions (60000 by default). `add_to_table` stores a value,
  search depth and alpha-beta bound and returns `False` once the table is
  full; `check_table` returns the stored value or `None`; `clear_table`
  empties it and returns how many buckets were in use.
- `pawnder.killer` – `KillerTable`, which counts killer moves for levels
  0 to 19 (up to ten per level, most frequent first) and answers with
  `is_killer` whether a move is among the five most frequent.
  `format_killers` lists them as text.
- `pawnder.openbook` – `read_book_entries`, which reads an opening book file
  into `BookEntry` records, and `OpeningBook`, which maps a position code
  to weighted moves and picks one at random by weight.
- `pawnder.timecontrol` – `TimeControl`, which budgets thinking time per
  move for classic (moves per period) or Fischer (increment) timing and
  keeps both clocks, and `parse_time_adjustment` for inputs such as `+30`.
- `pawnder.moveinput` – `parse_move_input` for moves typed as `e2e4`,
  `E2E4` or `e2-e4`; malformed text raises `MoveInputError`.
- `pawnder.messages` – `Console`, which writes the engine's messages to a
  text stream either in plain interactive form or in the terse form an
  xboard/WinBoard interface expects, and `unique_list_file_name` for
  choosing an unused `chess_lst.N` file name.
- `pawnder.options` – `parse_arguments` and `usage_text` for the engine's
  command-line switches.

The package needs nothing outside the standard library and supports
Python 3.10 and later.

## Squares

```python
from pawnder.board import single_index_from_chars, square_name, file_number, rank_number

e4 = single_index_from_chars("e", "4")
print(file_number(e4), rank_number(e4))   # 5 4
print(square_name(e4))                    # e4
```

## Opening book files

A book is plain text, one move per line:

```
# comment lines start with '#'
1 w e2e4 5
1 b e7e5 5
2 w g1f3 5
```

Each line holds the move number, the side that moves (`w` or `b`), the move
as four characters and a weight from 0 to 10. `read_book_entries` yields one
`BookEntry` per line and raises `OpeningBookError` for a malformed entry.

```python
from pawnder.openbook import read_book_entries

with open("openlibr.bok") as stream:
    for entry in read_book_entries(stream):
        print(entry.move_number, entry.color, entry.from_loc, entry.to_loc, entry.probability)
```

`OpeningBook` is keyed by whatever string identifies a position:

```python
import random
from pawnder.board import single_index_from_chars as sq
from pawnder.openbook import OpeningBook

book = OpeningBook()
book.add_opening("start", sq("e", "2"), sq("e", "4"), 9)
book.add_opening("start", sq("d", "2"), sq("d", "4"), 1)
move = book.check_library("start", random.Random(1))
print(move)   # e2-e4 nine times in ten, d2-d4 otherwise
```

A move already stored for a position keeps its first weight, and a position
whose weights add up to 0 gives `None`.

## Command-line switches

`parse_arguments` accepts `-xboard`/`-winboard`, `-moves_generated`,
`-moves_and_values`, `-evaluator_call_count`, `-to_forsyth_debug`,
`-check_data_after_move`, `-expected_line_of_play`,
`-print_detailed_timings` and `-help` (which sets `show_help` and ignores the
rest); anything else raises `UsageError`. `usage_text()` returns the usage
summary.

## What the package does not do

There is no move generator, position evaluation, search or game loop here,
and no command to start a game. Nothing computes a position code from a
board, so `OpeningBook` is not filled from a book file automatically:
`read_book_entries` only reads the entries, and a caller supplies the codes
to `add_opening`. The time control, messages and options are the pieces a
playing program would use; the program itself is not included.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.