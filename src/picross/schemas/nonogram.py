from typing import List

import msgspec


class NonogramHints(msgspec.Struct):
    row_hints: List[List[int]]
    col_hints: List[List[int]]
    longest_row_hint: int = 0
    longest_col_hint: int = 0


class Cell(msgspec.Struct):
    """State of one board position.

    `guessed_filled` is only meaningful while `revealed` is set.
    """
    filled: bool = False
    marked: bool = False
    revealed: bool = False
    guessed_filled: bool = False
