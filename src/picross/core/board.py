from typing import Iterator, List, Sequence, Tuple

from msgspec import structs
import numpy as np

from picross.core.errors import IndexOutOfRange, InvalidDimension, InvalidPattern
from picross.core.hints import compute_hints
from picross.core.visual import CellVisual, classify, render_board
from picross.schemas.nonogram import Cell, NonogramHints

FILLED_CHARS = frozenset("1#Xx")
EMPTY_CHARS = frozenset("0.- ")


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _check_line(axis: str, index, size: int) -> int:
    if not _is_integer(index) or not 0 <= index < size:
        raise IndexOutOfRange(axis, index, size)
    return int(index)


def _pattern_to_array(pattern) -> np.ndarray:
    if isinstance(pattern, str):
        pattern = [pattern]
    rows = list(pattern)
    if not rows:
        raise InvalidDimension("Pattern must contain at least one row.")

    if all(isinstance(row, str) for row in rows):
        if len({len(row) for row in rows}) != 1:
            raise InvalidDimension("Pattern rows must all have the same length.")
        grid = []
        for r, row in enumerate(rows):
            line = []
            for c, ch in enumerate(row):
                if ch in FILLED_CHARS:
                    line.append(True)
                elif ch in EMPTY_CHARS:
                    line.append(False)
                else:
                    raise InvalidPattern(f"Unknown pattern character {ch!r} at ({r}, {c}).")
            grid.append(line)
        return np.array(grid, dtype=bool).reshape(len(rows), len(rows[0]))

    try:
        arr = np.asarray(rows)
    except ValueError as e:
        raise InvalidDimension(f"Pattern rows must all have the same length: {e}") from e
    if arr.ndim != 2:
        raise InvalidDimension(f"Pattern must be two-dimensional, got {arr.ndim} dimension(s).")
    return arr.astype(bool)


class Board:
    """
    A Picross board: a fixed grid of cells and the clues derived from them.

    Each cell carries four independent facets: its true value, a player mark,
    whether it has been revealed, and the player's guess. The guess is only
    meaningful while the cell is revealed, and un-revealing a cell discards it.

    Clues are not tracked automatically. They reflect the true values as they
    were at the last `calculate_hints` call, so callers must recompute after
    editing true values. Until the first call every clue is empty.
    """

    def __init__(self, rows: int, cols: int):
        if not _is_integer(rows) or not _is_integer(cols):
            raise InvalidDimension(f"Board dimensions must be integers, got {rows!r}x{cols!r}.")
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f"Board dimensions must be positive, got {rows}x{cols}.")

        self._rows = int(rows)
        self._cols = int(cols)
        self._cells: List[Cell] = [Cell() for _ in range(self._rows * self._cols)]

        self._row_hints: List[List[int]] = [[] for _ in range(self._rows)]
        self._col_hints: List[List[int]] = [[] for _ in range(self._cols)]
        self._longest_row_hint = 0
        self._longest_col_hint = 0

    @classmethod
    def from_pattern(cls, pattern) -> "Board":
        """Builds a board whose true values follow `pattern`; clues are not computed."""
        arr = _pattern_to_array(pattern)
        rows, cols = arr.shape
        board = cls(rows, cols)
        for r, c in zip(*np.nonzero(arr)):
            board.fill_cell(int(r), int(c), True)
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _index(self, row: int, col: int) -> int:
        row = _check_line("row", row, self._rows)
        col = _check_line("column", col, self._cols)
        return row * self._cols + col

    def _cell(self, row: int, col: int) -> Cell:
        return self._cells[self._index(row, col)]

    def cell(self, row: int, col: int) -> Cell:
        """Returns a snapshot of the cell; changing it does not affect the board."""
        return structs.replace(self._cell(row, col))

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for i, cell in enumerate(self._cells):
            yield i // self._cols, i % self._cols, structs.replace(cell)

    # Readers

    def is_filled(self, row: int, col: int) -> bool:
        return self._cell(row, col).filled

    def is_marked(self, row: int, col: int) -> bool:
        return self._cell(row, col).marked

    def is_revealed(self, row: int, col: int) -> bool:
        return self._cell(row, col).revealed

    def is_guessed_filled(self, row: int, col: int) -> bool:
        """Only meaningful when `is_revealed` is true for the same cell."""
        return self._cell(row, col).guessed_filled

    # Mutators

    def fill_cell(self, row: int, col: int, filled: bool) -> None:
        self._cell(row, col).filled = bool(filled)

    def mark_cell(self, row: int, col: int, marked: bool) -> None:
        """Sets the player mark; revealed cells are not excluded."""
        self._cell(row, col).marked = bool(marked)

    def reveal_cell(self, row: int, col: int, revealed: bool) -> None:
        """Sets the revealed state. Hiding a cell again also resets its guess to empty."""
        cell = self._cell(row, col)
        cell.revealed = bool(revealed)
        if not revealed:
            cell.guessed_filled = False

    def guess_cell(self, row: int, col: int, filled: bool) -> None:
        """Records the player's guess and reveals the cell."""
        cell = self._cell(row, col)
        cell.guessed_filled = bool(filled)
        cell.revealed = True

    # Clues

    def calculate_hints(self) -> None:
        result = compute_hints(self._rows, self._cols, self.is_filled)
        self._row_hints = result.row_hints
        self._col_hints = result.col_hints
        self._longest_row_hint = result.longest_row_hint
        self._longest_col_hint = result.longest_col_hint

    def get_row_hints(self, row: int) -> List[int]:
        return list(self._row_hints[_check_line("row", row, self._rows)])

    def get_col_hints(self, col: int) -> List[int]:
        return list(self._col_hints[_check_line("column", col, self._cols)])

    def get_longest_row_hint_length(self) -> int:
        return self._longest_row_hint

    def get_longest_col_hint_length(self) -> int:
        return self._longest_col_hint

    def hints(self) -> NonogramHints:
        return NonogramHints(
            row_hints=[list(h) for h in self._row_hints],
            col_hints=[list(h) for h in self._col_hints],
            longest_row_hint=self._longest_row_hint,
            longest_col_hint=self._longest_col_hint,
        )

    # Presentation

    def cell_visual(self, row: int, col: int) -> CellVisual:
        return classify(self._cell(row, col))

    def render(self, group_size=None) -> str:
        return render_board(self, group_size=group_size)

    def __str__(self) -> str:
        return render_board(self)

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, cols={self._cols})"


def reveal_all(board: Board, cells: Sequence[Tuple[int, int]] = ()) -> None:
    """Guesses the listed cells (or every cell) with their true values."""
    targets = cells or [(r, c) for r in range(board.rows) for c in range(board.cols)]
    for r, c in targets:
        board.guess_cell(r, c, board.is_filled(r, c))
