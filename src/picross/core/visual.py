from enum import Enum
from typing import List, Optional

from picross.schemas.nonogram import Cell
from picross.utils.config import settings


class CellVisual(str, Enum):
    FILLED = "filled"
    EMPTY = "empty"
    MARKED = "marked"
    FILLED_INCORRECT = "filled-incorrect"
    EMPTY_INCORRECT = "empty-incorrect"


GLYPH_UNREVEALED = "▢"
GLYPH_MARKED = "⊠"
GLYPH_FILLED = "⏹"
GLYPH_FILLED_INCORRECT = "▦"
GLYPH_EMPTY = "⊡"
GLYPH_EMPTY_INCORRECT = "⬚"

CELL_SEPARATOR = "|"
CELL_SLOT_WIDTH = 2


def classify(cell: Cell) -> CellVisual:
    if not cell.revealed:
        return CellVisual.MARKED if cell.marked else CellVisual.EMPTY
    if cell.filled:
        return CellVisual.FILLED if cell.guessed_filled else CellVisual.FILLED_INCORRECT
    return CellVisual.EMPTY_INCORRECT if cell.guessed_filled else CellVisual.EMPTY


def glyph(cell: Cell) -> str:
    """Single character for a cell; unlike `classify`, tells unrevealed from revealed-empty."""
    if not cell.revealed:
        return GLYPH_MARKED if cell.marked else GLYPH_UNREVEALED
    if cell.filled:
        return GLYPH_FILLED if cell.guessed_filled else GLYPH_FILLED_INCORRECT
    return GLYPH_EMPTY_INCORRECT if cell.guessed_filled else GLYPH_EMPTY


def ends_group(col: int, cols: int, group_size: int) -> bool:
    return group_size > 0 and (col + 1) % group_size == 0 and col != cols - 1


def hint_width(board) -> int:
    widest = 1
    for r in range(board.rows):
        for h in board.get_row_hints(r):
            widest = max(widest, len(str(h)))
    for c in range(board.cols):
        for h in board.get_col_hints(c):
            widest = max(widest, len(str(h)))
    return widest


def render_board(board, group_size: Optional[int] = None) -> str:
    """
    Renders the board with its hint gutters as plain text.

    Column clues sit above the grid, aligned to the bottom; row clues sit to
    the left of each row, aligned to the right. An extra separator follows
    every `group_size` columns.
    """
    if group_size is None:
        group_size = settings.GROUP_SIZE

    width = hint_width(board)
    row_slot = width + 1
    longest_row = board.get_longest_row_hint_length()
    longest_col = board.get_longest_col_hint_length()

    lines: List[str] = []

    for i in range(longest_col):
        line = " " * (longest_row * row_slot + 1)
        for c in range(board.cols):
            hints = board.get_col_hints(c)
            offset = i - (longest_col - len(hints))
            if offset >= 0:
                line += str(hints[offset]).ljust(CELL_SLOT_WIDTH)
            else:
                line += " " * CELL_SLOT_WIDTH
            if ends_group(c, board.cols, group_size):
                line += " "
        lines.append(line.rstrip())

    for r in range(board.rows):
        hints = board.get_row_hints(r)
        line = ""
        for i in range(longest_row):
            offset = i - (longest_row - len(hints))
            if offset >= 0:
                line += f"{hints[offset]:>{width}} "
            else:
                line += " " * row_slot
        line += CELL_SEPARATOR
        for c in range(board.cols):
            line += glyph(board.cell(r, c)) + CELL_SEPARATOR
            if ends_group(c, board.cols, group_size):
                line += CELL_SEPARATOR
        lines.append(line)

    return "\n".join(lines)
