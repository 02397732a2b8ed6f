from typing import Callable, List

from picross.schemas.nonogram import NonogramHints


def compute_hints(rows: int, cols: int, is_filled: Callable[[int, int], bool]) -> NonogramHints:
    """
    Derives row and column clues from the true values of a grid.

    Walks the grid once in row-major order, keeping one running count for the
    current row and one per column. A count is pushed onto its line's clue when
    an empty cell interrupts it; row counts are flushed at the end of every row
    and column counts after the final row. Lines without filled cells get an
    empty clue.

    Args:
        rows: Number of rows in the grid.
        cols: Number of columns in the grid.
        is_filled: Reader for the true value at (row, col).

    Returns:
        The clues for every row and column together with the longest clue
        length on each axis.
    """
    row_hints: List[List[int]] = [[] for _ in range(rows)]
    col_hints: List[List[int]] = [[] for _ in range(cols)]
    longest_row = 0
    longest_col = 0

    col_runs = [0] * cols

    for r in range(rows):
        row_run = 0
        for c in range(cols):
            if is_filled(r, c):
                row_run += 1
                col_runs[c] += 1
                continue

            if row_run > 0:
                row_hints[r].append(row_run)
                row_run = 0
            if col_runs[c] > 0:
                col_hints[c].append(col_runs[c])
                col_runs[c] = 0

        if row_run > 0:
            row_hints[r].append(row_run)
        longest_row = max(longest_row, len(row_hints[r]))

    for c in range(cols):
        if col_runs[c] > 0:
            col_hints[c].append(col_runs[c])
        longest_col = max(longest_col, len(col_hints[c]))

    return NonogramHints(
        row_hints=row_hints,
        col_hints=col_hints,
        longest_row_hint=longest_row,
        longest_col_hint=longest_col,
    )
