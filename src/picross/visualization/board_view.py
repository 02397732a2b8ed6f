from rich.table import Table
from rich.text import Text

from picross.core.board import Board
from picross.core.visual import CellVisual, glyph, ends_group
from picross.utils.config import settings

VISUAL_STYLES = {
    CellVisual.FILLED: "bold green",
    CellVisual.EMPTY: "dim",
    CellVisual.MARKED: "yellow",
    CellVisual.FILLED_INCORRECT: "bold red",
    CellVisual.EMPTY_INCORRECT: "red",
}

HINT_STYLE = "cyan"
HEADER_STYLE = "bold cyan"


def column_header(board: Board, col: int) -> Text:
    hints = board.get_col_hints(col)
    pad = board.get_longest_col_hint_length() - len(hints)
    lines = [""] * pad + [str(h) for h in hints]
    return Text("\n".join(lines), style=HEADER_STYLE)


def row_gutter(board: Board, row: int) -> Text:
    hints = board.get_row_hints(row)
    return Text(" ".join(str(h) for h in hints), style=HINT_STYLE)


def build_board_table(board: Board, title: str = "", group_size=None) -> Table:
    """Rich table of the board: a clue gutter column plus one styled column per board column."""
    if group_size is None:
        group_size = settings.GROUP_SIZE

    table = Table(title=title or None, show_header=True, show_lines=False, box=None, pad_edge=False)
    table.add_column("", justify="right", style=HINT_STYLE, no_wrap=True)
    for c in range(board.cols):
        table.add_column(column_header(board, c), justify="center", vertical="bottom", no_wrap=True)
        if ends_group(c, board.cols, group_size):
            table.add_column("", width=1)

    for r in range(board.rows):
        cells = []
        for c in range(board.cols):
            visual = board.cell_visual(r, c)
            cells.append(Text(glyph(board.cell(r, c)), style=VISUAL_STYLES[visual]))
            if ends_group(c, board.cols, group_size):
                cells.append(Text(""))
        table.add_row(row_gutter(board, r), *cells)

    return table
