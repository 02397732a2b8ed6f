import sys
from typing import Annotated, List, NoReturn

import msgspec
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from picross.core.board import Board, reveal_all
from picross.core.errors import PicrossError
from picross.utils.config import settings
from picross.visualization.board_view import build_board_table

app = typer.Typer(help="Picross: nonogram boards and their clues.")
console = Console()

CYAN_STYLE = "cyan"
GREEN_STYLE = "green"
RED_STYLE = "red"
BOLD_STYLE = "bold"
DIM_STYLE = "dim"

PANEL_BORDER_STYLE = "cyan"

# Cells filled by the bootstrap demo, in the order they are authored
DEMO_FILLED_CELLS = [(0, 3), (0, 1), (0, 2), (1, 0), (1, 4), (2, 0)]

PATTERN_HELP = "Board rows, one argument per row: 1/#/X for filled, 0/./- for empty"


def fail(error: Exception) -> NoReturn:
    console.print(f"[{BOLD_STYLE}{RED_STYLE}]Board Error:[/{BOLD_STYLE}{RED_STYLE}]")
    console.print(f"[{RED_STYLE}]» {escape(str(error))}[/{RED_STYLE}]", highlight=False)
    sys.exit(1)


def show_board(board: Board, title: str, plain: bool):
    if plain or settings.PLAIN_OUTPUT:
        console.print(f"[{BOLD_STYLE}]{title}[/{BOLD_STYLE}]")
        console.print(str(board), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(build_board_table(board, title=title))


def format_hints(hints: List[List[int]]) -> str:
    return ", ".join("[" + " ".join(str(h) for h in line) + "]" for line in hints)


def build_demo_board(rows: int, cols: int) -> Board:
    board = Board(rows, cols)
    for r, c in DEMO_FILLED_CELLS:
        board.fill_cell(r, c, True)
    return board


@app.command()
def demo(
    rows: int = typer.Option(settings.DEFAULT_ROWS, help="Number of board rows"),
    cols: int = typer.Option(settings.DEFAULT_COLS, help="Number of board columns"),
    plain: bool = typer.Option(False, help="Print plain text instead of a table"),
):
    try:
        board = Board(rows, cols)
        show_board(board, "Blank board", plain)
        board = build_demo_board(rows, cols)
        board.calculate_hints()
    except PicrossError as e:
        fail(e)

    show_board(board, f"Authored board ({rows}x{cols})", plain)


@app.command()
def hints(
    pattern: Annotated[List[str], typer.Argument(help=PATTERN_HELP)],
    as_json: bool = typer.Option(False, "--json", help="Emit the clues as JSON"),
):
    try:
        board = Board.from_pattern(pattern)
    except PicrossError as e:
        fail(e)

    board.calculate_hints()
    result = board.hints()

    if as_json:
        typer.echo(msgspec.json.encode(result).decode())
        return

    console.print(f"\n[{BOLD_STYLE}]Puzzle Hints ({board.rows}x{board.cols}):[/{BOLD_STYLE}]")
    console.print(f"[{DIM_STYLE}]Rows: {escape(format_hints(result.row_hints))}[/{DIM_STYLE}]", highlight=False)
    console.print(f"[{DIM_STYLE}]Columns: {escape(format_hints(result.col_hints))}[/{DIM_STYLE}]", highlight=False)
    console.print(
        f"  Longest Row Hint: [{BOLD_STYLE}{CYAN_STYLE}]{result.longest_row_hint}[/{BOLD_STYLE}{CYAN_STYLE}]"
    )
    console.print(
        f"  Longest Column Hint: [{BOLD_STYLE}{CYAN_STYLE}]{result.longest_col_hint}[/{BOLD_STYLE}{CYAN_STYLE}]"
    )


@app.command()
def render(
    pattern: Annotated[List[str], typer.Argument(help=PATTERN_HELP)],
    reveal: bool = typer.Option(False, help="Guess every cell with its true value before rendering"),
    plain: bool = typer.Option(False, help="Print plain text instead of a table"),
):
    try:
        board = Board.from_pattern(pattern)
    except PicrossError as e:
        fail(e)

    board.calculate_hints()
    if reveal:
        reveal_all(board)

    show_board(board, f"Board ({board.rows}x{board.cols})", plain)
    if not (plain or settings.PLAIN_OUTPUT):
        console.print(Panel.fit(f"[{GREEN_STYLE}]Hints computed for {board.rows} rows and {board.cols} columns.[/{GREEN_STYLE}]",
                                border_style=PANEL_BORDER_STYLE))


def main():
    app()


if __name__ == "__main__":
    main()
