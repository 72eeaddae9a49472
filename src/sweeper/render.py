"""
ASCII rendering of a board.
"""
from .cell import Cell, Mark
from .game import Game

_MARK_SYMBOLS = {Mark.FLAG: "F", Mark.QUESTION: "?"}


def render_cell(cell: Cell, reveal_mines: bool = False) -> str:
    """
    Render one cell as a single character.

    ``.`` hidden, ``F`` flag, ``?`` question, ``*`` mine, space for zero,
    digit otherwise. With ``reveal_mines``, unrevealed mines show as ``*``.
    """
    if cell.mark is not Mark.NONE:
        return _MARK_SYMBOLS[cell.mark]
    if cell.is_mine and (cell.is_revealed or reveal_mines):
        return "*"
    if not cell.is_revealed:
        return "."
    return cell.content or " "


def render_board(
    game: Game, reveal_mines: bool = False, coordinates: bool = False
) -> str:
    """
    Render board as ASCII string.

    Args:
        game: Game to render.
        reveal_mines: Show every mine, for a finished game.
        coordinates: Add row and column indices around the grid.
    """
    lines = []
    if coordinates:
        header = " ".join(f"{col % 10}" for col in range(game.width))
        lines.append(f"   {header}")

    for row in range(game.height):
        row_str = " ".join(
            render_cell(game.get_cell(row, col), reveal_mines)
            for col in range(game.width)
        )
        if coordinates:
            row_str = f"{row:>2} {row_str}"
        lines.append(row_str)

    return "\n".join(lines)
