from __future__ import annotations

import os
from typing import Callable, List

from .board import Board
from .card import HIDDEN_LETTER, MATCHED, Cell

MATCHED_GLYPH = '.'
HIDDEN_GLYPH = HIDDEN_LETTER


def cell_glyph(cell: Cell) -> str:
    if cell is MATCHED:
        return MATCHED_GLYPH
    if cell.visible:
        return cell.symbol
    return HIDDEN_GLYPH


def render_rows(board: Board) -> List[str]:
    return [' '.join(cell_glyph(cell) for cell in row) for row in board.rows()]


def render_board(board: Board) -> str:
    """Generates the player's view of the board: symbols only for face-up cards."""
    return '\n'.join(render_rows(board))


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def show_board(board: Board, clear: bool = True, write: Callable[[str], None] = print) -> None:
    if clear:
        clear_screen()
    write(render_board(board))
