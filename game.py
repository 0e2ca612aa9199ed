from __future__ import annotations

# Facade module that re-exports the Concentration core.
# Single-responsibility modules live under concentration_core/*.

from concentration_core.board import Board, Coord
from concentration_core.card import ALPHABET, MATCHED, Card, Cell, Matched
from concentration_core.deal import (
    MAX_SIZE,
    MIN_SIZE,
    STANDARD_SIZE,
    check_board_size,
    deal_board,
    symbols_for,
)
from concentration_core.engine import (
    AWAITING_FIRST_PICK,
    AWAITING_SECOND_PICK,
    OVER,
    RESOLVING,
    GameEngine,
    TurnResult,
)
from concentration_core.errors import (
    AlreadyMatchedError,
    AlreadyVisibleError,
    BoardSizeError,
    OutOfRange,
    PickError,
    PickRangeError,
    PickSyntaxError,
    TurnOrderError,
)
from concentration_core.render import render_board, show_board
from concentration_core.validate import VALIDATORS, first_failure, parse_pick, validate_pick


def main() -> None:
    # CLI driver delegated to concentration_core.cli
    from concentration_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
