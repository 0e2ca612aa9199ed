from __future__ import annotations

import random
from typing import List, Optional

from .board import Board
from .card import ALPHABET
from .errors import BoardSizeError

STANDARD_SIZE = 6
MIN_SIZE = 2
MAX_SIZE = 10


def check_board_size(size: object) -> int:
    """Returns size unchanged if it can be dealt as whole pairs, else raises BoardSizeError."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise BoardSizeError(f'Board size must be a whole number, got {size!r}')
    if not (MIN_SIZE <= size <= MAX_SIZE):
        raise BoardSizeError(f'Board size must be between {MIN_SIZE} and {MAX_SIZE}')
    if size % 2:
        raise BoardSizeError('Board size must be even so every card has a pair')
    return size


def symbols_for(size: int) -> List[str]:
    """The first size*size/2 letters of the alphabet, one per pair."""
    return list(ALPHABET[: size * size // 2])


def deal_board(size: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Board:
    """Creates a board with every symbol placed twice in shuffled order."""
    check_board_size(size)
    rng = rng or random.Random(seed)
    deck = symbols_for(size) * 2
    rng.shuffle(deck)
    # Cells are filled row-major from the end of the shuffled deck.
    symbols = [deck.pop() for _ in range(size * size)]
    return Board(size, symbols)
