from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .card import MATCHED, Card, Cell, Matched
from .errors import OutOfRange

Coord = Tuple[int, int]


class Board:
    """Square grid of cards. Each cell holds a Card or the MATCHED marker.

    The board owns its Card instances: they are created here from the symbol
    list and never handed in from outside.
    """

    def __init__(self, size: int, symbols: Sequence[str]) -> None:
        if size <= 0:
            raise ValueError('size must be positive')
        if len(symbols) != size * size:
            raise ValueError('symbols length must equal size*size')
        self.size = size
        it = iter(symbols)
        self._grid: List[List[Cell]] = [
            [Card(next(it)) for _ in range(size)] for _ in range(size)
        ]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfRange(f'({row}, {col}) is outside a {self.size}x{self.size} board')

    def get(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self._grid[row][col]

    def set(self, row: int, col: int, value: Cell) -> None:
        self._check(row, col)
        if not isinstance(value, (Card, Matched)):
            raise TypeError(f'board cells hold Card or MATCHED, not {type(value).__name__}')
        self._grid[row][col] = value

    def __getitem__(self, pos: Coord) -> Cell:
        return self.get(*pos)

    def __setitem__(self, pos: Coord, value: Cell) -> None:
        self.set(pos[0], pos[1], value)

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        """Yields each row as a tuple, top to bottom."""
        for row in self._grid:
            yield tuple(row)

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        return self.rows()

    def coords(self) -> Iterator[Coord]:
        for r in range(self.size):
            for c in range(self.size):
                yield (r, c)

    def is_fully_matched(self) -> bool:
        return all(cell is MATCHED for row in self._grid for cell in row)

    def remaining_pairs(self) -> int:
        cards = sum(1 for row in self._grid for cell in row if isinstance(cell, Card))
        return cards // 2

    def __repr__(self) -> str:
        return f'Board(size={self.size}, remaining_pairs={self.remaining_pairs()})'
