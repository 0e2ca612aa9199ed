from __future__ import annotations

import string
from typing import Tuple, Union

# 'X' is reserved for rendering hidden cards.
HIDDEN_LETTER = 'X'
ALPHABET: Tuple[str, ...] = tuple(
    ch for ch in string.ascii_lowercase + string.ascii_uppercase if ch != HIDDEN_LETTER
)


class Card:
    """A face-down or face-up card. Cards compare equal when their symbols do."""

    __slots__ = ('symbol', 'visible')

    def __init__(self, symbol: str, visible: bool = False) -> None:
        if symbol not in ALPHABET:
            raise ValueError(f'invalid card symbol: {symbol!r}')
        self.symbol = symbol
        self.visible = visible

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def matches(self, other: object) -> bool:
        """True only for another Card with the same symbol."""
        if not isinstance(other, Card):
            return False
        return self.symbol == other.symbol

    def __eq__(self, other: object) -> bool:
        return self.matches(other)

    def __ne__(self, other: object) -> bool:
        return not self.matches(other)

    def __hash__(self) -> int:
        return hash(self.symbol)

    def __repr__(self) -> str:
        state = 'up' if self.visible else 'down'
        return f'Card({self.symbol!r}, {state})'


class Matched:
    """Marker left in both cells of a pair once it has been found."""

    _instance = None

    def __new__(cls) -> 'Matched':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MATCHED'


MATCHED = Matched()

Cell = Union[Card, Matched]
