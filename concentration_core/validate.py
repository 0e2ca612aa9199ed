from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Type

from .board import Board, Coord
from .card import MATCHED
from .errors import (
    AlreadyMatchedError,
    AlreadyVisibleError,
    PickError,
    PickRangeError,
    PickSyntaxError,
)

PICK_PATTERN = re.compile(r'[0-9]+,[0-9]+')


@dataclass(frozen=True)
class Validator:
    kind: str
    check: Callable[[Board, str], bool]
    message: str
    error: Type[PickError]

    def fail(self) -> PickError:
        return self.error(self.message)


def parse_pick(text: str) -> Coord:
    """Parses 'r,c' into (r, c). Assumes the syntax check already passed."""
    r_s, c_s = text.split(',')
    return int(r_s), int(c_s)


def _syntax_ok(board: Board, text: str) -> bool:
    return PICK_PATTERN.fullmatch(text) is not None


def _range_ok(board: Board, text: str) -> bool:
    try:
        coord = parse_pick(text)
    except ValueError:
        # past int()'s digit limit, so never on the board
        return False
    return all(0 <= v < board.size for v in coord)


def _not_matched(board: Board, text: str) -> bool:
    return board.get(*parse_pick(text)) is not MATCHED


def _not_visible(board: Board, text: str) -> bool:
    return not board.get(*parse_pick(text)).visible


# Evaluated in order; later checks rely on the earlier ones having passed.
VALIDATORS: Tuple[Validator, ...] = (
    Validator('syntax', _syntax_ok, 'Invalid Syntax.', PickSyntaxError),
    Validator('range', _range_ok, 'Position out of range', PickRangeError),
    Validator('matched', _not_matched, 'Card already matched', AlreadyMatchedError),
    Validator('visible', _not_visible, 'Same card', AlreadyVisibleError),
)


def first_failure(
    board: Board, text: str, validators: Sequence[Validator] = VALIDATORS
) -> Optional[Validator]:
    for validator in validators:
        if not validator.check(board, text):
            return validator
    return None


def validate_pick(board: Board, text: str, validators: Sequence[Validator] = VALIDATORS) -> Coord:
    """Runs the validators against the current board and returns the parsed pick.

    Raises the PickError subclass of the first validator that fails.
    """
    failed = first_failure(board, text, validators)
    if failed is not None:
        raise failed.fail()
    return parse_pick(text)
