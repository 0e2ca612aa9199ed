from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .board import Board, Coord
from .card import MATCHED, Card
from .errors import AlreadyMatchedError, AlreadyVisibleError, PickError, TurnOrderError
from .validate import VALIDATORS, Validator, validate_pick

AWAITING_FIRST_PICK = 'awaiting_first_pick'
AWAITING_SECOND_PICK = 'awaiting_second_pick'
RESOLVING = 'resolving'
OVER = 'over'

PICK_PROMPT = 'Choose a card (e.g. 1,2)'


@dataclass(frozen=True)
class TurnResult:
    first: Coord
    second: Coord
    symbols: Tuple[str, str]
    matched: bool
    guess_count: int


class GameEngine:
    """Runs the two-pick turns of one game on a single board.

    A turn goes first_pick -> second_pick -> resolve. Each step is only legal
    in its own phase; calling one out of order raises TurnOrderError.
    """

    def __init__(
        self,
        board: Board,
        validators: Sequence[Validator] = VALIDATORS,
        log: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.board = board
        self.validators = tuple(validators)
        self.prev_pick: Optional[Coord] = None
        self.curr_pick: Optional[Coord] = None
        self.guess_count = 0
        self.max_guesses = 3 * board.size ** 2
        self.phase = AWAITING_FIRST_PICK
        self._log = log

    def _expect(self, phase: str) -> None:
        if self.phase != phase:
            raise TurnOrderError(f'expected phase {phase}, engine is in {self.phase}')

    def _card_at(self, coord: Coord) -> Card:
        cell = self.board.get(*coord)
        if not isinstance(cell, Card):
            raise AlreadyMatchedError('Card already matched')
        return cell

    def _reveal(self, coord: Coord) -> None:
        # a card revealed twice would match itself
        card = self._card_at(coord)
        if card.visible:
            raise AlreadyVisibleError('Same card')
        card.show()

    def check_pick(self, text: str) -> Coord:
        return validate_pick(self.board, text, self.validators)

    def first_pick(self, coord: Coord) -> None:
        self._expect(AWAITING_FIRST_PICK)
        self._reveal(coord)
        self.prev_pick = coord
        self.phase = AWAITING_SECOND_PICK

    def second_pick(self, coord: Coord) -> None:
        self._expect(AWAITING_SECOND_PICK)
        self._reveal(coord)
        self.curr_pick = coord
        self.phase = RESOLVING

    def pick(self, text: str) -> Coord:
        """Validates text and applies it as whichever pick the turn is waiting for."""
        if self.phase not in (AWAITING_FIRST_PICK, AWAITING_SECOND_PICK):
            raise TurnOrderError(f'no pick expected in phase {self.phase}')
        coord = self.check_pick(text)
        if self.phase == AWAITING_FIRST_PICK:
            self.first_pick(coord)
        else:
            self.second_pick(coord)
        return coord

    def resolve(self) -> TurnResult:
        self._expect(RESOLVING)
        if self.prev_pick is None or self.curr_pick is None:
            raise TurnOrderError('resolving without two picks')
        first = self._card_at(self.prev_pick)
        second = self._card_at(self.curr_pick)
        matched = first.matches(second)
        if matched:
            # Both cells are retired before the termination check runs.
            self.board.set(*self.prev_pick, MATCHED)
            self.board.set(*self.curr_pick, MATCHED)
        else:
            first.hide()
            second.hide()
        self.guess_count += 1
        result = TurnResult(
            first=self.prev_pick,
            second=self.curr_pick,
            symbols=(first.symbol, second.symbol),
            matched=matched,
            guess_count=self.guess_count,
        )
        if self._log:
            verdict = 'match' if matched else 'miss'
            self._log(f'[turn] #{self.guess_count} {self.prev_pick}={first.symbol} '
                      f'{self.curr_pick}={second.symbol} -> {verdict}')
        self.phase = OVER if self.is_over() else AWAITING_FIRST_PICK
        return result

    def is_over(self) -> bool:
        return self.board.is_fully_matched() or self.guess_count >= self.max_guesses

    def outcome(self) -> Optional[str]:
        """'win', 'loss', or None while the game is running. A full board wins even on the last guess."""
        if self.board.is_fully_matched():
            return 'win'
        if self.guess_count >= self.max_guesses:
            return 'loss'
        return None

    def end_message(self) -> Optional[str]:
        result = self.outcome()
        if result == 'win':
            return f'You won in {self.guess_count} picks.'
        if result == 'loss':
            return 'You lose.'
        return None

    def read_pick(self, read_line: Callable[[], str], write: Callable[[str], None]) -> Coord:
        """Prompts once, then keeps reading lines until one passes every validator."""
        write(PICK_PROMPT)
        while True:
            text = read_line()
            try:
                return self.check_pick(text)
            except PickError as e:
                write(e.message)

    def play(
        self,
        read_line: Callable[[], str],
        write: Callable[[str], None],
        display: Callable[[Board], None],
        delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Optional[str]:
        """Plays turns until the game ends, then writes the end message and returns the outcome."""
        while not self.is_over():
            display(self.board)
            self.first_pick(self.read_pick(read_line, write))
            display(self.board)
            self.second_pick(self.read_pick(read_line, write))
            display(self.board)
            if delay > 0:
                sleep(delay)
            self.resolve()
        self.phase = OVER
        write(self.end_message())
        return self.outcome()
