from __future__ import annotations

import argparse
import os
from typing import Callable, List, Optional

from .deal import MAX_SIZE, MIN_SIZE, STANDARD_SIZE, check_board_size, deal_board
from .engine import GameEngine
from .errors import BoardSizeError
from .render import show_board

DEFAULT_DELAY = 1.0


def env_delay() -> float:
    """Pause from CONCENTRATION_DELAY; a missing or unparsable value falls back to DEFAULT_DELAY."""
    raw = os.getenv('CONCENTRATION_DELAY')
    if raw is None:
        return DEFAULT_DELAY
    try:
        return float(raw)
    except ValueError:
        print(f'[game] ignoring CONCENTRATION_DELAY={raw!r}; using {DEFAULT_DELAY}')
        return DEFAULT_DELAY


def parse_board_size(text: str) -> int:
    try:
        size = int(text.strip())
    except ValueError:
        raise BoardSizeError(f'Board size must be a whole number, got {text.strip()!r}')
    return check_board_size(size)


def choose_board_size(read_line: Callable[[], str], write: Callable[[str], None]) -> int:
    """Asks for the standard 6x6 game, otherwise for a size until a playable one is given."""
    write('Standard game? (y/n)')
    # only an exact 'y' line picks the standard game
    if read_line() == 'y':
        return STANDARD_SIZE
    write(f'What size board? ({MIN_SIZE}-{MAX_SIZE})')
    while True:
        try:
            return parse_board_size(read_line())
        except BoardSizeError as e:
            write(str(e))


def _size_arg(text: str) -> int:
    try:
        return parse_board_size(text)
    except BoardSizeError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Concentration: find every pair of matching cards')
    parser.add_argument('--size', type=_size_arg, default=None,
                        help=f'Board size (NxN), even, {MIN_SIZE}-{MAX_SIZE}; skips the startup prompt')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--delay', type=float, default=env_delay(),
                        help='Seconds to show both cards before resolving a turn')
    parser.add_argument('--no-clear', action='store_true', help='Do not clear the screen between picks')
    parser.add_argument('--verbose', action='store_true', help='Print [game]/[turn] diagnostics')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    def read_line() -> str:
        return input().rstrip('\r\n')

    log = print if args.verbose else None
    try:
        size = args.size if args.size is not None else choose_board_size(read_line, print)
        board = deal_board(size, seed=args.seed)
        engine = GameEngine(board, log=log)
        if log:
            log(f'[game] {size}x{size} board, {engine.max_guesses} guesses, seed={args.seed}')
        engine.play(
            read_line,
            print,
            lambda b: show_board(b, clear=not args.no_clear),
            delay=args.delay,
        )
    except (EOFError, KeyboardInterrupt):
        print('\nGoodbye.')
