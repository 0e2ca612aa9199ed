"""
Concentration core Python package.

Pure game logic for the memory-matching game, kept apart from the terminal
and web drivers so each piece can be tested on its own.
Modules:
- card.py: Card, MATCHED, ALPHABET
- board.py: Board, Coord
- deal.py: board construction and size checks
- validate.py: ordered pick validators
- engine.py: GameEngine turn state machine
- render.py: terminal rendering helpers
- cli.py: interactive terminal driver
"""
