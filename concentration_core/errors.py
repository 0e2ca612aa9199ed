from __future__ import annotations


class PickError(ValueError):
    """A player pick rejected by one of the validators."""
    kind = 'pick'

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PickSyntaxError(PickError):
    kind = 'syntax'


class PickRangeError(PickError):
    kind = 'range'


class AlreadyMatchedError(PickError):
    kind = 'matched'


class AlreadyVisibleError(PickError):
    kind = 'visible'


class OutOfRange(IndexError):
    """Direct board access outside the grid. Validators should make this unreachable."""


class BoardSizeError(ValueError):
    pass


class TurnOrderError(RuntimeError):
    """An engine step was called in the wrong phase of the turn."""
