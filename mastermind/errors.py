"""
Error taxonomy.

- ConfigurationError: bad length / range / turns. Fatal, raised at setup.
- GuessValidationError and its subclasses: one per rejection reason for raw
  player input. Recoverable, the driver reprompts.

Contract violations inside the engine (mismatched lengths) raise plain
ValueError and are not part of this hierarchy.
"""

from typing import Optional


class MastermindError(Exception):
    """Base class for errors the game knows how to report."""


class ConfigurationError(MastermindError):
    pass


class GuessValidationError(MastermindError):
    kind = "invalid_guess"

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


class EmptyInputError(GuessValidationError):
    kind = "empty_input"


class WrongLengthError(GuessValidationError):
    kind = "wrong_length"


class InvalidCharacterError(GuessValidationError):
    kind = "invalid_character"


class NotNumericError(GuessValidationError):
    kind = "not_numeric"


class OutOfRangeError(GuessValidationError):
    kind = "out_of_range"
