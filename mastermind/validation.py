"""
Raw player input -> Guess.

Checks run in a fixed order and each failure has its own error class, so the
first problem found is the one reported:
  1. empty input
  2. wrong number of characters
  3. sign characters ('+' or '-')
  4. anything that is not an ASCII digit
  5. a digit outside [lo, hi]

One character is one symbol, so hi must be a single digit.
"""

import string
from typing import List, Optional

from .errors import (
    EmptyInputError,
    InvalidCharacterError,
    NotNumericError,
    OutOfRangeError,
    WrongLengthError,
)

SIGN_CHARACTERS = "+-"


def parse_guess(raw: Optional[str], length: int = 4, lo: int = 1, hi: int = 6) -> List[int]:
    # 1. Null/empty check
    if not raw:
        raise EmptyInputError("No guess was entered.", raw)

    # 2. Correct number of characters
    if len(raw) != length:
        raise WrongLengthError(f"A guess must be exactly {length} digits, got {len(raw)}.", raw)

    # 3. Sign characters would otherwise survive an int() conversion
    for ch in raw:
        if ch in SIGN_CHARACTERS:
            raise InvalidCharacterError(f"Sign character {ch!r} is not allowed.", raw)

    # 4. Only ASCII digits; str.isdigit() would also accept things like '²'
    for ch in raw:
        if ch not in string.digits:
            raise NotNumericError(f"{ch!r} is not a digit.", raw)

    # 5. Every digit in range
    digits = [ord(ch) - ord("0") for ch in raw]
    for digit in digits:
        if digit < lo or digit > hi:
            raise OutOfRangeError(f"Each digit must be between {lo} and {hi} inclusive.", raw)

    return digits
