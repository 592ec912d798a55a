"""
Secret code generation.
Each position is an independent draw from [lo, hi] using Python's secure random,
so digits may repeat within a code.
"""

import logging
from secrets import randbelow
from typing import List

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def generate_code(length: int = 4, lo: int = 1, hi: int = 6) -> List[int]:
    if length <= 0:
        raise ConfigurationError(f"Code length must be positive, got {length}.")
    if lo > hi:
        raise ConfigurationError(f"Digit range is empty: {lo}..{hi}.")

    # randbelow(k) gives us a number between 0 and k - 1
    span = hi - lo + 1
    digits = []
    for _ in range(length):
        digits.append(lo + randbelow(span))

    logger.debug("Generated a %d-digit code from %d..%d", length, lo, hi)
    return digits
