"""
Game session state.
One GameSession per round, passed into and returned from the functions below
instead of living in module globals.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig
from .engine import Hint, evaluate
from .generator import generate_code
from .types import Code, GameStatus

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: Code
    hint: Hint


@dataclass
class GameSession:
    config: GameConfig
    secret: Code
    turns_used: int = 0
    status: GameStatus = "in_progress"
    history: List[GuessEntry] = field(default_factory=list)

    @property
    def turns(self) -> int:
        return self.config.turns

    @property
    def turns_left(self) -> int:
        return max(0, self.config.turns - self.turns_used)

    @property
    def last_entry(self) -> Optional[GuessEntry]:
        return self.history[-1] if self.history else None

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"


def start_game(config: GameConfig) -> GameSession:
    secret = generate_code(config.code_length, config.min_digit, config.max_digit)
    logger.info("New game: %d digits, %d turns", config.code_length, config.turns)
    return GameSession(config=config, secret=secret)


def play_turn(session: GameSession, guess: Code) -> GameSession:
    if session.is_over:
        # If game already ended, just return it (ignore extra guesses)
        return session

    # --- length guard ---
    if len(session.secret) != len(guess):
        raise ValueError(f"Guess must have exactly {len(session.secret)} digits for this game.")

    hint = evaluate(session.secret, guess)
    session.history.append(GuessEntry(guess=list(guess), hint=hint))
    session.turns_used += 1

    if hint.won:
        session.status = "won"
    elif session.turns_left <= 0:
        session.status = "lost"

    logger.debug(
        "Turn %d: exact=%d partial=%d status=%s",
        session.turns_used, hint.exact, hint.partial, session.status,
    )
    return session


def reset_game(session: GameSession) -> GameSession:
    """Same settings, new secret, turn counter back to zero."""
    return start_game(session.config)
