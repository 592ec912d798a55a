'''
Console Mastermind

Flow per round:
  intro -> (turn label, guess prompt, hint)* -> win or loss text -> replay prompt

Invalid guesses are rejected with a reason and the prompt repeats.
Enter starts a new round, 'q' quits, Ctrl-D / Ctrl-C exits at any prompt.
'''

import argparse
import logging
import sys
from typing import List, Optional

from colorama import Cursor, Fore, just_fix_windows_console
from colorama.ansi import clear_screen

from .config import GameConfig, load_config
from .engine import render_hint
from .errors import ConfigurationError, GuessValidationError
from .log import setup_logger
from .session import GameSession, play_turn, reset_game, start_game
from .types import Code
from .validation import parse_guess

logger = logging.getLogger(__name__)

DEFAULT_COLOR = Fore.RESET
TURN_LABEL_COLOR = Fore.CYAN
INPUT_COLOR = Fore.WHITE
WIN_COLOR = Fore.GREEN
LOSS_COLOR = Fore.RED
ERROR_COLOR = Fore.YELLOW

QUIT_COMMANDS = ("q", "quit", "exit")


def _plural(count: int) -> str:
    return "turn" if count == 1 else "turns"


def format_code(code: Code) -> str:
    return "".join(str(digit) for digit in code)


def print_intro(session: GameSession) -> None:
    config = session.config
    print("Welcome to Mastermind!")
    print("The secret code has been generated.")
    print(
        f"Guess {config.code_length} digits, each from {config.min_digit} to {config.max_digit}. "
        f"You have {config.turns} {_plural(config.turns)} to solve the code. Good luck!"
    )
    print()
    if config.reveal_secret:
        # If this was a real game, I wouldn't include this
        print(f"The secret code is currently: {format_code(session.secret)}")
        print()


def read_guess(config: GameConfig) -> Code:
    """Prompt until the player enters a valid guess. EOFError propagates."""
    while True:
        raw = input(f"Your guess: {INPUT_COLOR}")
        print(DEFAULT_COLOR, end="")
        try:
            return parse_guess(raw, config.code_length, config.min_digit, config.max_digit)
        except GuessValidationError as exc:
            logger.debug("Rejected guess %r (%s)", raw, exc.kind)
            print(f"{ERROR_COLOR}The input value was not valid: {exc} Please enter a new value.{DEFAULT_COLOR}")


def play_round(session: GameSession) -> GameSession:
    """Run one round to a won or lost state and print the outcome."""
    print_intro(session)

    while not session.is_over:
        print(f"{TURN_LABEL_COLOR}Turn {session.turns_used + 1}:{DEFAULT_COLOR}")
        guess = read_guess(session.config)
        play_turn(session, guess)

        entry = session.last_entry
        if session.status != "won":
            print(f"Hint: {render_hint(entry.hint)}")

    print()
    if session.status == "won":
        print(
            f"{WIN_COLOR}Congratulations! You have guessed the code in "
            f"{session.turns_used} {_plural(session.turns_used)}!{DEFAULT_COLOR}"
        )
    else:
        print(
            f"{LOSS_COLOR}You have failed to guess the code in "
            f"{session.turns} {_plural(session.turns)}.{DEFAULT_COLOR}"
        )
        print(f"The correct code was {format_code(session.secret)}")
    print()
    return session


def wants_replay() -> bool:
    answer = input("Press Enter/Return to restart the game (or 'q' to quit): ")
    return answer.strip().lower() not in QUIT_COMMANDS


def run(config: GameConfig) -> None:
    session = start_game(config)
    while True:
        play_round(session)
        if not wants_replay():
            print("Thanks for playing!")
            return
        session = reset_game(session)
        print(clear_screen() + Cursor.POS(1, 1), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Crack the hidden code. '+' = right digit, right place; '-' = right digit, wrong place.",
    )
    parser.add_argument("--length", dest="code_length", type=int, help="digits per code (default 4)")
    parser.add_argument("--min-digit", dest="min_digit", type=int, help="smallest digit (default 1)")
    parser.add_argument("--max-digit", dest="max_digit", type=int, help="largest digit (default 6)")
    parser.add_argument("--turns", dest="turns", type=int, help="guesses allowed (default 10)")
    parser.add_argument(
        "--reveal", dest="reveal_secret", action="store_true", default=None,
        help="print the secret at the start of each round",
    )
    parser.add_argument("--log-level", dest="log_level", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    just_fix_windows_console()

    try:
        config = load_config(vars(args))
    except ConfigurationError as exc:
        print(f"{LOSS_COLOR}{exc}{DEFAULT_COLOR}", file=sys.stderr)
        return 2

    setup_logger(config.log_level)

    try:
        run(config)
    except (EOFError, KeyboardInterrupt):
        # Handle Ctrl+D or Ctrl+C gracefully
        print(f"{DEFAULT_COLOR}\nExiting.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
