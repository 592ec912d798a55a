"""
- Keep MASTERMIND_* env vars from the developer's shell out of the tests
- Provide a default config fixture
- Provide helpers to pin the secret and to script player input
"""
import builtins
import logging

import pytest

import mastermind.log as log
from mastermind.config import ENV_VARS, GameConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # load_dotenv() must not pick up a stray .env from the working directory
    monkeypatch.setattr("mastermind.config.load_dotenv", lambda *args, **kwargs: False)
    yield


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """main() installs the console handler; take it off again after each test."""
    yield
    if log._console_handler is not None:
        logging.getLogger(log.LOGGER_NAME).removeHandler(log._console_handler)
        # its stream may be a capture buffer that pytest is about to close
        log._console_handler = None


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def fixed_secret(monkeypatch):
    """
    Returns a function that pins the secret(s) used by start_game.
    Each call to the generator hands out the next secret in the list.
    """
    def _pin(*secrets):
        remaining = [list(s) for s in secrets]

        def fake_generate_code(length, lo, hi):
            return remaining.pop(0)

        # Patch the bound symbol that session.py actually uses
        monkeypatch.setattr("mastermind.session.generate_code", fake_generate_code)
    return _pin


@pytest.fixture
def scripted_input(monkeypatch):
    """
    Feeds lines to input() in order. Running out of lines raises EOFError,
    same as Ctrl+D at a real prompt.
    """
    prompts = []

    def _script(*lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)
        return prompts
    return _script
