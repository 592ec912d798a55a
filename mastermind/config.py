"""
Single place to:
- Read game settings from env (MASTERMIND_*), with a local .env as a fallback
- Validate them with a Pydantic model
- Let CLI flags override whatever the env says

Anything invalid is reported as ConfigurationError before a game starts.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# env var -> GameConfig field
ENV_VARS = {
    "MASTERMIND_CODE_LENGTH": "code_length",
    "MASTERMIND_MIN_DIGIT": "min_digit",
    "MASTERMIND_MAX_DIGIT": "max_digit",
    "MASTERMIND_TURNS": "turns",
    "MASTERMIND_REVEAL_SECRET": "reveal_secret",
    "MASTERMIND_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    code_length: int = Field(4, description="How many digits in the secret and in each guess")
    min_digit: int = Field(1, description="Smallest digit allowed in a code")
    max_digit: int = Field(6, description="Largest digit allowed in a code")
    turns: int = Field(10, description="Guesses allowed before the game is lost")
    reveal_secret: bool = Field(False, description="Print the secret when a round starts (debugging)")
    log_level: str = Field("WARNING", description="Level for the mastermind logger")

    @field_validator("code_length", "turns")
    @classmethod
    def must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be greater than 0")
        return value

    @field_validator("min_digit", "max_digit")
    @classmethod
    def must_be_single_digit(cls, value: int) -> int:
        # One character per symbol when parsing guesses
        if value < 0 or value > 9:
            raise ValueError("must be between 0 and 9 inclusive")
        return value

    @field_validator("log_level")
    @classmethod
    def must_be_known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def range_not_empty(self) -> "GameConfig":
        if self.min_digit > self.max_digit:
            raise ValueError(f"min_digit ({self.min_digit}) is greater than max_digit ({self.max_digit})")
        return self


def _read_env() -> Dict[str, Any]:
    values = {}
    for env_name, field_name in ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()
    return values


def load_config(overrides: Optional[Dict[str, Any]] = None) -> GameConfig:
    """
    Precedence, lowest to highest: model defaults, env / .env, overrides.
    Overrides set to None are ignored, so argparse namespaces can be passed
    through as-is.
    """
    # dev convenience; a real shell env always wins over .env
    load_dotenv()

    values = _read_env()
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    try:
        config = GameConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid game configuration:\n{exc}") from exc

    logger.debug("Loaded config: %s", config)
    return config
