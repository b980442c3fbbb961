"""Configuration management with environment variable support.

Values are kept as the raw strings found in the environment; the command
line parser converts and validates them so bad values become usage errors.
"""

import os
from dataclasses import dataclass, field


def _optional(name: str) -> str | None:
    """Return a stripped environment variable, or None when unset or blank."""
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class GameConfig:
    """Default table configuration."""

    players: str | None = field(default_factory=lambda: _optional("BLACKJACK_PLAYERS"))
    seed: str | None = field(default_factory=lambda: _optional("BLACKJACK_SEED"))
    shuffle: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_SHUFFLE", "true").lower() == "true"
    )
    starting_wallet: str = field(default_factory=lambda: _optional("BLACKJACK_WALLET") or "1000")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
