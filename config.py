"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameConfig:
    """Default table configuration."""

    variant: str = field(default_factory=lambda: os.getenv("BLACKJACK_VARIANT", "vegas"))
    table_level: str = field(default_factory=lambda: os.getenv("BLACKJACK_TABLE", "beginner"))
    starting_chips: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_STARTING_CHIPS", "1000"))
    )
    penetration: float = 0.75
    reshuffle_threshold: int = 20  # Cards left in the shoe that force a reshuffle
    max_seats: int = 7


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
