"""Basic strategy advisor."""

from blackjack_core.strategy.basic import (
    Action,
    BasicStrategy,
    Confidence,
    StrategyAdvice,
    advise,
)

__all__ = [
    "Action",
    "BasicStrategy",
    "Confidence",
    "StrategyAdvice",
    "advise",
]
