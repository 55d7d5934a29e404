"""Statistics collaborator and rule-set house edge estimates."""

from blackjack_core.statistics.house_edge import HouseEdgeCalculator
from blackjack_core.statistics.tracker import (
    ActionAccuracy,
    SessionStatistics,
    StatisticsCollector,
)

__all__ = [
    "ActionAccuracy",
    "HouseEdgeCalculator",
    "SessionStatistics",
    "StatisticsCollector",
]
