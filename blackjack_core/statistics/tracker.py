"""Statistics collaborator interface and an in-memory session tracker."""

from dataclasses import dataclass, field
from typing import Protocol

from blackjack_core.payout import HandOutcome
from blackjack_core.rules import GameVariant
from blackjack_core.strategy.basic import Action
from blackjack_core.tables import TableLevel


class StatisticsCollector(Protocol):
    """Receives finalized hands and advised decisions from a table."""

    def record_hand_result(
        self,
        outcome: HandOutcome,
        net_winnings: int,
        is_blackjack: bool,
        table_context: TableLevel | None,
        variant_context: GameVariant | None,
    ) -> None: ...

    def record_strategy_decision(
        self,
        player_action: Action,
        optimal_action: Action,
        is_optimal: bool,
        hand_total: int,
        dealer_up_value: int,
    ) -> None: ...


@dataclass
class ActionAccuracy:
    """Decision counts for one action."""

    total: int = 0
    optimal: int = 0


@dataclass
class SessionStatistics:
    """
    Statistics for one playing session, kept in memory.

    Split hands count as separate hands. Persisting the numbers is up to the
    host.
    """

    hands_played: int = 0
    hands_won: int = 0
    hands_lost: int = 0
    hands_pushed: int = 0
    hands_surrendered: int = 0
    blackjacks: int = 0
    total_winnings: int = 0
    current_win_streak: int = 0
    longest_win_streak: int = 0
    hands_by_table: dict[TableLevel, int] = field(default_factory=dict)
    hands_by_variant: dict[GameVariant, int] = field(default_factory=dict)

    total_decisions: int = 0
    optimal_decisions: int = 0
    by_action: dict[Action, ActionAccuracy] = field(default_factory=dict)
    mistakes: dict[tuple[int, int], int] = field(default_factory=dict)

    def record_hand_result(
        self,
        outcome: HandOutcome,
        net_winnings: int,
        is_blackjack: bool,
        table_context: TableLevel | None = None,
        variant_context: GameVariant | None = None,
    ) -> None:
        """Record one finalized hand."""
        self.hands_played += 1
        self.total_winnings += net_winnings

        if outcome is HandOutcome.WIN:
            self.hands_won += 1
            self.current_win_streak += 1
            self.longest_win_streak = max(self.longest_win_streak, self.current_win_streak)
            if is_blackjack:
                self.blackjacks += 1
        else:
            self.current_win_streak = 0
            if outcome is HandOutcome.LOSS:
                self.hands_lost += 1
            elif outcome is HandOutcome.PUSH:
                self.hands_pushed += 1
            else:
                self.hands_surrendered += 1

        if table_context is not None:
            self.hands_by_table[table_context] = self.hands_by_table.get(table_context, 0) + 1
        if variant_context is not None:
            self.hands_by_variant[variant_context] = (
                self.hands_by_variant.get(variant_context, 0) + 1
            )

    def record_strategy_decision(
        self,
        player_action: Action,
        optimal_action: Action,
        is_optimal: bool,
        hand_total: int,
        dealer_up_value: int,
    ) -> None:
        """Record one decision taken against a strategy recommendation."""
        self.total_decisions += 1
        accuracy = self.by_action.setdefault(player_action, ActionAccuracy())
        accuracy.total += 1
        if is_optimal:
            self.optimal_decisions += 1
            accuracy.optimal += 1
        else:
            key = (hand_total, dealer_up_value)
            self.mistakes[key] = self.mistakes.get(key, 0) + 1

    @property
    def win_rate(self) -> float:
        """Percentage of hands won (0-100)."""
        if self.hands_played == 0:
            return 0.0
        return self.hands_won / self.hands_played * 100

    @property
    def decision_accuracy(self) -> float:
        """Percentage of decisions matching basic strategy (0-100)."""
        if self.total_decisions == 0:
            return 0.0
        return self.optimal_decisions / self.total_decisions * 100
