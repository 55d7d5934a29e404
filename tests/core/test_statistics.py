"""Tests for session statistics and house edge estimates."""

from decimal import Decimal

import pytest

from blackjack_core.payout import HandOutcome
from blackjack_core.rules import GameVariant, RuleSet
from blackjack_core.statistics import HouseEdgeCalculator, StatisticsCollector
from blackjack_core.strategy import Action
from blackjack_core.tables import TableLevel


class TestSessionStatistics:
    """Tests for the in-memory statistics collector."""

    def test_starts_empty(self, stats):
        """Test a fresh session."""
        assert stats.hands_played == 0
        assert stats.win_rate == 0.0
        assert stats.decision_accuracy == 0.0

    def test_satisfies_protocol(self, stats):
        """Test that SessionStatistics can be handed to a table."""
        collector: StatisticsCollector = stats
        collector.record_hand_result(HandOutcome.PUSH, 0, False, None, None)
        assert stats.hands_pushed == 1

    def test_record_results(self, stats):
        """Test counting wins, losses, pushes and surrenders."""
        stats.record_hand_result(HandOutcome.WIN, 15, True, TableLevel.BEGINNER, GameVariant.VEGAS)
        stats.record_hand_result(
            HandOutcome.LOSS, -10, False, TableLevel.BEGINNER, GameVariant.VEGAS
        )
        stats.record_hand_result(HandOutcome.PUSH, 0, False, TableLevel.AMATEUR, GameVariant.VEGAS)
        stats.record_hand_result(
            HandOutcome.SURRENDER, -5, False, TableLevel.AMATEUR, GameVariant.ATLANTIC_CITY
        )

        assert stats.hands_played == 4
        assert stats.hands_won == 1
        assert stats.hands_lost == 1
        assert stats.hands_pushed == 1
        assert stats.hands_surrendered == 1
        assert stats.blackjacks == 1
        assert stats.total_winnings == 0
        assert stats.win_rate == 25.0
        assert stats.hands_by_table == {TableLevel.BEGINNER: 2, TableLevel.AMATEUR: 2}
        assert stats.hands_by_variant[GameVariant.VEGAS] == 3

    def test_win_streaks(self, stats):
        """Test the longest win streak survives a loss."""
        outcomes = [HandOutcome.WIN] * 3 + [HandOutcome.LOSS, HandOutcome.WIN]
        for outcome in outcomes:
            stats.record_hand_result(outcome, 0, False)
        assert stats.current_win_streak == 1
        assert stats.longest_win_streak == 3

    def test_decision_accuracy(self, stats):
        """Test accuracy by action and the mistake table."""
        stats.record_strategy_decision(Action.HIT, Action.HIT, True, 16, 10)
        stats.record_strategy_decision(Action.STAND, Action.HIT, False, 16, 10)
        stats.record_strategy_decision(Action.STAND, Action.STAND, True, 18, 7)
        stats.record_strategy_decision(Action.DOUBLE, Action.DOUBLE, True, 11, 6)

        assert stats.total_decisions == 4
        assert stats.decision_accuracy == 75.0
        assert stats.by_action[Action.STAND].total == 2
        assert stats.by_action[Action.STAND].optimal == 1
        assert stats.mistakes == {(16, 10): 1}


class TestHouseEdgeCalculator:
    """Tests for HouseEdgeCalculator."""

    def test_vegas_baseline(self, vegas):
        """Test the Vegas baseline edge."""
        assert HouseEdgeCalculator(vegas).calculate() == Decimal("0.50")

    def test_atlantic_city_edge(self, atlantic_city):
        """Test that surrender and resplit aces help the player."""
        assert HouseEdgeCalculator(atlantic_city).calculate() == Decimal("0.36")

    def test_european_edge(self, european):
        """Test that no peek costs the player."""
        assert HouseEdgeCalculator(european).calculate() == Decimal("0.61")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"blackjack_payout": 1.2},
            {"dealer_hits_soft_17": True},
            {"double_after_split": False},
            {"resplit_to_four_hands": False},
        ],
    )
    def test_worse_rules_increase_edge(self, vegas, kwargs):
        """Test rules that hurt the player."""
        baseline = HouseEdgeCalculator(vegas).calculate()
        assert HouseEdgeCalculator(RuleSet(**kwargs)).calculate() > baseline

    def test_single_deck_lower_edge(self):
        """Test that fewer decks favour the player."""
        edge_1 = HouseEdgeCalculator(RuleSet(num_decks=1)).calculate()
        edge_6 = HouseEdgeCalculator(RuleSet(num_decks=6)).calculate()
        assert edge_1 < edge_6

    def test_breakdown_lists_deviations(self, atlantic_city):
        """Test the per-rule adjustments behind an estimate."""
        breakdown = HouseEdgeCalculator(atlantic_city).breakdown()
        names = [name for name, _ in breakdown]
        assert names == ["8 deck(s)", "resplit aces", "late surrender"]
        assert HouseEdgeCalculator.BASELINE + sum(e for _, e in breakdown) == Decimal("0.36")

    def test_vegas_has_no_adjustments(self, vegas):
        """Test that the baseline rules need no adjustment."""
        assert HouseEdgeCalculator(vegas).breakdown() == []
