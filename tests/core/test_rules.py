"""Tests for rule variants and table limits."""

import pytest

from blackjack_core.rules import GameVariant, RuleSet, rule_differences, variant_tips
from blackjack_core.tables import TABLE_CONFIGURATIONS, TableConfig, TableLevel


class TestRuleSet:
    """Tests for the RuleSet presets."""

    def test_vegas_preset(self, vegas):
        """Test Vegas rules."""
        assert vegas.variant == GameVariant.VEGAS
        assert vegas.num_decks == 6
        assert not vegas.dealer_hits_soft_17
        assert vegas.dealer_peeks_for_blackjack
        assert not vegas.surrender_allowed
        assert not vegas.resplit_aces
        assert vegas.insurance_allowed
        assert vegas.blackjack_payout == 1.5

    def test_european_preset(self, european):
        """Test European rules."""
        assert european.no_hole_card
        assert not european.dealer_peeks_for_blackjack
        assert not european.insurance_allowed
        assert not european.surrender_allowed

    def test_atlantic_city_preset(self, atlantic_city):
        """Test Atlantic City rules."""
        assert atlantic_city.num_decks == 8
        assert atlantic_city.surrender_allowed
        assert atlantic_city.late_surrender_only
        assert atlantic_city.resplit_aces
        assert atlantic_city.dealer_peeks_for_blackjack

    @pytest.mark.parametrize("variant", list(GameVariant))
    def test_for_variant(self, variant):
        """Test looking up presets by enum and by string value."""
        assert RuleSet.for_variant(variant).variant == variant
        assert RuleSet.for_variant(variant.value) == RuleSet.for_variant(variant)

    def test_for_unknown_variant(self):
        """Test that an unknown variant name is rejected."""
        with pytest.raises(ValueError):
            RuleSet.for_variant("macao")

    def test_max_splits(self, vegas):
        """Test the split limit follows the resplit flag."""
        assert vegas.max_splits == 3
        assert RuleSet(resplit_to_four_hands=False).max_splits == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"num_decks": 0},
            {"num_decks": 9},
            {"blackjack_payout": 0.5},
            {"no_hole_card": True, "dealer_peeks_for_blackjack": True},
            {"late_surrender_only": True, "surrender_allowed": False},
        ],
    )
    def test_invalid_combinations(self, kwargs):
        """Test rule validation."""
        with pytest.raises(ValueError):
            RuleSet(**kwargs)

    def test_rules_are_frozen(self, vegas):
        """Test that a rule set cannot be changed in place."""
        with pytest.raises(AttributeError):
            vegas.num_decks = 2


class TestRuleDescriptions:
    """Tests for the human-readable rule summaries."""

    def test_vegas_is_standard(self, vegas):
        """Test that Vegas is the baseline."""
        assert rule_differences(vegas) == ["Standard Vegas rules"]

    def test_european_differences(self, european):
        """Test European differences."""
        differences = rule_differences(european)
        assert any("No hole card" in d for d in differences)
        assert "Insurance not available" in differences

    def test_atlantic_city_differences(self, atlantic_city):
        """Test Atlantic City differences."""
        differences = rule_differences(atlantic_city)
        assert "Late surrender allowed" in differences
        assert "Can resplit aces" in differences
        assert "Uses 8 decks" in differences

    @pytest.mark.parametrize("variant", list(GameVariant))
    def test_every_variant_has_tips(self, variant):
        """Test strategy tips exist for every variant."""
        assert len(variant_tips(variant)) == 3


class TestTableConfig:
    """Tests for table levels and betting limits."""

    def test_every_level_configured(self):
        """Test that each level has limits."""
        assert set(TABLE_CONFIGURATIONS) == set(TableLevel)

    def test_beginner_limits(self):
        """Test the beginner table."""
        table = TableConfig.for_level("beginner")
        assert table.min_bet == 5
        assert table.max_bet == 100

    def test_valid_bets(self):
        """Test bets inside the limits."""
        table = TableConfig.for_level(TableLevel.BEGINNER)
        assert table.is_valid_bet(5, 1000)
        assert table.is_valid_bet(100, 1000)
        assert not table.is_valid_bet(4, 1000)
        assert not table.is_valid_bet(101, 1000)
        assert not table.is_valid_bet(0, 1000)

    def test_bet_capped_by_chips(self):
        """Test that a bet can never exceed the stack."""
        table = TableConfig.for_level(TableLevel.BEGINNER)
        assert table.effective_max_bet(50) == 50
        assert not table.is_valid_bet(60, 50)

    def test_all_in_below_table_minimum(self):
        """Test that a short stack may bet any amount up to the whole stack."""
        table = TableConfig.for_level(TableLevel.INTERMEDIATE)
        assert table.effective_min_bet(10) == 1
        assert table.is_valid_bet(1, 10)
        assert table.is_valid_bet(10, 10)
        assert not table.is_valid_bet(11, 10)

    def test_invalid_limits(self):
        """Test that inverted limits are rejected."""
        with pytest.raises(ValueError):
            TableConfig(TableLevel.BEGINNER, "Broken", 100, 5, 0, 0)
