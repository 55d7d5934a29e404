"""Tests for action legality predicates."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from blackjack_core.cards import Card, Rank, Suit, cards_from_string
from blackjack_core.hand import Hand
from blackjack_core.legality import (
    can_double,
    can_hit,
    can_insurance,
    can_split,
    can_surrender,
)
from blackjack_core.rules import RuleSet

ALL_RULES = [RuleSet.vegas(), RuleSet.european(), RuleSet.atlantic_city()]


def hand(text):
    return Hand(cards=cards_from_string(text))


class TestCanHit:
    """Tests for hitting."""

    def test_open_hand(self, hard_16_hand):
        """Test hitting a live hand."""
        assert can_hit(hard_16_hand)

    def test_finished_hands(self, blackjack_hand, bust_hand, empty_hand):
        """Test that finished or empty hands cannot hit."""
        assert not can_hit(blackjack_hand)
        assert not can_hit(bust_hand)
        assert not can_hit(empty_hand)

    def test_standing_hand(self, hard_16_hand):
        """Test that a standing hand cannot hit."""
        hard_16_hand.is_standing = True
        assert not can_hit(hard_16_hand)


class TestCanSplit:
    """Tests for splitting."""

    def test_pair(self, vegas, pair_8s_hand):
        """Test splitting a fresh pair."""
        assert can_split(pair_8s_hand, vegas)

    @given(
        st.sampled_from(list(Rank)),
        st.sampled_from(list(Rank)),
        st.sampled_from(ALL_RULES),
        st.integers(min_value=0, max_value=3),
    )
    def test_different_ranks_never_split(self, first, second, rules, splits):
        """Test that only identical ranks split."""
        cards = [Card(first, Suit.SPADES), Card(second, Suit.HEARTS)]
        if first != second:
            assert not can_split(Hand(cards=cards), rules, splits)

    def test_resplit_limit(self, vegas):
        """Test the three split limit."""
        assert can_split(hand("8S 8H"), vegas, splits_so_far=2)
        assert not can_split(hand("8S 8H"), vegas, splits_so_far=3)

    def test_no_resplit_when_disabled(self):
        """Test that one split is the limit without resplits."""
        rules = RuleSet(resplit_to_four_hands=False)
        assert can_split(hand("8S 8H"), rules)
        assert not can_split(hand("8S 8H"), rules, splits_so_far=1)

    def test_resplit_aces(self, vegas, atlantic_city):
        """Test that Aces resplit only where the rules allow it."""
        aces = hand("AS AH")
        assert can_split(aces, vegas, splits_so_far=0)
        assert not can_split(aces, vegas, splits_so_far=1)
        assert can_split(aces, atlantic_city, splits_so_far=1)

    def test_three_cards(self, vegas):
        """Test that three cards never split."""
        assert not can_split(hand("8S 8H 8C"), vegas)


class TestCanDouble:
    """Tests for doubling down."""

    def test_two_cards(self, vegas):
        """Test doubling a two-card hand."""
        assert can_double(hand("5S 6H"), vegas)

    def test_three_cards(self, vegas):
        """Test that three cards cannot double."""
        assert not can_double(hand("5S 3H 2C"), vegas)

    def test_double_after_split(self, vegas):
        """Test double after split follows the DAS flag."""
        assert can_double(hand("8S 3H"), vegas, is_after_split=True)
        no_das = RuleSet(double_after_split=False)
        assert not can_double(hand("8S 3H"), no_das, is_after_split=True)
        assert can_double(hand("8S 3H"), no_das, is_after_split=False)


class TestCanSurrender:
    """Tests for surrender."""

    def test_atlantic_city_first_action(self, atlantic_city, hard_16_hand):
        """Test late surrender on a fresh two-card hand."""
        assert can_surrender(hard_16_hand, atlantic_city)

    def test_not_offered_without_rule(self, vegas, european, hard_16_hand):
        """Test that Vegas and European never offer surrender."""
        assert not can_surrender(hard_16_hand, vegas)
        assert not can_surrender(hard_16_hand, european)

    def test_not_after_acting(self, atlantic_city, hard_16_hand):
        """Test that surrender must be the first action."""
        assert not can_surrender(hard_16_hand, atlantic_city, is_first_action=False)

    def test_not_after_split(self, atlantic_city):
        """Test that split hands cannot surrender."""
        assert not can_surrender(hand("8S 8H"), atlantic_city, is_split_hand=True)
        split = hand("8S 3H")
        split.is_split_hand = True
        assert not can_surrender(split, atlantic_city)

    def test_not_with_blackjack(self, atlantic_city, blackjack_hand):
        """Test that a natural cannot surrender."""
        assert not can_surrender(blackjack_hand, atlantic_city)


class TestCanInsurance:
    """Tests for insurance."""

    def test_dealer_ace(self, vegas):
        """Test insurance against an Ace."""
        assert can_insurance(Card(Rank.ACE, Suit.SPADES), vegas)

    @pytest.mark.parametrize("rank", [r for r in Rank if r is not Rank.ACE])
    def test_other_up_cards(self, vegas, rank):
        """Test that only an Ace offers insurance."""
        assert not can_insurance(Card(rank, Suit.SPADES), vegas)

    def test_hidden_ace(self, vegas):
        """Test that a face-down Ace does not count."""
        assert not can_insurance(Card(Rank.ACE, Suit.SPADES).face_down(), vegas)
        assert not can_insurance(None, vegas)

    @given(st.sampled_from(list(Rank)), st.sampled_from(list(Suit)))
    def test_european_never(self, rank, suit):
        """Test that European rules never offer insurance."""
        assert not can_insurance(Card(rank, suit), RuleSet.european())
