"""
Action legality predicates.

All functions are pure: the answer depends only on the arguments. The round
state machine layers chip-balance and turn-order checks on top.
"""

from blackjack_core.cards import Card
from blackjack_core.hand import Hand
from blackjack_core.rules import RuleSet


def can_hit(hand: Hand) -> bool:
    """Check if the hand may take another card."""
    return len(hand) > 0 and not hand.is_finished


def can_split(hand: Hand, rules: RuleSet, splits_so_far: int = 0) -> bool:
    """
    Check if a hand may be split.

    Args:
        hand: The hand to split
        rules: Table rules
        splits_so_far: Splits already made by this player in the round

    Returns:
        True for two cards of identical rank within the rule's split limits
    """
    if not hand.is_pair:
        return False
    if splits_so_far > 0 and not rules.resplit_to_four_hands:
        return False
    if hand.cards[0].is_ace and splits_so_far > 0 and not rules.resplit_aces:
        return False
    return splits_so_far < rules.max_splits


def can_double(
    hand: Hand,
    rules: RuleSet | None = None,
    is_after_split: bool = False,
) -> bool:
    """Check if a hand may double down (two cards, not busted, DAS after a split)."""
    if len(hand) != 2 or hand.is_busted:
        return False
    if is_after_split and rules is not None and not rules.double_after_split:
        return False
    return True


def can_surrender(
    hand: Hand,
    rules: RuleSet,
    is_first_action: bool = True,
    is_split_hand: bool = False,
) -> bool:
    """Check if a hand may surrender: first action on an unsplit two-card non-blackjack."""
    return (
        rules.surrender_allowed
        and is_first_action
        and not is_split_hand
        and not hand.is_split_hand
        and len(hand) == 2
        and not hand.is_blackjack
    )


def can_insurance(dealer_up_card: Card | None, rules: RuleSet) -> bool:
    """Check if insurance is offered against this dealer up-card."""
    return (
        rules.insurance_allowed
        and dealer_up_card is not None
        and not dealer_up_card.hidden
        and dealer_up_card.is_ace
    )
