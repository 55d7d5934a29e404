"""Dealer drawing policy."""

from enum import Enum

from blackjack_core.hand import Hand
from blackjack_core.rules import RuleSet


class DealerAction(Enum):
    """What the dealer does next."""

    HIT = "hit"
    STAND = "stand"


def dealer_action(rules: RuleSet, value: int, is_soft: bool) -> DealerAction:
    """Hit below 17, hit soft 17 under H17 rules, otherwise stand."""
    if value < 17:
        return DealerAction.HIT
    if value == 17 and is_soft and rules.dealer_hits_soft_17:
        return DealerAction.HIT
    return DealerAction.STAND


def dealer_should_hit(hand: Hand, rules: RuleSet) -> bool:
    """Apply the dealer policy to the visible cards of a hand."""
    value, is_soft, _, _ = hand.evaluate()
    return dealer_action(rules, value, is_soft) is DealerAction.HIT
