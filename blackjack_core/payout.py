"""Winner determination and payout arithmetic."""

import math
from enum import Enum

from blackjack_core.hand import Hand
from blackjack_core.rules import RuleSet


class Winner(Enum):
    """Result of comparing a player hand with the dealer hand."""

    PLAYER = "player"
    DEALER = "dealer"
    PUSH = "push"


class HandOutcome(Enum):
    """How a finalized hand was settled."""

    WIN = "win"
    LOSS = "loss"
    PUSH = "push"
    SURRENDER = "surrender"


def winner(player: Hand, dealer: Hand) -> Winner:
    """
    Compare a player hand with the dealer hand.

    A busted player loses even if the dealer also busts. Blackjack beats any
    other 21; two blackjacks push.
    """
    if player.is_busted:
        return Winner.DEALER
    if dealer.is_busted:
        return Winner.PLAYER

    player_bj = player.is_blackjack
    dealer_bj = dealer.is_blackjack
    if player_bj and not dealer_bj:
        return Winner.PLAYER
    if dealer_bj and not player_bj:
        return Winner.DEALER

    player_value = player.value
    dealer_value = dealer.value
    if player_value > dealer_value:
        return Winner.PLAYER
    if dealer_value > player_value:
        return Winner.DEALER
    return Winner.PUSH


def payout(bet: int, player: Hand, dealer: Hand, rules: RuleSet) -> int:
    """
    Chips returned to the player for a settled hand, stake included.

    Args:
        bet: The hand's wager
        player: Player hand
        dealer: Dealer hand, fully revealed
        rules: Table rules (blackjack payout ratio)

    Returns:
        0 for a loss, ``bet`` for a push, ``2 * bet`` for a win and
        ``bet + floor(bet * ratio)`` for a winning blackjack

    Raises:
        ValueError: if the bet is negative or the dealer hand has a hidden card
    """
    if bet < 0:
        raise ValueError("bet must not be negative")
    if dealer.has_hidden_card:
        raise ValueError("cannot settle against an unrevealed dealer hand")

    result = winner(player, dealer)
    if result is Winner.DEALER:
        return 0
    if result is Winner.PUSH:
        return bet
    if player.is_blackjack:
        return bet + math.floor(bet * rules.blackjack_payout)
    return 2 * bet


def surrender_refund(bet: int) -> int:
    """Half the stake, rounded down, returned on surrender."""
    if bet < 0:
        raise ValueError("bet must not be negative")
    return bet // 2


def insurance_payout(insurance_bet: int, dealer: Hand) -> int:
    """Insurance pays 2:1 (stake plus two) when the dealer has blackjack."""
    if dealer.has_hidden_card:
        raise ValueError("cannot settle insurance against an unrevealed dealer hand")
    if dealer.is_blackjack:
        return insurance_bet * 3
    return 0


def hand_outcome(player: Hand, dealer: Hand) -> HandOutcome:
    """Classify a finalized hand for statistics."""
    if player.is_surrendered:
        return HandOutcome.SURRENDER
    return {
        Winner.PLAYER: HandOutcome.WIN,
        Winner.DEALER: HandOutcome.LOSS,
        Winner.PUSH: HandOutcome.PUSH,
    }[winner(player, dealer)]
