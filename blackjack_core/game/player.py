"""Per-player round state."""

from dataclasses import dataclass, field, replace

from blackjack_core.game.state import ActiveHand
from blackjack_core.hand import Hand


@dataclass
class PlayerRoundState:
    """
    A seated player and everything they have at stake in the current round.

    Chips on the table (bets, doubles, split stakes, insurance) have already
    left ``chips``; settlement credits the returns back.
    """

    name: str
    seat: int
    chips: int
    hand: Hand = field(default_factory=Hand)
    split_hand: Hand | None = None
    split_count: int = 0

    # Legality flags, recomputed by the table after every card and phase change
    can_double: bool = False
    can_split: bool = False
    can_surrender: bool = False
    can_insurance: bool = False

    # Status flags
    has_split: bool = False
    has_surrendered: bool = False
    has_insurance: bool = False
    has_acted: bool = False
    insurance_decided: bool = False

    insurance_bet: int = 0
    active_hand: ActiveHand = ActiveHand.MAIN
    last_hand_winnings: int | None = None

    @property
    def bet(self) -> int:
        """The main hand's wager."""
        return self.hand.bet

    @property
    def current_hand(self) -> Hand:
        """The hand currently in play."""
        if self.active_hand is ActiveHand.SPLIT and self.split_hand is not None:
            return self.split_hand
        return self.hand

    @property
    def hands(self) -> list[Hand]:
        """Main hand, then the split hand if there is one."""
        if self.split_hand is None:
            return [self.hand]
        return [self.hand, self.split_hand]

    @property
    def is_done(self) -> bool:
        """Check if every hand has been played out."""
        return all(hand.is_finished for hand in self.hands)

    @property
    def total_wagered(self) -> int:
        """Chips this player has on the table."""
        return sum(hand.bet for hand in self.hands) + self.insurance_bet

    def clear_flags(self) -> None:
        """Turn every legality flag off."""
        self.can_double = False
        self.can_split = False
        self.can_surrender = False
        self.can_insurance = False

    def reset_for_round(self) -> None:
        """Clear cards, stakes and flags for a new round."""
        self.hand = Hand()
        self.split_hand = None
        self.split_count = 0
        self.clear_flags()
        self.has_split = False
        self.has_surrendered = False
        self.has_insurance = False
        self.has_acted = False
        self.insurance_decided = False
        self.insurance_bet = 0
        self.active_hand = ActiveHand.MAIN
        self.last_hand_winnings = None

    def copy(self) -> "PlayerRoundState":
        """Independent copy for read-only consumers."""
        return replace(
            self,
            hand=self.hand.copy(),
            split_hand=self.split_hand.copy() if self.split_hand is not None else None,
        )
