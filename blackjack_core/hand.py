"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, NamedTuple

from blackjack_core.cards import Card


class HandValue(NamedTuple):
    """Derived state of a set of cards."""

    value: int
    is_soft: bool
    is_blackjack: bool
    is_busted: bool


def evaluate(cards: Iterable[Card]) -> HandValue:
    """
    Evaluate the visible cards of a hand.

    Every ace starts at 11 and is demoted to 1, one at a time, while the
    total is over 21. Hidden cards take no part in any of the results.
    """
    visible = [card for card in cards if not card.hidden]

    total = 0
    aces = 0
    for card in visible:
        if card.is_ace:
            aces += 1
        else:
            total += card.value

    total += 11 * aces
    soft_aces = aces
    while total > 21 and soft_aces > 0:
        total -= 10
        soft_aces -= 1

    is_soft = soft_aces > 0 and total <= 21
    is_blackjack = len(visible) == 2 and total == 21
    return HandValue(total, is_soft, is_blackjack, total > 21)


@dataclass
class Hand:
    """
    A blackjack hand with its wager and play status.

    ``value``, ``is_soft``, ``is_blackjack`` and ``is_busted`` are derived
    from the visible cards on every read.
    """

    cards: list[Card] = field(default_factory=list)
    bet: int = 0
    is_doubled: bool = False
    is_split_hand: bool = False
    is_surrendered: bool = False
    is_standing: bool = False

    @classmethod
    def of(cls, *cards: Card, bet: int = 0) -> "Hand":
        """Build a hand from cards."""
        return cls(cards=list(cards), bet=bet)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def reveal(self) -> bool:
        """Turn every hidden card face up. Returns True if anything changed."""
        if not self.has_hidden_card:
            return False
        self.cards = [card.revealed() for card in self.cards]
        return True

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()
        self.bet = 0
        self.is_doubled = False
        self.is_split_hand = False
        self.is_surrendered = False
        self.is_standing = False

    def copy(self) -> "Hand":
        """Copy with its own card list (cards themselves are immutable)."""
        return replace(self, cards=list(self.cards))

    def evaluate(self) -> HandValue:
        """Evaluate the visible cards."""
        return evaluate(self.cards)

    def peek(self) -> HandValue:
        """Evaluate every card, hidden ones included (dealer blackjack check)."""
        return evaluate(card.revealed() for card in self.cards)

    @property
    def visible_cards(self) -> list[Card]:
        """Cards that are face up."""
        return [card for card in self.cards if not card.hidden]

    @property
    def has_hidden_card(self) -> bool:
        """Check if any card is still face down."""
        return any(card.hidden for card in self.cards)

    @property
    def value(self) -> int:
        """Best total of the visible cards."""
        return self.evaluate().value

    @property
    def is_soft(self) -> bool:
        """Check if an ace still counts as 11."""
        return self.evaluate().is_soft

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is two cards totalling 21."""
        return self.evaluate().is_blackjack

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.evaluate().is_busted

    @property
    def is_pair(self) -> bool:
        """Check if the hand is two cards of the same rank."""
        return (
            len(self.cards) == 2
            and self.cards[0].rank == self.cards[1].rank
        )

    @property
    def is_finished(self) -> bool:
        """Check if no further player action applies to this hand."""
        return (
            self.is_standing
            or self.is_doubled
            or self.is_surrendered
            or self.is_blackjack
            or self.is_busted
        )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
