"""Card, Deck, and Shoe classes - immutable card representations."""

from dataclasses import dataclass, field, replace
from enum import Enum
from random import Random
from typing import Iterator, Sequence


class Suit(Enum):
    """Card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, A through K."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        return _BLACKJACK_VALUES[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self is Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


_BLACKJACK_VALUES: dict[Rank, int] = {
    Rank.ACE: 11,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card.

    ``hidden`` only controls visibility: it never changes rank or suit and
    is ignored when comparing cards.
    """

    rank: Rank
    suit: Suit
    hidden: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        if self.hidden:
            return "??"
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        suffix = ", hidden" if self.hidden else ""
        return f"Card({self.rank.name}, {self.suit.name}{suffix})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    def face_down(self) -> "Card":
        """Return a hidden copy of this card."""
        return replace(self, hidden=True)

    def revealed(self) -> "Card":
        """Return a visible copy of this card."""
        return replace(self, hidden=False)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]
        if rank_str == "T":
            rank_str = "10"

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        try:
            rank = Rank(rank_str)
        except ValueError:
            raise ValueError(f"Invalid rank: {rank_str}") from None
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank, suit_map[suit_str])


def cards_from_string(s: str) -> list[Card]:
    """Parse a space separated list of cards, e.g. 'AS KH 10D'."""
    return [Card.from_string(token) for token in s.split()]


def standard_deck() -> list[Card]:
    """The 52 cards of one deck, suit by suit, Ace through King."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Shoe:
    """
    A dealing shoe holding one or more decks.

    Cards are drawn from the top. A cut card is placed after ``penetration``
    of the shoe; once it comes out the shoe should be reshuffled before the
    next round.
    """

    def __init__(
        self,
        num_decks: int = 6,
        penetration: float = 0.75,
        rng: Random | None = None,
    ) -> None:
        """
        Args:
            num_decks: Decks in the shoe (6 or 8 for the casino variants)
            penetration: Fraction of the shoe dealt before the cut card (0.0-1.0]
            rng: Random number generator for shuffling

        The shoe starts in deck order; call ``shuffle`` before dealing.
        """
        if num_decks < 1:
            raise ValueError("Shoe must have at least 1 deck")
        if not 0.0 < penetration <= 1.0:
            raise ValueError("Penetration must be between 0 and 1")

        self._num_decks = num_decks
        self._penetration = penetration
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Put every card back, in deck order."""
        self._cards = standard_deck() * self._num_decks

    def shuffle(self) -> None:
        """Collect all cards and shuffle them."""
        self.reset()
        self._rng.shuffle(self._cards)

    def reshuffle_if_needed(self, min_cards: int = 0) -> bool:
        """
        Shuffle when the cut card is out or fewer than ``min_cards`` remain.

        Returns:
            True if the shoe was shuffled
        """
        if self.needs_shuffle or len(self._cards) < min_cards:
            self.shuffle()
            return True
        return False

    def draw(self) -> Card:
        """
        Draw the top card.

        Raises:
            IndexError: if the shoe is empty. Callers must reshuffle before
                a round starts; running dry mid-hand is not recoverable.
        """
        if not self._cards:
            raise IndexError("Cannot draw from empty shoe")
        return self._cards.pop()

    def stack(self, cards: Sequence[Card]) -> None:
        """Place cards on top of the shoe so they are drawn in the given order."""
        self._cards.extend(reversed([card.revealed() for card in cards]))

    @property
    def needs_shuffle(self) -> bool:
        """Check if the cut card has come out."""
        return self.cards_dealt >= int(self.total_cards * self._penetration)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Cards drawn since the last shuffle (stacked cards count as extra)."""
        return max(self.total_cards - len(self._cards), 0)

    @property
    def total_cards(self) -> int:
        return self._num_decks * 52

    @property
    def num_decks(self) -> int:
        return self._num_decks

    @property
    def penetration(self) -> float:
        return self._penetration

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


class Deck(Shoe):
    """A single 52-card deck, dealt to the last card."""

    def __init__(self, rng: Random | None = None) -> None:
        super().__init__(num_decks=1, penetration=1.0, rng=rng)
