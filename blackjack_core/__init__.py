"""Casino blackjack rules engine - UI-agnostic."""

from blackjack_core.cards import Card, Deck, Rank, Shoe, Suit, cards_from_string
from blackjack_core.hand import Hand, HandValue, evaluate
from blackjack_core.rules import GameVariant, RuleSet
from blackjack_core.tables import TableConfig, TableLevel

__all__ = [
    "Card",
    "Deck",
    "Shoe",
    "Rank",
    "Suit",
    "cards_from_string",
    "Hand",
    "HandValue",
    "evaluate",
    "GameVariant",
    "RuleSet",
    "TableConfig",
    "TableLevel",
]
