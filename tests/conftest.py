"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from blackjack_core.cards import Card, Deck, Shoe, Rank, Suit, cards_from_string
from blackjack_core.game import BlackjackTable
from blackjack_core.hand import Hand
from blackjack_core.rules import RuleSet
from blackjack_core.statistics import SessionStatistics
from blackjack_core.tables import TableConfig, TableLevel


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def shoe(rng):
    """A shuffled 6-deck shoe."""
    s = Shoe(num_decks=6, penetration=0.75, rng=rng)
    s.shuffle()
    return s


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return Hand.of(Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS))


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand.of(Card(Rank.ACE, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS))


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return Hand.of(Card(Rank.TEN, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS))


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return Hand.of(Card(Rank.EIGHT, Suit.SPADES), Card(Rank.EIGHT, Suit.HEARTS))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand.of(
        Card(Rank.TEN, Suit.SPADES),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.KING, Suit.CLUBS),
    )


@pytest.fixture
def vegas():
    """Vegas rules."""
    return RuleSet.vegas()


@pytest.fixture
def european():
    """European no-hole-card rules."""
    return RuleSet.european()


@pytest.fixture
def atlantic_city():
    """Atlantic City rules."""
    return RuleSet.atlantic_city()


@pytest.fixture
def stats():
    """An empty in-memory statistics collector."""
    return SessionStatistics()


@pytest.fixture
def make_table(rng):
    """
    Factory for tables with seated players who have already bet.

    The shoe is left unshuffled so ``deal_rigged`` can stack it.
    """

    def make(
        rules=None,
        players=1,
        chips=1000,
        bet=10,
        level=TableLevel.BEGINNER,
        statistics=None,
    ):
        rules = rules or RuleSet.vegas()
        table = BlackjackTable(
            rules=rules,
            table=TableConfig.for_level(level),
            rng=rng,
            statistics=statistics,
            shoe=Shoe(num_decks=rules.num_decks, rng=rng),
        )
        for i in range(players):
            table.add_player(f"Player {i + 1}", chips=chips)
            if bet:
                assert table.place_bet(i, bet)
        return table

    return make


@pytest.fixture
def deal_rigged():
    """
    Stack the shoe for one round and deal it.

    ``player_cards`` holds two cards per seat, ``dealer_cards`` the hole card
    then the up card (only the up card under no-hole-card rules), and
    ``draws`` every later card in the order it will be drawn.
    """

    def deal(table, player_cards, dealer_cards, draws=""):
        players = [cards_from_string(cards) for cards in player_cards]
        dealer = cards_from_string(dealer_cards)

        order = [hand[0] for hand in players]
        order.append(dealer[0])
        order += [hand[1] for hand in players]
        if not table.rules.no_hole_card:
            order.append(dealer[1])
        order += cards_from_string(draws)

        table.shoe.stack(order)
        assert table.deal()
        return table

    return deal
