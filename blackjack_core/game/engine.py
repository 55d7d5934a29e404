"""Blackjack table engine with a round state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from blackjack_core import legality
from blackjack_core.cards import Card, Shoe
from blackjack_core.dealer import dealer_should_hit
from blackjack_core.game.events import EventEmitter, EventType, GameEvent
from blackjack_core.game.player import PlayerRoundState
from blackjack_core.game.state import ActiveHand, RoundPhase
from blackjack_core.hand import Hand
from blackjack_core.payout import (
    HandOutcome,
    hand_outcome,
    insurance_payout,
    payout,
    surrender_refund,
)
from blackjack_core.rules import GameVariant, RuleSet
from blackjack_core.statistics.tracker import StatisticsCollector
from blackjack_core.strategy.basic import Action, StrategyAdvice, advise
from blackjack_core.tables import TableConfig
from config import GameConfig, config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSnapshot:
    """Read-only copy of a table for presentation."""

    phase: RoundPhase
    round_number: int
    variant: GameVariant
    current_seat: int | None
    dealer: Hand
    players: tuple[PlayerRoundState, ...]


class BlackjackTable:
    """
    Blackjack table engine using a state machine.

    The table owns its rules, shoe, player records and dealer hand; nothing
    is shared between tables. Requests that are not currently legal return
    False, emit an INVALID_ACTION or INSUFFICIENT_FUNDS event and change
    nothing.
    """

    # State machine states
    STATES = [p.name.lower() for p in RoundPhase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "begin_dealing", "source": "betting", "dest": "dealing"},
        {"trigger": "begin_playing", "source": "dealing", "dest": "playing"},
        {"trigger": "begin_dealer", "source": ["dealing", "playing"], "dest": "dealer"},
        {"trigger": "begin_settlement", "source": ["playing", "dealer"], "dest": "finished"},
        {"trigger": "return_to_betting", "source": "finished", "dest": "betting"},
        {
            "trigger": "discard_round",
            "source": ["dealing", "playing", "dealer"],
            "dest": "betting",
        },
    ]

    def __init__(
        self,
        rules: RuleSet | None = None,
        table: TableConfig | None = None,
        rng: Random | None = None,
        statistics: StatisticsCollector | None = None,
        shoe: Shoe | None = None,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize a new table.

        Args:
            rules: Game rules (the configured variant if not provided)
            table: Betting limits (the configured table level if not provided)
            rng: Random number generator for reproducible shuffles
            statistics: Collaborator receiving hand results and decisions
            shoe: Pre-built shoe, used as is (for stacked test decks)
            game_config: Table defaults (the global config if not provided)
        """
        self._config = game_config or config.game
        self.rules = rules or RuleSet.for_variant(self._config.variant)
        self.table = table or TableConfig.for_level(self._config.table_level)
        self.statistics = statistics
        self._rng = rng

        if shoe is None:
            shoe = self._new_shoe()
        self.shoe = shoe

        self.players: list[PlayerRoundState] = []
        self.dealer_hand = Hand()
        self.current_seat: int | None = None
        self.round_number = 0
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_phase",
        )

    @property
    def phase(self) -> RoundPhase:
        """Get the current round phase."""
        return RoundPhase[self._machine_state.upper()]  # type: ignore[attr-defined]

    @property
    def dealer_up_card(self) -> Card | None:
        """The dealer's first face-up card."""
        visible = self.dealer_hand.visible_cards
        return visible[0] if visible else None

    @property
    def insurance_open(self) -> bool:
        """Check if players are still deciding on insurance."""
        return self.phase == RoundPhase.DEALING and any(
            p.can_insurance for p in self.players
        )

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to table events."""
        self.events.subscribe(handler, event_type)

    def snapshot(self) -> TableSnapshot:
        """Copy of the table state for read-only rendering."""
        return TableSnapshot(
            phase=self.phase,
            round_number=self.round_number,
            variant=self.rules.variant,
            current_seat=self.current_seat,
            dealer=self.dealer_hand.copy(),
            players=tuple(p.copy() for p in self.players),
        )

    # ------------------------------------------------------------------
    # Betting phase
    # ------------------------------------------------------------------

    def add_player(self, name: str, chips: int | None = None) -> PlayerRoundState | None:
        """
        Seat a new player.

        Args:
            name: Display name
            chips: Starting chip balance (configured default if not provided)

        Returns:
            The new player record, or None if the table is full or mid-round
        """
        if self.phase != RoundPhase.BETTING:
            self._reject("Players can only join between rounds")
            return None
        if len(self.players) >= self._config.max_seats:
            self._reject("Table is full", seats=self._config.max_seats)
            return None

        starting = self._config.starting_chips if chips is None else chips
        if starting < 0:
            raise ValueError("chips must not be negative")

        player = PlayerRoundState(name=name, seat=len(self.players), chips=starting)
        self.players.append(player)
        self.events.emit_new(EventType.PLAYER_JOINED, seat=player.seat, name=name)
        self._publish()
        return player

    def remove_player(self, seat: int) -> bool:
        """Remove a player between rounds; their stake goes back to their chips."""
        if self.phase != RoundPhase.BETTING:
            return self._reject("Players can only leave between rounds", seat=seat)
        player = self._player_at(seat)
        if player is None:
            return self._reject("No player in that seat", seat=seat)

        player.chips += player.bet
        player.hand.bet = 0
        self.players.remove(player)
        for index, other in enumerate(self.players):
            other.seat = index

        self.events.emit_new(EventType.PLAYER_LEFT, name=player.name, chips=player.chips)
        self._publish()
        return True

    def set_variant(self, variant: GameVariant | str) -> bool:
        """Swap the table's rules for another variant's preset, between rounds."""
        if self.phase != RoundPhase.BETTING:
            return self._reject("Variant can only change between rounds")

        self.rules = RuleSet.for_variant(variant)
        self.shoe = self._new_shoe()
        self.events.emit_new(
            EventType.VARIANT_CHANGED,
            variant=self.rules.variant.value,
            name=self.rules.name,
        )
        self._publish()
        return True

    def place_bet(self, seat: int, amount: int) -> bool:
        """
        Place or replace a player's bet for the next round.

        The stake leaves the chip balance immediately. A player whose stack
        is below the table minimum may bet any amount up to the whole stack.

        Args:
            seat: Player seat
            amount: Bet amount

        Returns:
            True if the bet was accepted
        """
        if self.phase != RoundPhase.BETTING:
            return self._reject("Cannot bet in current phase", phase=self.phase.name)
        player = self._player_at(seat)
        if player is None:
            return self._reject("No player in that seat", seat=seat)

        available = player.chips + player.bet
        if amount > available:
            return self._reject(
                "Not enough chips for that bet",
                EventType.INSUFFICIENT_FUNDS,
                seat=seat,
                required=amount,
                available=available,
            )
        if not self.table.is_valid_bet(amount, available):
            return self._reject(
                f"Bet must be between {self.table.effective_min_bet(available)} "
                f"and {self.table.effective_max_bet(available)}",
                seat=seat,
                amount=amount,
            )

        player.chips = available - amount
        player.hand.bet = amount
        self.events.emit_new(EventType.BET_PLACED, seat=seat, amount=amount)
        self._publish()
        return True

    def deal(self) -> bool:
        """
        Start the round: deal two cards to every player and the dealer's cards.

        Returns:
            True if the round started
        """
        if self.phase != RoundPhase.BETTING:
            return self._reject("Cannot deal in current phase", phase=self.phase.name)
        if not self.players:
            return self._reject("No players at the table")
        if any(p.bet <= 0 for p in self.players):
            return self._reject("Every player must place a bet before the deal")

        if self.shoe.reshuffle_if_needed(self._config.reshuffle_threshold):
            logger.debug("Shoe reshuffled before round %d", self.round_number + 1)
            self.events.emit_new(EventType.SHOE_SHUFFLED, cards=self.shoe.total_cards)

        self.round_number += 1
        self.dealer_hand = Hand()
        self.current_seat = None
        self.begin_dealing()
        self.events.emit_new(
            EventType.ROUND_STARTED,
            round=self.round_number,
            players=len(self.players),
        )

        # Players, dealer, players, dealer (hole card variants only)
        for player in self.players:
            self._deal_card_to_hand(player.hand, f"seat {player.seat}")
        self._deal_card_to_hand(
            self.dealer_hand, "dealer", face_up=self.rules.no_hole_card
        )
        for player in self.players:
            self._deal_card_to_hand(player.hand, f"seat {player.seat}")
        if not self.rules.no_hole_card:
            self._deal_card_to_hand(self.dealer_hand, "dealer")

        for player in self.players:
            if player.hand.is_blackjack:
                self.events.emit_new(EventType.PLAYER_BLACKJACK, seat=player.seat)

        self._refresh_legality()
        if self.insurance_open:
            self.events.emit_new(
                EventType.INSURANCE_OFFERED,
                seats=[p.seat for p in self.players if p.can_insurance],
            )
            self._publish()
            return True

        self._complete_dealing()
        return True

    # ------------------------------------------------------------------
    # Insurance (dealer shows an Ace)
    # ------------------------------------------------------------------

    def take_insurance(self, seat: int) -> bool:
        """Place an insurance bet of half the main bet."""
        player = self._player_at(seat)
        if player is None or self.phase != RoundPhase.DEALING or not player.can_insurance:
            return self._reject("Insurance not available", seat=seat)

        amount = player.bet // 2
        player.chips -= amount
        player.insurance_bet = amount
        player.has_insurance = True
        player.insurance_decided = True
        self.events.emit_new(EventType.INSURANCE_TAKEN, seat=seat, amount=amount)
        return self._after_insurance_decision()

    def decline_insurance(self, seat: int) -> bool:
        """Decline the insurance offer."""
        player = self._player_at(seat)
        if player is None or self.phase != RoundPhase.DEALING or not player.can_insurance:
            return self._reject("Insurance not offered", seat=seat)

        player.insurance_decided = True
        self.events.emit_new(EventType.INSURANCE_DECLINED, seat=seat)
        return self._after_insurance_decision()

    def _after_insurance_decision(self) -> bool:
        self._refresh_legality()
        if self.insurance_open:
            self._publish()
            return True
        self._complete_dealing()
        return True

    def _complete_dealing(self) -> None:
        """Dealer peek, then move on to the players or straight to the dealer."""
        up_card = self.dealer_up_card
        if (
            self.rules.dealer_peeks_for_blackjack
            and up_card is not None
            and (up_card.is_ace or up_card.is_ten_value)
            and self.dealer_hand.peek().is_blackjack
        ):
            self.begin_dealer()
            self._reveal_dealer()
        elif all(p.is_done for p in self.players):
            self.begin_dealer()
        else:
            self.begin_playing()
            self.current_seat = self._next_seat(0)
            self._select_active_hand(self.players[self.current_seat])

        self._refresh_legality()
        self._publish()

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def hit(self, seat: int | None = None) -> bool:
        """Take another card on the active hand."""
        player = self._acting_player(seat, "hit")
        if player is None:
            return False
        hand = player.current_hand
        if not legality.can_hit(hand):
            return self._reject("Cannot hit", seat=player.seat)

        self._record_decision(player, Action.HIT)
        player.has_acted = True
        self._deal_card_to_hand(hand, f"seat {player.seat}")
        self.events.emit_new(EventType.PLAYER_HIT, seat=player.seat, hand_value=hand.value)
        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, seat=player.seat)
        return self._advance()

    def stand(self, seat: int | None = None) -> bool:
        """Keep the active hand."""
        player = self._acting_player(seat, "stand")
        if player is None:
            return False

        self._record_decision(player, Action.STAND)
        hand = player.current_hand
        player.has_acted = True
        hand.is_standing = True
        self.events.emit_new(EventType.PLAYER_STAND, seat=player.seat, hand_value=hand.value)
        return self._advance()

    def double(self, seat: int | None = None) -> bool:
        """Double the active hand's bet and take exactly one more card."""
        player = self._acting_player(seat, "double")
        if player is None:
            return False
        if not player.can_double:
            if player.chips < player.current_hand.bet:
                return self._reject(
                    "Not enough chips to double",
                    EventType.INSUFFICIENT_FUNDS,
                    seat=player.seat,
                )
            return self._reject("Cannot double", seat=player.seat)

        self._record_decision(player, Action.DOUBLE)
        hand = player.current_hand
        player.chips -= hand.bet
        hand.bet *= 2
        hand.is_doubled = True
        player.has_acted = True
        self._deal_card_to_hand(hand, f"seat {player.seat}")
        self.events.emit_new(
            EventType.PLAYER_DOUBLE,
            seat=player.seat,
            hand_value=hand.value,
            new_bet=hand.bet,
        )
        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, seat=player.seat)
        return self._advance()

    def split(self, seat: int | None = None) -> bool:
        """Split a pair into a main and a split hand, one new card each."""
        player = self._acting_player(seat, "split")
        if player is None:
            return False
        if not player.can_split:
            if player.hand.is_pair and player.chips < player.hand.bet:
                return self._reject(
                    "Not enough chips to split",
                    EventType.INSUFFICIENT_FUNDS,
                    seat=player.seat,
                )
            return self._reject("Cannot split", seat=player.seat)

        self._record_decision(player, Action.SPLIT)
        hand = player.hand
        player.chips -= hand.bet

        second_card = hand.cards.pop()
        split_hand = Hand(cards=[second_card], bet=hand.bet, is_split_hand=True)
        hand.is_split_hand = True
        player.split_hand = split_hand
        player.split_count += 1
        player.has_split = True
        player.has_acted = True
        player.active_hand = ActiveHand.MAIN

        self._deal_card_to_hand(hand, f"seat {player.seat}")
        self._deal_card_to_hand(split_hand, f"seat {player.seat} split")
        self.events.emit_new(
            EventType.PLAYER_SPLIT,
            seat=player.seat,
            hand1_value=hand.value,
            hand2_value=split_hand.value,
        )
        return self._advance()

    def surrender(self, seat: int | None = None) -> bool:
        """Give up the hand and take back half the bet right away."""
        player = self._acting_player(seat, "surrender")
        if player is None:
            return False
        if not player.can_surrender:
            return self._reject("Surrender not allowed", seat=player.seat)

        self._record_decision(player, Action.SURRENDER)
        hand = player.current_hand
        refund = surrender_refund(hand.bet)
        player.chips += refund
        hand.is_surrendered = True
        player.has_surrendered = True
        player.has_acted = True
        self.events.emit_new(EventType.PLAYER_SURRENDER, seat=player.seat, refund=refund)
        return self._advance()

    def advise(self, seat: int | None = None) -> StrategyAdvice | None:
        """Basic strategy advice for the active hand, or None when no one is acting."""
        if self.phase != RoundPhase.PLAYING or self.current_seat is None:
            return None
        if seat is not None and seat != self.current_seat:
            return None
        up_card = self.dealer_up_card
        if up_card is None:
            return None

        player = self.players[self.current_seat]
        return advise(
            player.current_hand,
            up_card,
            player.can_double,
            player.can_split,
            rules=self.rules,
            splits_so_far=player.split_count,
            is_after_split=player.has_split,
        )

    def _acting_player(self, seat: int | None, action: str) -> PlayerRoundState | None:
        """The current player if ``seat`` may act now, otherwise reject."""
        if self.phase != RoundPhase.PLAYING or self.current_seat is None:
            self._reject(f"Cannot {action} in current phase", phase=self.phase.name)
            return None
        if seat is not None and seat != self.current_seat:
            self._reject(f"Not seat {seat}'s turn", seat=seat, current=self.current_seat)
            return None
        player = self.players[self.current_seat]
        if player.current_hand.is_finished:
            self._reject(f"Cannot {action} a finished hand", seat=player.seat)
            return None
        return player

    def _record_decision(self, player: PlayerRoundState, action: Action) -> None:
        """Report the decision against the advice for the hand as it stood."""
        if self.statistics is None:
            return
        advice = self.advise()
        up_card = self.dealer_up_card
        if advice is None or up_card is None:
            return
        self.statistics.record_strategy_decision(
            action,
            advice.action,
            action is advice.action,
            player.current_hand.value,
            up_card.value,
        )

    def _advance(self) -> bool:
        """Move to the split hand, the next player, or the dealer."""
        player = self.players[self.current_seat]  # type: ignore[index]
        self._select_active_hand(player)

        if not player.is_done:
            self._refresh_legality()
            self._publish()
            return True

        next_seat = self._next_seat(player.seat + 1)
        if next_seat is not None:
            self.current_seat = next_seat
            self._select_active_hand(self.players[next_seat])
            self._refresh_legality()
            self._publish()
            return True

        self.current_seat = None
        all_lost = all(
            hand.is_busted or hand.is_surrendered
            for p in self.players
            for hand in p.hands
        )
        if all_lost:
            # Nothing left for the dealer to beat
            self._settle()
        else:
            self.begin_dealer()
            self._refresh_legality()
            self._publish()
        return True

    def _next_seat(self, start: int) -> int | None:
        for player in self.players[start:]:
            if not player.is_done:
                return player.seat
        return None

    @staticmethod
    def _select_active_hand(player: PlayerRoundState) -> None:
        if (
            player.hand.is_finished
            and player.split_hand is not None
            and not player.split_hand.is_finished
        ):
            player.active_hand = ActiveHand.SPLIT

    # ------------------------------------------------------------------
    # Dealer phase
    # ------------------------------------------------------------------

    def dealer_step(self) -> bool:
        """
        Perform one dealer step.

        The first step reveals the hole card (or deals the second card under
        no-hole-card rules); every later step applies the dealer policy once.
        Standing or busting settles the round.
        """
        if self.phase != RoundPhase.DEALER:
            return self._reject("Dealer is not playing", phase=self.phase.name)

        if self.dealer_hand.has_hidden_card:
            self._reveal_dealer()
            self._publish()
            return True

        if len(self.dealer_hand) < 2:
            self._deal_card_to_hand(self.dealer_hand, "dealer")
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer_hand.cards[-1]),
                hand_value=self.dealer_hand.value,
            )
            if self.dealer_hand.is_blackjack:
                self.events.emit_new(EventType.DEALER_BLACKJACK)
            self._publish()
            return True

        if dealer_should_hit(self.dealer_hand, self.rules):
            self._deal_card_to_hand(self.dealer_hand, "dealer")
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)
            if not self.dealer_hand.is_busted:
                self._publish()
                return True
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        self._settle()
        return True

    def play_dealer(self) -> bool:
        """Run dealer steps until the round is settled."""
        if self.phase != RoundPhase.DEALER:
            return self._reject("Dealer is not playing", phase=self.phase.name)
        while self.phase == RoundPhase.DEALER:
            self.dealer_step()
        return True

    def _reveal_dealer(self) -> None:
        if self.dealer_hand.reveal():
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer_hand.cards[0]),
                hand_value=self.dealer_hand.value,
            )
            if self.dealer_hand.is_blackjack:
                self.events.emit_new(EventType.DEALER_BLACKJACK)

    # ------------------------------------------------------------------
    # Settlement and round reset
    # ------------------------------------------------------------------

    def _settle(self) -> None:
        """Pay every hand and the insurance bets, then wait in FINISHED."""
        self.begin_settlement()
        self._reveal_dealer()

        for player in self.players:
            returned = 0
            for hand in player.hands:
                if hand.is_surrendered:
                    # Refund was paid when the hand was surrendered
                    hand_return = surrender_refund(hand.bet)
                else:
                    hand_return = payout(hand.bet, hand, self.dealer_hand, self.rules)
                    player.chips += hand_return
                returned += hand_return
                self._report_hand(player, hand, hand_return)

            if player.insurance_bet:
                insurance_return = insurance_payout(player.insurance_bet, self.dealer_hand)
                player.chips += insurance_return
                returned += insurance_return
                if insurance_return:
                    self.events.emit_new(
                        EventType.INSURANCE_WINS, seat=player.seat, amount=insurance_return
                    )
                else:
                    self.events.emit_new(
                        EventType.INSURANCE_LOSES,
                        seat=player.seat,
                        amount=player.insurance_bet,
                    )

            player.last_hand_winnings = returned - player.total_wagered
            player.clear_flags()

        logger.info(
            "Round %d settled: dealer %s, results %s",
            self.round_number,
            self.dealer_hand,
            {p.name: p.last_hand_winnings for p in self.players},
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=self.round_number,
            dealer_value=self.dealer_hand.value,
            results={p.seat: p.last_hand_winnings for p in self.players},
        )
        self._publish()

    def _report_hand(self, player: PlayerRoundState, hand: Hand, hand_return: int) -> None:
        outcome = hand_outcome(hand, self.dealer_hand)
        net = hand_return - hand.bet
        event_type = {
            HandOutcome.WIN: EventType.PLAYER_WINS,
            HandOutcome.PUSH: EventType.PUSH,
        }.get(outcome, EventType.PLAYER_LOSES)
        self.events.emit_new(
            event_type,
            seat=player.seat,
            split_hand=hand is player.split_hand,
            outcome=outcome.value,
            amount=net,
        )
        if self.statistics is not None:
            self.statistics.record_hand_result(
                outcome,
                net,
                hand.is_blackjack,
                self.table.level,
                self.rules.variant,
            )

    def new_round(self) -> bool:
        """Collect winnings and return to betting."""
        if self.phase != RoundPhase.FINISHED:
            return self._reject("Round is not finished", phase=self.phase.name)

        for player in self.players:
            player.reset_for_round()
        self.dealer_hand = Hand()
        self.current_seat = None
        self.return_to_betting()
        self._publish()
        return True

    def abandon_round(self) -> bool:
        """Discard the round in progress, refunding every stake still on the table."""
        if self.phase not in (RoundPhase.DEALING, RoundPhase.PLAYING, RoundPhase.DEALER):
            return self._reject("No round in progress", phase=self.phase.name)

        for player in self.players:
            already_returned = sum(
                surrender_refund(hand.bet) for hand in player.hands if hand.is_surrendered
            )
            player.chips += player.total_wagered - already_returned
            player.reset_for_round()
        self.dealer_hand = Hand()
        self.current_seat = None
        self.discard_round()
        self.events.emit_new(EventType.ROUND_ABANDONED, round=self.round_number)
        self._publish()
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _refresh_legality(self) -> None:
        """Recompute every player's legality flags for the current phase."""
        up_card = self.dealer_up_card
        for index, player in enumerate(self.players):
            player.clear_flags()

            if self.phase == RoundPhase.DEALING:
                stake = player.bet // 2
                player.can_insurance = (
                    not player.insurance_decided
                    and legality.can_insurance(up_card, self.rules)
                    and 0 < stake <= player.chips
                )
            elif self.phase == RoundPhase.PLAYING and index == self.current_seat:
                hand = player.current_hand
                if hand.is_finished:
                    continue
                can_afford = player.chips >= hand.bet
                player.can_double = can_afford and legality.can_double(
                    hand, self.rules, is_after_split=player.has_split
                )
                player.can_split = (
                    can_afford
                    and not player.has_split
                    and legality.can_split(hand, self.rules, player.split_count)
                )
                player.can_surrender = legality.can_surrender(
                    hand,
                    self.rules,
                    is_first_action=not player.has_acted,
                    is_split_hand=player.has_split,
                )

    def _deal_card_to_hand(self, hand: Hand, owner: str, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.shoe.draw()
        if not face_up:
            card = card.face_down()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=owner,
            hand_value=hand.value,
        )
        return card

    def _player_at(self, seat: int) -> PlayerRoundState | None:
        if 0 <= seat < len(self.players):
            return self.players[seat]
        return None

    def _new_shoe(self) -> Shoe:
        shoe = Shoe(
            num_decks=self.rules.num_decks,
            penetration=self._config.penetration,
            rng=self._rng,
        )
        shoe.shuffle()
        return shoe

    def _reject(
        self,
        message: str,
        event_type: EventType = EventType.INVALID_ACTION,
        **data: object,
    ) -> bool:
        logger.debug("Rejected: %s %s", message, data)
        self.events.emit_new(event_type, message=message, **data)
        return False

    def _publish(self) -> None:
        self.events.emit_new(EventType.STATE_CHANGED, snapshot=self.snapshot())

    def _log_phase(self) -> None:
        logger.debug("Table phase -> %s", self.phase)
