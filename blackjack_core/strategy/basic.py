"""Basic strategy tables for blackjack."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, NamedTuple

from blackjack_core.cards import Card
from blackjack_core.hand import Hand
from blackjack_core.rules import RuleSet


class Action(Enum):
    """Possible player actions."""

    HIT = auto()
    STAND = auto()
    DOUBLE = auto()
    SPLIT = auto()
    SURRENDER = auto()
    INSURANCE = auto()

    # Conditional table entries (fallback if doubling is not allowed)
    DOUBLE_OR_HIT = auto()  # Double if allowed, else hit
    DOUBLE_OR_STAND = auto()  # Double if allowed, else stand

    def __str__(self) -> str:
        return self.name.replace("_", "/").lower()


class Confidence(Enum):
    """How clear-cut a recommendation is. Never affects legality."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class StrategyAdvice:
    """A recommended action with a short explanation."""

    action: Action
    reason: str
    confidence: Confidence


class _Play(NamedTuple):
    action: Action
    reason: str
    confidence: Confidence = Confidence.HIGH
    fallback_reason: str = ""


# Type aliases for clarity
DealerUpcard = int  # 2-11 (11 = Ace)
TableKey = tuple[int, DealerUpcard]  # (player total or pair card value, upcard)

DEALER_UPCARDS = range(2, 12)
WEAK_UPCARDS = range(2, 7)


class BasicStrategy:
    """
    Basic strategy lookup tables.

    Pre-computed dictionaries for O(1) lookup. The tables hold what to do
    with every option open; rule and legality restrictions are applied when
    an entry is resolved.
    """

    def __init__(self) -> None:
        """Build the surrender, pair, soft and hard tables."""
        self._surrender_table = self._build_surrender_table()
        self._pair_table = self._build_pair_table()
        self._soft_table = self._build_soft_table()
        self._hard_table = self._build_hard_table()

    def advise(
        self,
        hand: Hand,
        dealer_up_card: Card,
        can_double: bool,
        can_split: bool,
        rules: RuleSet | None = None,
        splits_so_far: int = 0,
        is_after_split: bool = False,
    ) -> StrategyAdvice:
        """
        Get the basic strategy recommendation for a hand.

        Args:
            hand: The player's hand
            dealer_up_card: The dealer's face-up card
            can_double: Whether doubling is currently legal
            can_split: Whether splitting is currently legal
            rules: Table rules (enables surrender and rule-aware pair play)
            splits_so_far: Splits already made by the player this round
            is_after_split: Whether the hand came from a split

        Returns:
            The recommended action; never one the caller marked illegal
        """
        if dealer_up_card.hidden:
            raise ValueError("advice needs a face-up dealer card")

        value, is_soft, _, _ = hand.evaluate()
        dealer_value = dealer_up_card.value

        # Surrender first: unsplit two-card hard totals only
        if (
            rules is not None
            and rules.surrender_allowed
            and len(hand) == 2
            and not is_after_split
            and not is_soft
        ):
            play = self._surrender_table.get((value, dealer_value))
            if play is not None:
                return self._resolve(play, can_double=False)

        if rules is not None and is_after_split and not rules.double_after_split:
            can_double = False

        if can_split and hand.is_pair:
            pair_value = hand.cards[0].value
            if (
                pair_value == 11
                and splits_so_far > 0
                and rules is not None
                and not rules.resplit_aces
            ):
                return StrategyAdvice(
                    Action.HIT,
                    "Cannot resplit Aces under current rules",
                    Confidence.HIGH,
                )
            play = self._pair_table.get((pair_value, dealer_value))
            if play is not None:
                return self._resolve(play, can_double)

        if is_soft:
            play = self._soft_table.get((value, dealer_value))
            if play is not None:
                return self._resolve(play, can_double)

        play = self._hard_table.get((value, dealer_value))
        if play is not None:
            return self._resolve(play, can_double)

        # Default actions for edge cases
        if value >= 17:
            return StrategyAdvice(Action.STAND, "17+ is strong enough to stand", Confidence.HIGH)
        return StrategyAdvice(Action.HIT, "Hit to improve the hand", Confidence.HIGH)

    def _resolve(self, play: _Play, can_double: bool) -> StrategyAdvice:
        """Resolve conditional entries based on whether doubling is allowed."""
        action = play.action
        reason = play.reason
        if action in (Action.DOUBLE_OR_HIT, Action.DOUBLE_OR_STAND):
            if can_double:
                action = Action.DOUBLE
            else:
                action = Action.HIT if action is Action.DOUBLE_OR_HIT else Action.STAND
                reason = play.fallback_reason or reason
        return StrategyAdvice(action, reason, play.confidence)

    def _build_surrender_table(self) -> Mapping[TableKey, _Play]:
        """Build the hard-total surrender table."""
        table: dict[TableKey, _Play] = {}

        for dealer in (9, 10, 11):
            table[(16, dealer)] = _Play(
                Action.SURRENDER,
                "Surrender hard 16 against dealer's strong cards",
            )
        table[(15, 10)] = _Play(Action.SURRENDER, "Surrender hard 15 against dealer 10")

        return table

    def _build_pair_table(self) -> Mapping[TableKey, _Play]:
        """Build pair splitting strategy table, keyed by the card value of the pair."""
        H = Action.HIT
        S = Action.STAND
        P = Action.SPLIT
        D = Action.DOUBLE_OR_HIT

        table: dict[TableKey, _Play] = {}

        for dealer in DEALER_UPCARDS:
            # Aces and 8s: always split
            table[(11, dealer)] = _Play(P, "Always split Aces - each Ace can become 21")
            table[(8, dealer)] = _Play(
                P, "Always split 8s - 16 is a weak hand, but 8s have potential"
            )
            # 10s: never split
            table[(10, dealer)] = _Play(S, "Never split 10s - 20 is an excellent hand")

            # 5s: play as hard 10
            if dealer <= 9:
                table[(5, dealer)] = _Play(
                    D,
                    "Double down with pair of 5s against weak dealer cards",
                    fallback_reason="Hit with pair of 5s - doubling is not available",
                )
            else:
                table[(5, dealer)] = _Play(H, "Hit with pair of 5s against strong dealer cards")

            # 4s
            if dealer in (5, 6):
                table[(4, dealer)] = _Play(
                    P, "Split 4s against dealer's weakest cards", Confidence.MEDIUM
                )
            else:
                table[(4, dealer)] = _Play(H, "Hit with pair of 4s - splitting creates weak hands")

            # 2s, 3s and 7s
            for pair in (2, 3, 7):
                if dealer <= 7:
                    table[(pair, dealer)] = _Play(P, f"Split {pair}s against dealer's weak cards")
                else:
                    table[(pair, dealer)] = _Play(
                        H, "Hit - splitting would create weak hands", Confidence.MEDIUM
                    )

            # 6s
            if dealer in WEAK_UPCARDS:
                table[(6, dealer)] = _Play(P, "Split 6s against dealer's weak cards")
            else:
                table[(6, dealer)] = _Play(
                    H, "Hit - splitting would create weak hands", Confidence.MEDIUM
                )

            # 9s
            if dealer in WEAK_UPCARDS or dealer in (8, 9):
                table[(9, dealer)] = _Play(P, "Split 9s against these dealer cards")
            else:
                table[(9, dealer)] = _Play(S, "18 is strong against dealer's 7, 10, or Ace")

        return table

    def _build_soft_table(self) -> Mapping[TableKey, _Play]:
        """Build soft totals strategy table."""
        H = Action.HIT
        S = Action.STAND
        D = Action.DOUBLE_OR_HIT
        Ds = Action.DOUBLE_OR_STAND

        table: dict[TableKey, _Play] = {}

        for dealer in DEALER_UPCARDS:
            # Soft 12 (A,A unsplit)
            table[(12, dealer)] = _Play(H, "Hit soft 12 - no risk of busting")

            # Soft 13-17
            for total in range(13, 18):
                if dealer in (4, 5, 6):
                    table[(total, dealer)] = _Play(
                        D,
                        "Double soft hands against dealer's weakest cards",
                        fallback_reason="Hit to improve soft hand - no risk of busting",
                    )
                else:
                    table[(total, dealer)] = _Play(
                        H, "Hit to improve soft hand - no risk of busting"
                    )

            # Soft 18
            if dealer in WEAK_UPCARDS:
                table[(18, dealer)] = _Play(
                    Ds,
                    "Double soft 18 against dealer's weak cards",
                    fallback_reason="Stand on soft 18 against dealer's weak cards",
                )
            elif dealer in (7, 8):
                table[(18, dealer)] = _Play(S, "Soft 18 is competitive against 7 or 8")
            else:
                table[(18, dealer)] = _Play(H, "Hit soft 18 against dealer's strong cards")

            # Soft 19-21
            for total in range(19, 22):
                table[(total, dealer)] = _Play(S, "Soft 19-21 is very strong - stand")

        return table

    def _build_hard_table(self) -> Mapping[TableKey, _Play]:
        """Build hard totals strategy table."""
        H = Action.HIT
        S = Action.STAND
        D = Action.DOUBLE_OR_HIT

        table: dict[TableKey, _Play] = {}

        for dealer in DEALER_UPCARDS:
            # Hard 8 or less: always hit
            for total in range(2, 9):
                table[(total, dealer)] = _Play(H, "Always hit on 8 or less - no risk of busting")

            # Hard 9
            if dealer in (3, 4, 5, 6):
                table[(9, dealer)] = _Play(
                    D,
                    "Double on 9 against dealer's weakest cards",
                    fallback_reason="Hit on 9 - need to improve this hand",
                )
            else:
                table[(9, dealer)] = _Play(H, "Hit on 9 - need to improve this hand")

            # Hard 10
            if dealer <= 9:
                table[(10, dealer)] = _Play(
                    D,
                    "Double on 10 against dealer's weak cards",
                    fallback_reason="Hit on 10 - good chance to make a strong hand",
                )
            else:
                table[(10, dealer)] = _Play(H, "Hit on 10 - good chance to make a strong hand")

            # Hard 11
            table[(11, dealer)] = _Play(
                D,
                "Always double on 11 - best doubling opportunity",
                fallback_reason="Hit on 11 - can't bust and likely to improve",
            )

            # Hard 12
            if dealer in (4, 5, 6):
                table[(12, dealer)] = _Play(
                    S, "Stand on 12 against dealer's weakest cards", Confidence.MEDIUM
                )
            else:
                table[(12, dealer)] = _Play(
                    H, "Hit 12 - risk is worth the potential improvement"
                )

            # Hard 13-16
            for total in range(13, 17):
                if dealer in WEAK_UPCARDS:
                    table[(total, dealer)] = _Play(
                        S, "Stand on stiff hands against dealer's weak cards"
                    )
                else:
                    table[(total, dealer)] = _Play(
                        H, "Hit stiff hands against dealer's strong cards"
                    )

            # Hard 17+: always stand
            for total in range(17, 22):
                table[(total, dealer)] = _Play(S, "17+ is strong enough to stand")

        return table

    @property
    def hard_table(self) -> Mapping[TableKey, _Play]:
        """Return the hard totals strategy table."""
        return self._hard_table

    @property
    def soft_table(self) -> Mapping[TableKey, _Play]:
        """Return the soft totals strategy table."""
        return self._soft_table

    @property
    def pair_table(self) -> Mapping[TableKey, _Play]:
        """Return the pair splitting strategy table."""
        return self._pair_table


_BASIC_STRATEGY = BasicStrategy()


def advise(
    hand: Hand,
    dealer_up_card: Card,
    can_double: bool,
    can_split: bool,
    rules: RuleSet | None = None,
    splits_so_far: int = 0,
    is_after_split: bool = False,
) -> StrategyAdvice:
    """Basic strategy advice using the shared read-only tables."""
    return _BASIC_STRATEGY.advise(
        hand,
        dealer_up_card,
        can_double,
        can_split,
        rules=rules,
        splits_so_far=splits_so_far,
        is_after_split=is_after_split,
    )
