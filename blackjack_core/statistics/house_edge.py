"""House edge estimates per rule set."""

from decimal import Decimal

from blackjack_core.rules import RuleSet

# Percentage points added to the edge; negative values favour the player.
_DECK_EFFECTS = {
    1: Decimal("-0.48"),
    2: Decimal("-0.19"),
    4: Decimal("-0.06"),
    6: Decimal("0.00"),
    8: Decimal("0.02"),
}
_H17 = Decimal("0.22")
_SIX_TO_FIVE = Decimal("1.39")
_EVEN_MONEY = Decimal("2.27")
_NO_DAS = Decimal("0.14")
_NO_RESPLIT = Decimal("0.03")
_RESPLIT_ACES = Decimal("-0.08")
_LATE_SURRENDER = Decimal("-0.08")
_EARLY_SURRENDER = Decimal("-0.39")
_NO_PEEK = Decimal("0.11")


class HouseEdgeCalculator:
    """
    Estimate the house edge of a rule set for a basic strategy player.

    Starts from a 0.50% baseline (6 decks, S17, 3:2, DAS, peek, no
    surrender) and adds a fixed effect per rule that differs from it.
    Deck counts without a published figure contribute nothing.
    """

    BASELINE = Decimal("0.50")

    def __init__(self, rules: RuleSet) -> None:
        self.rules = rules

    def breakdown(self) -> list[tuple[str, Decimal]]:
        """
        List the adjustments applied on top of the baseline.

        Returns:
            (rule name, effect) pairs, only for rules that move the edge
        """
        rules = self.rules
        effects: list[tuple[str, Decimal]] = []

        deck_effect = _DECK_EFFECTS.get(rules.num_decks, Decimal("0"))
        if deck_effect:
            effects.append((f"{rules.num_decks} deck(s)", deck_effect))

        if rules.dealer_hits_soft_17:
            effects.append(("dealer hits soft 17", _H17))

        if rules.blackjack_payout <= 1.0:
            effects.append(("blackjack pays even money", _EVEN_MONEY))
        elif rules.blackjack_payout <= 1.2:
            effects.append(("blackjack pays 6:5", _SIX_TO_FIVE))

        if not rules.double_after_split:
            effects.append(("no double after split", _NO_DAS))
        if not rules.resplit_to_four_hands:
            effects.append(("no resplitting", _NO_RESPLIT))
        if rules.resplit_aces:
            effects.append(("resplit aces", _RESPLIT_ACES))

        if rules.surrender_allowed:
            if rules.late_surrender_only:
                effects.append(("late surrender", _LATE_SURRENDER))
            else:
                effects.append(("early surrender", _EARLY_SURRENDER))

        if not rules.dealer_peeks_for_blackjack:
            effects.append(("dealer does not peek", _NO_PEEK))

        return effects

    def calculate(self) -> Decimal:
        """House edge as a percentage, e.g. Decimal("0.50") for 0.50%."""
        return self.BASELINE + sum(
            (effect for _, effect in self.breakdown()), Decimal("0")
        )
