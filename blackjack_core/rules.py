"""Blackjack rule variations: Vegas, European and Atlantic City."""

from dataclasses import dataclass
from enum import Enum


class GameVariant(Enum):
    """Supported casino rule variants."""

    VEGAS = "vegas"
    EUROPEAN = "european"
    ATLANTIC_CITY = "atlantic_city"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules configuration.

    Every legality and dealer-policy function takes a RuleSet explicitly;
    a table owns its own instance and swaps it wholesale on a variant change.
    """

    variant: GameVariant = GameVariant.VEGAS
    name: str = "Vegas Rules"
    description: str = ""

    # Deck configuration
    num_decks: int = 6

    # Dealer rules
    dealer_hits_soft_17: bool = False  # H17 vs S17
    dealer_peeks_for_blackjack: bool = True
    no_hole_card: bool = False  # European: second dealer card after players finish

    # Player options
    double_after_split: bool = True  # DAS
    resplit_aces: bool = False  # RSA
    resplit_to_four_hands: bool = True
    surrender_allowed: bool = False
    late_surrender_only: bool = False

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: float = 1.5

    # Insurance
    insurance_allowed: bool = True
    even_money_on_blackjack: bool = True

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_decks < 1 or self.num_decks > 8:
            raise ValueError("num_decks must be between 1 and 8")
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")
        if self.no_hole_card and self.dealer_peeks_for_blackjack:
            raise ValueError("a dealer without a hole card cannot peek")
        if self.late_surrender_only and not self.surrender_allowed:
            raise ValueError("late_surrender_only requires surrender_allowed")

    @property
    def max_splits(self) -> int:
        """Number of splits allowed in one round (three splits make four hands)."""
        return 3 if self.resplit_to_four_hands else 1

    @classmethod
    def vegas(cls) -> "RuleSet":
        """Classic Las Vegas rules."""
        return cls(
            variant=GameVariant.VEGAS,
            name="Vegas Rules",
            description="Classic Las Vegas blackjack with dealer stands on soft 17",
            num_decks=6,
            dealer_hits_soft_17=False,
            dealer_peeks_for_blackjack=True,
            no_hole_card=False,
            double_after_split=True,
            resplit_aces=False,
            resplit_to_four_hands=True,
            surrender_allowed=False,
            late_surrender_only=False,
            blackjack_payout=1.5,
            insurance_allowed=True,
            even_money_on_blackjack=True,
        )

    @classmethod
    def european(cls) -> "RuleSet":
        """European no-hole-card rules."""
        return cls(
            variant=GameVariant.EUROPEAN,
            name="European Rules",
            description="European blackjack with no hole card and dealer stands on all 17s",
            num_decks=6,
            dealer_hits_soft_17=False,
            dealer_peeks_for_blackjack=False,
            no_hole_card=True,
            double_after_split=True,
            resplit_aces=False,
            resplit_to_four_hands=True,
            surrender_allowed=False,
            late_surrender_only=False,
            blackjack_payout=1.5,
            insurance_allowed=False,
            even_money_on_blackjack=False,
        )

    @classmethod
    def atlantic_city(cls) -> "RuleSet":
        """Atlantic City rules."""
        return cls(
            variant=GameVariant.ATLANTIC_CITY,
            name="Atlantic City Rules",
            description="Atlantic City blackjack with late surrender and dealer stands on soft 17",
            num_decks=8,
            dealer_hits_soft_17=False,
            dealer_peeks_for_blackjack=True,
            no_hole_card=False,
            double_after_split=True,
            resplit_aces=True,
            resplit_to_four_hands=True,
            surrender_allowed=True,
            late_surrender_only=True,
            blackjack_payout=1.5,
            insurance_allowed=True,
            even_money_on_blackjack=True,
        )

    @classmethod
    def for_variant(cls, variant: GameVariant | str) -> "RuleSet":
        """Return the preset rules for a variant (enum or its string value)."""
        variant = GameVariant(variant)
        factories = {
            GameVariant.VEGAS: cls.vegas,
            GameVariant.EUROPEAN: cls.european,
            GameVariant.ATLANTIC_CITY: cls.atlantic_city,
        }
        return factories[variant]()


def rule_differences(rules: RuleSet, baseline: RuleSet | None = None) -> list[str]:
    """
    Describe how a rule set differs from the Vegas baseline.

    Args:
        rules: Rules to describe
        baseline: Rules to compare against (Vegas if not provided)

    Returns:
        Human-readable differences, or ["Standard Vegas rules"] for Vegas itself
    """
    baseline = baseline or RuleSet.vegas()
    if rules == baseline and rules.variant is GameVariant.VEGAS:
        return ["Standard Vegas rules"]

    differences: list[str] = []
    if rules.dealer_hits_soft_17 != baseline.dealer_hits_soft_17:
        differences.append(
            "Dealer hits soft 17" if rules.dealer_hits_soft_17 else "Dealer stands on soft 17"
        )
    if rules.no_hole_card != baseline.no_hole_card:
        differences.append(
            "No hole card - dealer receives second card after all players complete their hands"
        )
    if rules.surrender_allowed != baseline.surrender_allowed:
        if rules.surrender_allowed:
            differences.append(
                "Late surrender allowed" if rules.late_surrender_only else "Surrender allowed"
            )
        else:
            differences.append("Surrender not allowed")
    if rules.resplit_aces != baseline.resplit_aces:
        differences.append("Can resplit aces" if rules.resplit_aces else "Cannot resplit aces")
    if rules.double_after_split != baseline.double_after_split:
        differences.append(
            "Double after split allowed" if rules.double_after_split else "No double after split"
        )
    if rules.insurance_allowed != baseline.insurance_allowed:
        differences.append(
            "Insurance available" if rules.insurance_allowed else "Insurance not available"
        )
    if rules.blackjack_payout != baseline.blackjack_payout:
        differences.append(f"Blackjack pays {rules.blackjack_payout}:1")
    if rules.num_decks != baseline.num_decks:
        differences.append(f"Uses {rules.num_decks} decks")
    return differences


_VARIANT_TIPS: dict[GameVariant, tuple[str, ...]] = {
    GameVariant.VEGAS: (
        "Dealer stands on soft 17, so stiff hands against a weak up-card can stand",
        "Insurance is available but generally not recommended",
        "Double after split gives you more strategic options",
    ),
    GameVariant.EUROPEAN: (
        "No hole card means the dealer can make blackjack after you act",
        "Doubles and splits against a 10 or Ace risk losing to a late blackjack",
        "No insurance available - one less decision to worry about",
    ),
    GameVariant.ATLANTIC_CITY: (
        "Use surrender on hard 15 vs 10 and hard 16 vs 9, 10, A",
        "Take advantage of resplit aces when you get them",
        "Most player-friendly rules overall",
    ),
}


def variant_tips(variant: GameVariant) -> list[str]:
    """Return short strategy tips for a variant."""
    return list(_VARIANT_TIPS.get(variant, ()))
