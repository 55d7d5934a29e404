"""Table levels and betting limits."""

from dataclasses import dataclass
from enum import Enum


class TableLevel(Enum):
    """Table levels, lowest stakes first."""

    BEGINNER = "beginner"
    AMATEUR = "amateur"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFESSIONAL = "professional"
    HIGH_ROLLER = "high_roller"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class TableConfig:
    """Betting limits for a table."""

    level: TableLevel
    name: str
    min_bet: int
    max_bet: int
    buy_in_min: int
    buy_in_max: int

    def __post_init__(self) -> None:
        if self.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if self.max_bet < self.min_bet:
            raise ValueError("max_bet must not be below min_bet")

    @classmethod
    def for_level(cls, level: TableLevel | str) -> "TableConfig":
        """Return the configuration of a table level."""
        return TABLE_CONFIGURATIONS[TableLevel(level)]

    def effective_min_bet(self, chips: int) -> int:
        """
        Minimum bet for a player holding ``chips``.

        A stack below the table minimum may still play: any amount from a
        single chip up to the whole stack is accepted.
        """
        if chips < self.min_bet:
            return min(chips, 1)
        return self.min_bet

    def effective_max_bet(self, chips: int) -> int:
        """Maximum bet for a player holding ``chips``."""
        return min(self.max_bet, chips)

    def is_valid_bet(self, amount: int, chips: int) -> bool:
        """Check a bet against the table limits and the player's stack."""
        if amount < 1 or amount > chips:
            return False
        return self.effective_min_bet(chips) <= amount <= self.effective_max_bet(chips)


TABLE_CONFIGURATIONS: dict[TableLevel, TableConfig] = {
    TableLevel.BEGINNER: TableConfig(TableLevel.BEGINNER, "Beginner Table", 5, 100, 50, 500),
    TableLevel.AMATEUR: TableConfig(TableLevel.AMATEUR, "Amateur Table", 10, 250, 100, 1250),
    TableLevel.INTERMEDIATE: TableConfig(
        TableLevel.INTERMEDIATE, "Intermediate Table", 25, 500, 250, 2500
    ),
    TableLevel.ADVANCED: TableConfig(TableLevel.ADVANCED, "Advanced Table", 50, 1000, 500, 5000),
    TableLevel.PROFESSIONAL: TableConfig(
        TableLevel.PROFESSIONAL, "Professional Table", 100, 2500, 1000, 12500
    ),
    TableLevel.HIGH_ROLLER: TableConfig(
        TableLevel.HIGH_ROLLER, "High Roller VIP", 500, 10000, 5000, 50000
    ),
}
