"""Round phase enumeration."""

from enum import Enum, auto


class RoundPhase(Enum):
    """
    Round state machine states.

    Flow: BETTING, DEALING, PLAYING, DEALER, FINISHED, then BETTING again.
    Abandoning a round returns to BETTING from any in-round phase.
    """

    # Bets are placed and players join or leave
    BETTING = auto()

    # Cards being dealt; the insurance window stays open here
    DEALING = auto()

    # Players act in seat order
    PLAYING = auto()

    # Dealer reveals and draws
    DEALER = auto()

    # Hands settled, waiting for the next round
    FINISHED = auto()

    def __str__(self) -> str:
        return self.name.title()


class ActiveHand(Enum):
    """Which of a player's hands is in play. A round holds at most one split."""

    MAIN = auto()
    SPLIT = auto()
