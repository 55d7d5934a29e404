"""Round state machine and table events."""

from blackjack_core.game.events import EventEmitter, EventType, GameEvent
from blackjack_core.game.player import PlayerRoundState
from blackjack_core.game.state import ActiveHand, RoundPhase
from blackjack_core.game.engine import BlackjackTable, TableSnapshot

__all__ = [
    "ActiveHand",
    "BlackjackTable",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "PlayerRoundState",
    "RoundPhase",
    "TableSnapshot",
]
