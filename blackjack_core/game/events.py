"""Table events for presentation layers."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of table events."""

    # Seating and configuration
    PLAYER_JOINED = auto()
    PLAYER_LEFT = auto()
    VARIANT_CHANGED = auto()

    # Published after every accepted request, carries a TableSnapshot
    STATE_CHANGED = auto()

    # Round lifecycle
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()
    ROUND_ABANDONED = auto()
    BET_PLACED = auto()
    CARD_DEALT = auto()
    SHOE_SHUFFLED = auto()

    # Player decisions
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_DOUBLE = auto()
    PLAYER_SPLIT = auto()
    PLAYER_SURRENDER = auto()
    INSURANCE_OFFERED = auto()
    INSURANCE_TAKEN = auto()
    INSURANCE_DECLINED = auto()

    # Dealer play
    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()
    DEALER_BLACKJACK = auto()

    # Hand results
    PLAYER_BLACKJACK = auto()
    PLAYER_BUSTS = auto()
    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()
    PUSH = auto()
    INSURANCE_WINS = auto()
    INSURANCE_LOSES = auto()

    # Rejected requests
    INVALID_ACTION = auto()
    INSUFFICIENT_FUNDS = auto()

    @property
    def is_rejection(self) -> bool:
        """Check if the event reports a refused request."""
        return self in (EventType.INVALID_ACTION, EventType.INSUFFICIENT_FUNDS)


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable table event.

    ``data`` holds plain values (seat numbers, card strings, amounts) except
    for STATE_CHANGED, whose ``snapshot`` entry is a TableSnapshot.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Synchronous publish/subscribe for one table.

    Handlers run in subscription order, type-specific handlers before
    catch-all ones. The most recent ``max_history`` events are kept for
    replay and inspection.
    """

    def __init__(self, max_history: int = 1000) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: deque[GameEvent] = deque(maxlen=max_history)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Called with each matching event
            event_type: Event type to receive, or None for every event
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> bool:
        """Remove a handler. Returns False if it was not subscribed."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: GameEvent) -> None:
        """Record an event and pass it to its subscribers."""
        self._event_history.append(event)
        for handler in list(self._handlers.get(event.event_type, [])):
            handler(event)
        for handler in list(self._handlers.get(None, [])):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event from keyword data and emit it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Recorded events, oldest first."""
        return list(self._event_history)

    def last(self, event_type: EventType | None = None) -> GameEvent | None:
        """The most recent event, optionally of one type."""
        for event in reversed(self._event_history):
            if event_type is None or event.event_type is event_type:
                return event
        return None

    def count(self, event_type: EventType) -> int:
        """Number of recorded events of a type."""
        return sum(1 for event in self._event_history if event.event_type is event_type)

    def clear_history(self) -> None:
        """Forget recorded events; subscriptions are kept."""
        self._event_history.clear()
