"""
Round events for the twentyone engine.

Every phase of a round publishes what happened at the table (a card dealt, a
hand busted, a result given) as an ``EngineEventType`` with a small dict of
data. Front ends subscribe to the events they need instead of parsing the
console output.
"""

import logging
import threading
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger("twentyone.events")

EventData = Dict[str, Any]


class EngineEventType(Enum):
    """
    Event types published while a round is played.
    """

    # Table lifecycle
    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"
    STATE_CHANGED = "state_changed"
    SHUFFLE = "shuffle"

    # Participants
    PLAYER_JOINED = "player_joined"
    PLAYER_ACTION = "player_action"
    DEALER_ACTION = "dealer_action"

    # Cards
    CARD_DEALT = "card_dealt"
    CARD_HIDDEN = "card_hidden"
    CARD_REVEALED = "card_revealed"

    # Results
    HAND_BUSTED = "hand_busted"
    HAND_RESULT = "hand_result"
    DEALER_ERROR = "dealer_error"


class EventEmitter:
    """
    Delivers round events to subscribed handlers.

    Handlers for one event type run in the order they subscribed, followed by
    the handlers watching the whole table. A failing handler is logged and
    never interrupts the round.
    """

    def __init__(self):
        self._listeners: Dict[EngineEventType, List[Callable]] = defaultdict(list)
        self._table_listeners: List[Callable] = []

    def on(
        self, event_type: EngineEventType, callback: Callable[[EventData], None]
    ) -> Callable[[], None]:
        """
        Call ``callback(data)`` each time ``event_type`` is emitted.

        Returns a function that cancels the subscription.
        """
        self._listeners[event_type].append(callback)
        return lambda: self._listeners[event_type].remove(callback)

    def on_any(
        self, callback: Callable[[Tuple[EngineEventType, EventData]], None]
    ) -> Callable[[], None]:
        """
        Call ``callback((event_type, data))`` for every event at the table.

        Returns a function that cancels the subscription.
        """
        self._table_listeners.append(callback)
        return lambda: self._table_listeners.remove(callback)

    def emit(self, event_type: EngineEventType, data: EventData) -> None:
        """Publish an event to its own handlers, then to the table watchers."""
        calls = [(callback, data) for callback in self._listeners.get(event_type, [])]
        calls += [(callback, (event_type, data)) for callback in self._table_listeners]

        for callback, args in calls:
            try:
                callback(args)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event_type.name}: {e}", exc_info=True
                )


class EventBus:
    """
    The shared emitter a game publishes to unless it is given its own.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance
