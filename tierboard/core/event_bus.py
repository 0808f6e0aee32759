"""EventBus: synchronous fan-out of board notifications to renderers

Rules:
- Publishers never import their subscribers
- Events carry identifiers and display text only, never board objects
- A failing handler is logged and never reaches the publisher
- Events emitted while handlers run are queued and delivered, in order,
  once the current event has reached every handler. Nothing is dropped.
"""

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List

from tierboard.core.logging import get_logger

logger = get_logger(__name__)

ANY_EVENT = "*"  # subscribe to every event type


@dataclass(frozen=True)
class BoardEvent:
    """Event payload container

    Args:
        event_type: one of EventTypes (e.g. "items_added")
        data: event data (ids and text, no heavy objects)
        source: name of the publishing component
    """

    event_type: str
    data: Dict[str, Any]
    source: str


EventHandler = Callable[[BoardEvent], None]


class EventBus:
    """Synchronous event bus

    Usage:
        bus = EventBus()
        bus.subscribe("items_added", toaster.show)
        bus.subscribe(ANY_EVENT, audit.record)
        bus.emit(BoardEvent(event_type="items_added", data={"action_id": "..."}, source="mutation"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._queue: Deque[BoardEvent] = deque()
        self._delivering = False

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug("EventBus subscribe: %s -> %s", event_type, handler.__qualname__)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> bool:
        """False when the handler was not subscribed to that type."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            logger.debug(
                "EventBus unsubscribe ignored: %s -> %s",
                event_type,
                handler.__qualname__,
            )
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: BoardEvent) -> None:
        """Deliver an event to its handlers, then to ANY_EVENT handlers.

        Called from inside a handler, the event is queued behind the one
        being delivered and this call returns immediately.
        """
        self._queue.append(event)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._queue:
                self._deliver(self._queue.popleft())
        finally:
            self._delivering = False
            self._queue.clear()

    def _deliver(self, event: BoardEvent) -> None:
        handlers = list(self._handlers.get(event.event_type, []))
        handlers += self._handlers.get(ANY_EVENT, [])
        if not handlers:
            logger.debug("EventBus: no subscribers for %s", event.event_type)
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "EventBus handler error: %s (event=%s)",
                    handler.__qualname__,
                    event.event_type,
                )

    def clear(self) -> None:
        """Drop every subscription (tests)."""
        self._handlers.clear()

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())
