"""Event bus for pub/sub communication."""

from collections import defaultdict
from typing import Callable, NamedTuple, Optional, TypeVar

from courtside.events.types import CoachEvent

T = TypeVar("T", bound=CoachEvent)
EventHandler = Callable[[CoachEvent], None]


class _Subscription(NamedTuple):
    handler: EventHandler
    team_id: Optional[str]

    def accepts(self, event: CoachEvent) -> bool:
        # Untagged events reach every subscriber
        return self.team_id is None or event.team_id in (None, self.team_id)


class EventBus:
    """
    Pub/sub channel between coaching engines and their observers.

    Both benches may publish on one bus. A subscriber that passes a
    ``team_id`` only hears that team's events (plus untagged ones).
    Delivery follows registration order, with handlers for the exact event
    type called before the catch-all handlers.

    Example:
        bus = EventBus()

        def on_timeout(event: TimeoutCalledEvent):
            print(f"{event.team_id} timeout, {event.result.timeouts_left} left")

        bus.subscribe(TimeoutCalledEvent, on_timeout, team_id="hawks")
    """

    def __init__(self) -> None:
        self._handlers: dict[type[CoachEvent], list[_Subscription]] = defaultdict(list)
        self._global_handlers: list[_Subscription] = []

    def subscribe(
        self,
        event_type: type[T],
        handler: Callable[[T], None],
        team_id: Optional[str] = None,
    ) -> None:
        """
        Register a handler for one event type.

        Args:
            event_type: Event class to listen for (subclasses are not matched)
            handler: Called with each matching event
            team_id: Only deliver events from this team's engine
        """
        self._handlers[event_type].append(_Subscription(handler, team_id))

    def subscribe_all(self, handler: EventHandler, team_id: Optional[str] = None) -> None:
        """Register a handler for every event type."""
        self._global_handlers.append(_Subscription(handler, team_id))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Drop every registration of ``handler`` for ``event_type``."""
        self._handlers[event_type] = [
            sub for sub in self._handlers[event_type] if sub.handler != handler
        ]

    def unsubscribe_all(self, handler: EventHandler) -> None:
        self._global_handlers = [
            sub for sub in self._global_handlers if sub.handler != handler
        ]

    def emit(self, event: CoachEvent) -> None:
        """Deliver ``event`` to the handlers that accept it."""
        for sub in [*self._handlers[type(event)], *self._global_handlers]:
            if sub.accepts(event):
                sub.handler(event)

    def clear(self) -> None:
        self._handlers.clear()
        self._global_handlers.clear()

    def handler_count(self, event_type: type[CoachEvent] | None = None) -> int:
        """
        Number of registrations.

        With ``event_type``, counts that type's handlers only; otherwise all
        typed handlers plus the catch-all ones.
        """
        if event_type is not None:
            return len(self._handlers[event_type])
        typed = sum(len(subs) for subs in self._handlers.values())
        return typed + len(self._global_handlers)


class EventRecorder:
    """
    Global handler that keeps every event it sees, in order.

    Lets a host loop drain engine notifications instead of reacting to
    them inline.
    """

    def __init__(self, bus: EventBus | None = None, team_id: Optional[str] = None) -> None:
        self.events: list[CoachEvent] = []
        if bus is not None:
            bus.subscribe_all(self, team_id=team_id)

    def __call__(self, event: CoachEvent) -> None:
        self.events.append(event)

    def drain(self) -> list[CoachEvent]:
        """Return and forget all recorded events."""
        drained = self.events
        self.events = []
        return drained

    def of_type(self, event_type: type[T]) -> list[T]:
        return [event for event in self.events if isinstance(event, event_type)]
