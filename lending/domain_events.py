import logging
from collections import defaultdict
from typing import Protocol

from lending.events import Event

logger = logging.getLogger(__name__)


class Listener(Protocol):
    def __call__(self, event: Event) -> None: ...


class DomainEvents:
    """Publishes lending events to listeners registered for their type.

    A listener registered to a base class receives every subclass as well:
    ```
    domain_events.register(notify_librarian, to=BookDuplicateHoldFound)
    domain_events.register(audit_log, to=Event)
    ```
    Listeners of the most specific type are called first, each group in the
    order of registration.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[type[Event], list[Listener]] = defaultdict(list)

    def listeners_of(self, event_type: type[Event]) -> list[Listener]:
        return [
            listener
            for base in event_type.__mro__
            if base in self._listeners
            for listener in self._listeners[base]
        ]

    def register(self, listener: Listener, to: type[Event] = Event) -> None:
        if listener not in self._listeners[to]:
            self._listeners[to].append(listener)

    def remove(self, listener: Listener, to: type[Event] = Event) -> None:
        registered = self._listeners.get(to, [])
        if listener in registered:
            registered.remove(listener)

    def publish(self, event: Event) -> None:
        listeners = self.listeners_of(type(event))
        if not listeners:
            logger.debug("No listeners for %s", type(event).__name__)
        for listener in listeners:
            listener(event)
