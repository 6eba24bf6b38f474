from lending import (
    BookDuplicateHoldFound,
    BookId,
    DomainEvents,
    Event,
    LibraryBranchId,
    PatronId,
)
from tests.bdd import PublishedEvents


class BookInspected(Event):
    pass


def a_duplicate_hold() -> BookDuplicateHoldFound:
    return BookDuplicateHoldFound(
        conflicting_patron_id=PatronId(),
        requesting_patron_id=PatronId(),
        branch_id=LibraryBranchId(),
        book_id=BookId(),
    )


def test_publishes_to_listeners_of_event_type(domain_events: DomainEvents) -> None:
    domain_events.register(duplicates := PublishedEvents(), to=BookDuplicateHoldFound)
    domain_events.register(inspections := PublishedEvents(), to=BookInspected)

    domain_events.publish(event := a_duplicate_hold())

    duplicates.next_published_is(event)
    duplicates.published_nothing_more()
    inspections.published_nothing_more()


def test_publishes_to_listeners_of_base_type(
    domain_events: DomainEvents, published: PublishedEvents
) -> None:
    domain_events.publish(first := a_duplicate_hold())
    domain_events.publish(second := BookInspected())

    published.next_published_is(first)
    published.next_published_is(second)
    published.published_nothing_more()


def test_removed_listener_receives_nothing(domain_events: DomainEvents) -> None:
    domain_events.register(listener := PublishedEvents(), to=BookDuplicateHoldFound)
    domain_events.remove(listener, to=BookDuplicateHoldFound)

    domain_events.publish(a_duplicate_hold())

    listener.published_nothing_more()


def test_publishing_without_listeners_does_nothing(domain_events: DomainEvents) -> None:
    domain_events.remove(PublishedEvents(), to=BookInspected)
    domain_events.publish(BookInspected())


def test_calls_most_specific_listeners_first(domain_events: DomainEvents) -> None:
    calls: list[str] = []
    domain_events.register(lambda event: calls.append("any"), to=Event)
    domain_events.register(
        lambda event: calls.append("duplicate"), to=BookDuplicateHoldFound
    )
    domain_events.register(lambda event: calls.append("any again"), to=Event)

    domain_events.publish(a_duplicate_hold())

    assert calls == ["duplicate", "any", "any again"]


def test_listener_registered_twice_is_called_once(domain_events: DomainEvents) -> None:
    domain_events.register(listener := PublishedEvents(), to=BookInspected)
    domain_events.register(listener, to=BookInspected)

    domain_events.publish(event := BookInspected())

    listener.next_published_is(event)
    listener.published_nothing_more()
