import pytest

from lending import (
    DomainEvents,
    Event,
    InMemoryBookRepository,
    PatronEventsHandler,
)
from tests import bdd


@pytest.fixture()
def repository() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture()
def domain_events() -> DomainEvents:
    return DomainEvents()


@pytest.fixture()
def published(domain_events: DomainEvents) -> bdd.PublishedEvents:
    domain_events.register(listener := bdd.PublishedEvents(), to=Event)
    return listener


@pytest.fixture()
def clock() -> bdd.FakeClock:
    return bdd.FakeClock()


@pytest.fixture()
def handler(
    repository: InMemoryBookRepository,
    domain_events: DomainEvents,
    clock: bdd.FakeClock,
) -> PatronEventsHandler:
    return PatronEventsHandler(repository, domain_events, clock=clock)


@pytest.fixture()
def given(repository: InMemoryBookRepository) -> bdd.Given:
    return bdd.Given(repository)


@pytest.fixture()
def when(
    repository: InMemoryBookRepository, handler: PatronEventsHandler
) -> bdd.When:
    return bdd.When(repository, handler)


@pytest.fixture()
def then(repository: InMemoryBookRepository) -> bdd.Then:
    return bdd.Then(repository)
