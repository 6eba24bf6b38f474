import logging
from collections.abc import Callable
from functools import partial

from lending.book import Book, BookRepository
from lending.clock import Clock, utc_now
from lending.domain_events import DomainEvents
from lending.events import (
    BookCheckedOut,
    BookDuplicateHoldFound,
    BookHoldCanceled,
    BookHoldExpired,
    BookPlacedOnHold,
    BookReturned,
    PatronEvent,
)
from lending.exceptions import UnsupportedEvent
from lending.ids import PatronId

logger = logging.getLogger(__name__)


class PatronEventsHandler:
    """
    Applies events coming from the patron side to the books they concern.

    Each event is handled on its own: the book is loaded, exactly one rule is
    applied and the book is stored if its version moved. Books lending does not
    know about are skipped. Transition errors and concurrent write errors are
    left to the caller.

    Args:
        repository (BookRepository): Where books are loaded from and stored to.
        domain_events (DomainEvents): Receives duplicate hold notifications.
        clock (Clock): Source of the current time, read once per event.
    """

    def __init__(
        self,
        repository: BookRepository,
        domain_events: DomainEvents,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._domain_events = domain_events
        self._clock = clock

    def __call__(self, event: PatronEvent) -> None:
        self.handle(event)

    def handle(self, event: PatronEvent) -> None:
        apply: Callable[[Book], None]
        match event:
            case BookPlacedOnHold():
                apply = partial(self._placed_on_hold, event=event)
            case BookCheckedOut():
                apply = partial(self._checked_out, event=event)
            case BookHoldExpired():
                apply = self._hold_expired
            case BookHoldCanceled():
                apply = self._hold_canceled
            case BookReturned():
                apply = partial(self._returned, event=event)
            case _:
                raise UnsupportedEvent(type(event).__name__)

        book = self._repository.find_by(event.book_id)
        if book is None:
            logger.debug(
                "Book %s not found, ignoring %s", event.book_id, type(event).__name__
            )
            return

        apply(book)
        if book.has_unsaved_changes:
            self._repository.save(book)

    def _placed_on_hold(self, book: Book, event: BookPlacedOnHold) -> None:
        if book.is_on_hold:
            holder = book.current_patron
            if holder != event.patron_id:
                self._duplicate_hold_found(book, holder, event)
            else:
                # TODO: confirm with product whether a repeated hold request from
                # the holder should be reported instead of ignored.
                logger.debug(
                    "Book %s already on hold by %s", book.book_id, event.patron_id
                )
            return

        book.place_on_hold(event.patron_id, event.branch_id, event.hold_until)

    def _duplicate_hold_found(
        self, book: Book, holder: PatronId, event: BookPlacedOnHold
    ) -> None:
        logger.info(
            "Duplicate hold on book %s: held by %s, requested by %s",
            book.book_id,
            holder,
            event.patron_id,
        )
        self._domain_events.publish(
            BookDuplicateHoldFound(
                occurred_at=self._clock(),
                conflicting_patron_id=holder,
                requesting_patron_id=event.patron_id,
                branch_id=event.branch_id,
                book_id=event.book_id,
            )
        )

    def _checked_out(self, book: Book, event: BookCheckedOut) -> None:
        book.checkout(event.patron_id, event.branch_id)

    def _hold_expired(self, book: Book) -> None:
        book.expire_hold(self._clock())

    def _hold_canceled(self, book: Book) -> None:
        book.cancel_hold()

    def _returned(self, book: Book, event: BookReturned) -> None:
        book.return_book(event.branch_id)
