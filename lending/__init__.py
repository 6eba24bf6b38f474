__all__ = [
    "Available",
    "Book",
    "BookCheckedOut",
    "BookDuplicateHoldFound",
    "BookHoldCanceled",
    "BookHoldExpired",
    "BookId",
    "BookPlacedOnHold",
    "BookRepository",
    "BookReturned",
    "BookState",
    "BookType",
    "CheckedOut",
    "Config",
    "DomainEvents",
    "Event",
    "InMemoryBookRepository",
    "LibraryBranchId",
    "OnHold",
    "PatronEvent",
    "PatronEventsHandler",
    "PatronId",
    "StateName",
    "Version",
    "exceptions",
    "handle_with_retry",
]

from lending import exceptions
from lending.application import PatronEventsHandler, handle_with_retry
from lending.book import (
    Available,
    Book,
    BookRepository,
    BookState,
    CheckedOut,
    InMemoryBookRepository,
    OnHold,
    StateName,
)
from lending.config import Config
from lending.domain_events import DomainEvents
from lending.events import (
    BookCheckedOut,
    BookDuplicateHoldFound,
    BookHoldCanceled,
    BookHoldExpired,
    BookPlacedOnHold,
    BookReturned,
    Event,
    PatronEvent,
)
from lending.ids import BookId, BookType, LibraryBranchId, PatronId
from lending.versioning import Version
