from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lending.clock import utc_now
from lending.ids import BookId, LibraryBranchId, PatronId


class Event(BaseModel):
    """Base class for all lending events.

    Example usage:
    ```
    class BookReturned(PatronEvent):
        branch_id: LibraryBranchId
    ```
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    occurred_at: datetime = Field(default_factory=utc_now)


class PatronEvent(Event):
    """Something a patron did to a book, delivered from the patron side."""

    book_id: BookId


class BookPlacedOnHold(PatronEvent):
    patron_id: PatronId
    branch_id: LibraryBranchId
    hold_until: datetime


class BookCheckedOut(PatronEvent):
    patron_id: PatronId
    branch_id: LibraryBranchId


class BookHoldExpired(PatronEvent):
    pass


class BookHoldCanceled(PatronEvent):
    pass


class BookReturned(PatronEvent):
    branch_id: LibraryBranchId


class BookDuplicateHoldFound(Event):
    """Raised when a patron asks for a hold on a book already held by someone else."""

    conflicting_patron_id: PatronId
    requesting_patron_id: PatronId
    branch_id: LibraryBranchId
    book_id: BookId
