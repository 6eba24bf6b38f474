from dataclasses import dataclass
from typing import ClassVar

from lending.ids import BookId
from lending.versioning import Version


class LendingException(Exception):
    pass


@dataclass
class TransitionError(LendingException):
    """Business rule rejected a state transition of a book.

    `reason` names the rule that fired, `state` the state the book was in.
    """

    state: str
    reason: ClassVar[str] = "transition not allowed"

    def __str__(self) -> str:
        return f"Invalid state transition: {self.reason} (book is {self.state})"


class BookAlreadyOnHold(TransitionError):
    reason = "already on hold"


class CannotHoldCheckedOutBook(TransitionError):
    reason = "cannot hold a checked-out book"


class NotHoldingPatron(TransitionError):
    reason = "only the holding patron may check out"


class BookAlreadyCheckedOut(TransitionError):
    reason = "already checked out"


class NothingToReturn(TransitionError):
    reason = "nothing to return"


class NoHoldToCancel(TransitionError):
    reason = "no hold to cancel"


class NoHoldToExpire(TransitionError):
    reason = "no hold to expire"


@dataclass
class ConcurrentBookWriteError(LendingException):
    book_id: BookId
    expected: Version
    stored: Version | None = None

    def __str__(self) -> str:
        stored = "unknown" if self.stored is None else self.stored.value
        return (
            f"Book {self.book_id} was changed concurrently: "
            f"expected version {self.expected.value}, stored version {stored}"
        )


@dataclass
class UnsupportedEvent(LendingException):
    event_name: str

    def __str__(self) -> str:
        return f"Unsupported event: {self.event_name}"
