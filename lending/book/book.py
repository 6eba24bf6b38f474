from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from typing_extensions import Self

from lending.book.state import Available, BookState, OnHold, StateName
from lending.ids import BookId, BookType, LibraryBranchId, PatronId
from lending.versioning import Version


class Book:
    """
    Aggregate root of a single book in lending.

    The book owns exactly one state at a time and is the only mutable part of the
    model. Every operation asks the current state for the next one and, when the
    state actually changed, swaps it in and advances the version by one.
    Rejections raised by the state propagate untouched and leave both the state
    and the version as they were.

    Attributes:
        book_id (BookId): Identity of the book.
        book_type (BookType): Circulating or restricted, fixed at creation.
        state (BookState): Current state.
        version (Version): Number of successful state changes so far.
    """

    def __init__(
        self,
        book_id: BookId,
        book_type: BookType,
        branch_id: LibraryBranchId,
    ) -> None:
        self._book_id = book_id
        self._book_type = book_type
        self._state: BookState = Available(branch_id=branch_id)
        self._version = Version.zero()
        self._persisted_version = self._version

    @classmethod
    def restore(
        cls,
        book_id: BookId,
        book_type: BookType,
        state: BookState,
        version: Version,
    ) -> Self:
        """
        Rebuilds a book that already exists somewhere else in the given state.

        Used by repositories when loading and when moving books over from another
        representation.
        """
        book = cls(book_id, book_type, state.branch_id)
        book._state = state
        book._version = book._persisted_version = version
        return book

    @property
    def book_id(self) -> BookId:
        return self._book_id

    @property
    def book_type(self) -> BookType:
        return self._book_type

    @property
    def state(self) -> BookState:
        return self._state

    @property
    def version(self) -> Version:
        return self._version

    @property
    def state_name(self) -> StateName:
        return self._state.name

    @property
    def current_branch(self) -> LibraryBranchId:
        return self._state.branch_id

    @property
    def current_patron(self) -> PatronId | None:
        return self._state.patron_id

    @property
    def is_on_hold(self) -> bool:
        return isinstance(self._state, OnHold)

    @property
    def has_unsaved_changes(self) -> bool:
        return self._version != self._persisted_version

    def can_be_put_on_hold(self, patron_id: PatronId) -> bool:
        return self._state.can_be_put_on_hold(patron_id)

    def can_be_checked_out_by(self, patron_id: PatronId) -> bool:
        return self._state.can_be_checked_out_by(patron_id)

    def can_be_returned(self) -> bool:
        return self._state.can_be_returned()

    def place_on_hold(
        self,
        patron_id: PatronId,
        branch_id: LibraryBranchId,
        hold_until: datetime,
    ) -> None:
        self._change_state(self._state.place_on_hold(patron_id, branch_id, hold_until))

    def checkout(self, patron_id: PatronId, branch_id: LibraryBranchId) -> None:
        self._change_state(self._state.checkout(patron_id, branch_id))

    def return_book(self, branch_id: LibraryBranchId) -> None:
        self._change_state(self._state.return_book(branch_id))

    def cancel_hold(self) -> None:
        self._change_state(self._state.cancel_hold())

    def expire_hold(self, now: datetime) -> None:
        """Makes the book available again if its hold is over at `now`.

        A hold that is still running is left alone and the version stays put.
        """
        self._change_state(self._state.expire_hold(now))

    @contextmanager
    def __persisting_version__(self) -> Iterator[Version]:
        """
        Context manager for storing the book.

        Yields the version the book had when it was loaded or last stored, which is
        the version the storage is expected to still hold. On a clean exit the
        current version becomes the stored one.
        """
        yield self._persisted_version
        self._persisted_version = self._version

    def _change_state(self, new_state: BookState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        self._version = self._version.next()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(book_id={self._book_id!r}, "
            f"state={self._state!r}, version={self._version.value})"
        )
