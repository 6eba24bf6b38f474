from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lending.book import (
    Available,
    Book,
    BookRepository,
    BookState,
    CheckedOut,
    OnHold,
    StateName,
)
from lending.exceptions import ConcurrentBookWriteError
from lending.ids import BookId, BookType, Identifier, LibraryBranchId, PatronId
from lending.versioning import Version
from lending_sqlalchemy.models import BaseBook, DefaultBook


def _as_uuid(identifier: Identifier | None) -> UUID | None:
    # stored columns hold plain UUIDs, which ids never compare equal to
    return None if identifier is None else UUID(int=identifier.int)


@dataclass(repr=False)
class SqlAlchemyBookRepository(BookRepository):
    """
    Stores books in a relational database through a SQLAlchemy session.

    A book is inserted on its first save. Later saves update the row only if it
    still has the version the book was loaded with, otherwise
    ConcurrentBookWriteError is raised. Committing the session is up to the caller.
    """

    _session: Session
    _book_model: type[BaseBook] = DefaultBook

    def find_by(self, book_id: BookId) -> Book | None:
        stmt = (
            select(self._book_model)
            .filter_by(uuid=_as_uuid(book_id))
            .execution_options(populate_existing=True)
        )
        row = self._session.execute(stmt).scalars().one_or_none()
        if row is None:
            return None
        return Book.restore(
            BookId(row.uuid),
            BookType(row.book_type),
            self._state_of(row),
            Version(row.version),
        )

    def save(self, book: Book) -> None:
        with book.__persisting_version__() as expected_version:
            stmt = select(self._book_model.version).where(
                self._book_model.uuid == _as_uuid(book.book_id)
            )
            stored_version = self._session.execute(stmt).scalar_one_or_none()
            if stored_version is None:
                self._insert(book, expected_version)
            else:
                self._update(book, expected_version, Version(stored_version))

    def _insert(self, book: Book, expected_version: Version) -> None:
        row = self._book_model()
        row.uuid = _as_uuid(book.book_id)
        for column, value in self._columns_of(book).items():
            setattr(row, column, value)
        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError as error:
            # someone else inserted the same book in the meantime
            raise ConcurrentBookWriteError(book.book_id, expected_version) from error

    def _update(
        self, book: Book, expected_version: Version, stored_version: Version
    ) -> None:
        stmt = (
            update(self._book_model)
            .where(
                self._book_model.uuid == _as_uuid(book.book_id),
                self._book_model.version == expected_version.value,
            )
            .values(**self._columns_of(book))
        )
        result = self._session.execute(stmt)
        if result.rowcount != 1:
            # optimistic lock failed
            raise ConcurrentBookWriteError(
                book.book_id, expected_version, stored_version
            )

    @staticmethod
    def _columns_of(book: Book) -> dict[str, Any]:
        state = book.state
        return {
            "book_type": book.book_type.value,
            "state": state.name.value,
            "branch_id": _as_uuid(state.branch_id),
            "patron_id": _as_uuid(state.patron_id),
            "hold_until": state.hold_until if isinstance(state, OnHold) else None,
            "version": book.version.value,
        }

    @staticmethod
    def _state_of(row: BaseBook) -> BookState:
        branch_id = LibraryBranchId(row.branch_id)
        match StateName(row.state):
            case StateName.AVAILABLE:
                return Available(branch_id=branch_id)
            case StateName.ON_HOLD:
                return OnHold(
                    branch_id=branch_id,
                    patron_id=PatronId(row.patron_id),
                    hold_until=row.hold_until,
                )
            case StateName.CHECKED_OUT:
                return CheckedOut(branch_id=branch_id, patron_id=PatronId(row.patron_id))
