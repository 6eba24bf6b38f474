from dataclasses import dataclass, field
from typing import Protocol

from lending.book.book import Book
from lending.book.state import BookState
from lending.exceptions import ConcurrentBookWriteError
from lending.ids import BookId, BookType
from lending.versioning import Version


class BookRepository(Protocol):
    def find_by(self, book_id: BookId) -> Book | None:
        """Loads a book or returns None when lending does not know it."""

    def save(self, book: Book) -> None:
        """Stores a book.

        Raises ConcurrentBookWriteError when the stored version is no longer the one
        the book was loaded with.
        """


@dataclass(frozen=True)
class StoredBook:
    book_id: BookId
    book_type: BookType
    state: BookState
    version: Version


@dataclass
class InMemoryBookRepository(BookRepository):
    """Lightweight in-memory repository for testing and development."""

    _books: dict[BookId, StoredBook] = field(default_factory=dict, init=False)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def find_by(self, book_id: BookId) -> Book | None:
        stored = self._books.get(book_id)
        if stored is None:
            return None
        return Book.restore(
            stored.book_id,
            stored.book_type,
            stored.state,
            stored.version,
        )

    def save(self, book: Book) -> None:
        with book.__persisting_version__() as expected_version:
            stored = self._books.get(book.book_id)
            if stored is not None and stored.version != expected_version:
                raise ConcurrentBookWriteError(
                    book.book_id,
                    expected_version,
                    stored.version,
                )
            self._books[book.book_id] = StoredBook(
                book_id=book.book_id,
                book_type=book.book_type,
                state=book.state,
                version=book.version,
            )
