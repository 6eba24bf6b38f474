__all__ = [
    "Available",
    "Book",
    "BookRepository",
    "BookState",
    "CheckedOut",
    "InMemoryBookRepository",
    "OnHold",
    "StateName",
]

from lending.book.book import Book
from lending.book.repository import BookRepository, InMemoryBookRepository
from lending.book.state import Available, BookState, CheckedOut, OnHold, StateName
