from datetime import datetime
from uuid import uuid4

import pytest
import time_machine
from pydantic import ValidationError

from lending import BookHoldExpired, BookId, BookPlacedOnHold, LibraryBranchId, PatronId


def test_builds_inbound_event_from_plain_data() -> None:
    book, patron, branch = uuid4(), uuid4(), uuid4()

    event = BookPlacedOnHold.model_validate(
        {
            "book_id": str(book),
            "patron_id": str(patron),
            "branch_id": branch.hex,
            "hold_until": "2024-03-08T12:00:00",
            "occurred_at": "2024-03-01T12:00:00",
        }
    )

    assert event.book_id == BookId(book)
    assert event.patron_id == PatronId(patron)
    assert event.branch_id == LibraryBranchId(branch)
    assert event.hold_until == datetime(2024, 3, 8, 12)
    assert event.occurred_at == datetime(2024, 3, 1, 12)


def test_keeps_identifiers_of_the_right_kind() -> None:
    event = BookHoldExpired(book_id=BookId())

    assert type(event.book_id) is BookId


@time_machine.travel(datetime(2024, 3, 1, 12), tick=False)
def test_occurred_at_defaults_to_utc_now() -> None:
    assert BookHoldExpired(book_id=BookId()).occurred_at == datetime(2024, 3, 1, 12)


def test_forbids_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        BookHoldExpired(book_id=BookId(), patron_id=PatronId())


def test_events_are_immutable() -> None:
    event = BookHoldExpired(book_id=BookId())

    with pytest.raises(ValidationError):
        event.book_id = BookId()  # type: ignore[misc]
