"""States a book can be in.

Each state is an immutable value. Transitions never mutate a state, they return
the next one or raise a `TransitionError` naming the rule that rejected them.
A transition that has a `can_be_*` predicate checks it first, so asking and
acting always agree.

    Available  --place_on_hold-->  OnHold
    Available  --checkout------->  CheckedOut
    OnHold     --checkout------->  CheckedOut   (holding patron only)
    OnHold     --cancel_hold---->  Available
    OnHold     --expire_hold---->  Available    (once the hold is over)
    CheckedOut --return_book---->  Available
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TypeAlias

from lending.exceptions import (
    BookAlreadyCheckedOut,
    BookAlreadyOnHold,
    CannotHoldCheckedOutBook,
    NoHoldToCancel,
    NoHoldToExpire,
    NotHoldingPatron,
    NothingToReturn,
)
from lending.ids import LibraryBranchId, PatronId


class StateName(str, Enum):
    AVAILABLE = "AVAILABLE"
    ON_HOLD = "ON_HOLD"
    CHECKED_OUT = "CHECKED_OUT"


@dataclass(frozen=True)
class Available:
    branch_id: LibraryBranchId

    @property
    def name(self) -> StateName:
        return StateName.AVAILABLE

    @property
    def patron_id(self) -> None:
        return None

    def can_be_put_on_hold(self, patron_id: PatronId) -> bool:
        return True

    def can_be_checked_out_by(self, patron_id: PatronId) -> bool:
        return True

    def can_be_returned(self) -> bool:
        return False

    def place_on_hold(
        self,
        patron_id: PatronId,
        branch_id: LibraryBranchId,
        hold_until: datetime,
    ) -> "OnHold":
        if not self.can_be_put_on_hold(patron_id):
            raise BookAlreadyOnHold(self.name.value)
        return OnHold(branch_id=branch_id, patron_id=patron_id, hold_until=hold_until)

    def checkout(self, patron_id: PatronId, branch_id: LibraryBranchId) -> "CheckedOut":
        if not self.can_be_checked_out_by(patron_id):
            raise BookAlreadyCheckedOut(self.name.value)
        return CheckedOut(branch_id=branch_id, patron_id=patron_id)

    def return_book(self, branch_id: LibraryBranchId) -> "Available":
        if not self.can_be_returned():
            raise NothingToReturn(self.name.value)
        return Available(branch_id=branch_id)

    def cancel_hold(self) -> "BookState":
        raise NoHoldToCancel(self.name.value)

    def expire_hold(self, now: datetime) -> "BookState":
        raise NoHoldToExpire(self.name.value)


@dataclass(frozen=True)
class OnHold:
    branch_id: LibraryBranchId
    patron_id: PatronId
    hold_until: datetime

    @property
    def name(self) -> StateName:
        return StateName.ON_HOLD

    def can_be_put_on_hold(self, patron_id: PatronId) -> bool:
        return False

    def can_be_checked_out_by(self, patron_id: PatronId) -> bool:
        return patron_id == self.patron_id

    def can_be_returned(self) -> bool:
        return False

    def is_over(self, now: datetime) -> bool:
        return now > self.hold_until

    def place_on_hold(
        self,
        patron_id: PatronId,
        branch_id: LibraryBranchId,
        hold_until: datetime,
    ) -> "OnHold":
        if not self.can_be_put_on_hold(patron_id):
            raise BookAlreadyOnHold(self.name.value)
        return OnHold(branch_id=branch_id, patron_id=patron_id, hold_until=hold_until)

    def checkout(self, patron_id: PatronId, branch_id: LibraryBranchId) -> "CheckedOut":
        if not self.can_be_checked_out_by(patron_id):
            raise NotHoldingPatron(self.name.value)
        return CheckedOut(branch_id=branch_id, patron_id=patron_id)

    def return_book(self, branch_id: LibraryBranchId) -> Available:
        if not self.can_be_returned():
            raise NothingToReturn(self.name.value)
        return Available(branch_id=branch_id)

    def cancel_hold(self) -> Available:
        return Available(branch_id=self.branch_id)

    def expire_hold(self, now: datetime) -> "BookState":
        if self.is_over(now):
            return Available(branch_id=self.branch_id)
        return self


@dataclass(frozen=True)
class CheckedOut:
    branch_id: LibraryBranchId
    patron_id: PatronId

    @property
    def name(self) -> StateName:
        return StateName.CHECKED_OUT

    def can_be_put_on_hold(self, patron_id: PatronId) -> bool:
        return False

    def can_be_checked_out_by(self, patron_id: PatronId) -> bool:
        return False

    def can_be_returned(self) -> bool:
        return True

    def place_on_hold(
        self,
        patron_id: PatronId,
        branch_id: LibraryBranchId,
        hold_until: datetime,
    ) -> OnHold:
        if not self.can_be_put_on_hold(patron_id):
            raise CannotHoldCheckedOutBook(self.name.value)
        return OnHold(branch_id=branch_id, patron_id=patron_id, hold_until=hold_until)

    def checkout(self, patron_id: PatronId, branch_id: LibraryBranchId) -> "CheckedOut":
        if not self.can_be_checked_out_by(patron_id):
            raise BookAlreadyCheckedOut(self.name.value)
        return CheckedOut(branch_id=branch_id, patron_id=patron_id)

    def return_book(self, branch_id: LibraryBranchId) -> Available:
        if not self.can_be_returned():
            raise NothingToReturn(self.name.value)
        return Available(branch_id=branch_id)

    def cancel_hold(self) -> "BookState":
        raise NoHoldToCancel(self.name.value)

    def expire_hold(self, now: datetime) -> "BookState":
        raise NoHoldToExpire(self.name.value)


BookState: TypeAlias = Available | OnHold | CheckedOut
