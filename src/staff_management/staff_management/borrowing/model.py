from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..books.model import Book
from ..core.enums import LoanStatus
from ..members.model import Member


@dataclass(frozen=True)
class BorrowedBook:
    """Domain entity: one loan of a book to a member.

    Open while ``return_date`` is empty. The shift/employee columns record
    who handled the loan and when; they are optional context. ``book`` and
    ``member`` are filled in by queries that join them for display.
    """

    borrow_id: int
    member_id: int
    book_id: int
    borrow_date: Optional[datetime]
    due_date: Optional[datetime]
    return_date: Optional[datetime] = None
    borrowed_during_shift_id: Optional[int] = None
    returned_during_shift_id: Optional[int] = None
    processed_by_employee_id: Optional[int] = None
    received_by_employee_id: Optional[int] = None
    book: Optional[Book] = field(default=None, compare=False)
    member: Optional[Member] = field(default=None, compare=False)
    version: int = field(default=0, compare=False)

    @property
    def is_returned(self) -> bool:
        return self.return_date is not None

    @property
    def status(self) -> LoanStatus:
        return LoanStatus.RETURNED if self.is_returned else LoanStatus.OPEN

    def is_overdue(self, now: datetime) -> bool:
        return not self.is_returned and self.due_date is not None and now > self.due_date
