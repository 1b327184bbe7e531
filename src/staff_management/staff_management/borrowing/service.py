from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from ..books.repository import BookRepository
from ..common.datetime_utils import now_local, start_of_day
from ..common.entity_service import EntityService
from ..core.constants import DEFAULT_LOAN_DAYS
from ..core.result import Result
from ..employees.repository import EmployeeRepository
from ..members.repository import MemberRepository
from ..shifts.service import ShiftService
from .model import BorrowedBook
from .repository import BorrowedBookRepository

logger = logging.getLogger(__name__)


class BorrowingService(EntityService[BorrowedBook]):
    """Borrow / return workflow on top of the generic loan CRUD.

    A loan is created Open (no return date) and moves to Returned exactly
    once through ``return_book``. The inherited ``update`` stays available
    for corrections and is not limited by that state machine.
    """

    entity_name = "Borrowed book"
    key_field = "borrow_id"

    def __init__(
        self,
        loans: BorrowedBookRepository,
        books: BookRepository,
        members: MemberRepository,
        employees: EmployeeRepository,
        shifts: ShiftService,
        *,
        loan_days: int = DEFAULT_LOAN_DAYS,
    ):
        super().__init__(loans)
        self._loans = loans
        self._books = books
        self._members = members
        self._employees = employees
        self._shifts = shifts
        self._loan_days = int(loan_days)

    def _current_shift_id(self, now: datetime) -> Optional[int]:
        shift = self._shifts.get_current_shift(now)
        return shift.shift_id if shift else None

    def _validate(self, entity: BorrowedBook) -> Optional[Result]:
        if int(entity.member_id or 0) <= 0 or int(entity.book_id or 0) <= 0:
            return Result.invalid("Invalid MemberID or BookID")
        if entity.borrow_date is None or entity.due_date is None:
            return Result.invalid("Borrow date and due date are required")
        if entity.due_date < entity.borrow_date:
            return Result.invalid("Due date cannot be before the borrow date")
        if entity.return_date is not None and entity.return_date < entity.borrow_date:
            return Result.invalid("Return date cannot be before the borrow date")
        if self._members.get_by_id(entity.member_id) is None:
            return Result.not_found(f"Member with ID {entity.member_id} not found.")
        if self._books.get_by_id(entity.book_id) is None:
            return Result.not_found(f"Book with ID {entity.book_id} not found.")
        return self._check_context(
            employee_ids=(entity.processed_by_employee_id, entity.received_by_employee_id),
            shift_ids=(entity.borrowed_during_shift_id, entity.returned_during_shift_id),
        )

    def _check_context(self, *, employee_ids, shift_ids) -> Optional[Result]:
        for employee_id in employee_ids:
            if employee_id is not None and self._employees.get_by_id(employee_id) is None:
                return Result.not_found(f"Employee with ID {employee_id} not found.")
        for shift_id in shift_ids:
            if shift_id is not None and not self._shifts.get_by_id(shift_id):
                return Result.not_found(f"Shift with ID {shift_id} not found.")
        return None

    def with_defaults(self, entity: BorrowedBook, now: Optional[datetime] = None) -> BorrowedBook:
        """Fill borrow date, due date and borrowing shift where they are empty."""

        now = now or now_local()
        borrow_date = entity.borrow_date or start_of_day(now)
        return dataclasses.replace(
            entity,
            borrow_date=borrow_date,
            due_date=entity.due_date or borrow_date + timedelta(days=self._loan_days),
            borrowed_during_shift_id=entity.borrowed_during_shift_id or self._current_shift_id(now),
        )

    def create(self, entity: BorrowedBook, now: Optional[datetime] = None) -> Result[BorrowedBook]:
        if entity.return_date is not None:
            return Result.invalid("A new loan cannot have a return date")
        return super().create(self.with_defaults(entity, now))

    def return_book(
        self,
        borrow_id: int,
        received_by_employee_id: Optional[int] = None,
        returned_during_shift_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Result[BorrowedBook]:
        """Close an open loan.

        The return date is ``now`` but never earlier than the borrow date.
        A loan that is already returned is left untouched (CONFLICT).
        """

        loan = self._loans.get_by_id(int(borrow_id))
        if loan is None:
            return self._missing(borrow_id)
        if loan.is_returned:
            return Result.conflict(f"Book for loan {borrow_id} was already returned.")

        rejected = self._check_context(
            employee_ids=(received_by_employee_id or None,),
            shift_ids=(returned_during_shift_id or None,),
        )
        if rejected is not None:
            return rejected

        # DATETIME columns keep whole seconds.
        now = (now or now_local()).replace(microsecond=0)
        returned = dataclasses.replace(
            loan,
            return_date=max(now, loan.borrow_date) if loan.borrow_date else now,
            received_by_employee_id=received_by_employee_id or loan.received_by_employee_id,
            returned_during_shift_id=returned_during_shift_id or self._current_shift_id(now),
        )
        result = self._write(returned, expected_version=loan.version)
        if result:
            logger.info("Loan %s returned at %s", borrow_id, returned.return_date)
        return result

    def by_member(self, member_id: int) -> List[BorrowedBook]:
        return list(self._loans.list_for_member(int(member_id)))

    def by_book(self, book_id: int) -> List[BorrowedBook]:
        return list(self._loans.list_for_book(int(book_id)))
