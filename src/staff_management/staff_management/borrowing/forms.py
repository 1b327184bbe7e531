from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import integer, optional_datetime, optional_integer
from .model import BorrowedBook


def borrowed_book_from_mapping(data: Mapping[str, Any], *, borrow_id: int = 0) -> BorrowedBook:
    """Loan from a form / JSON body. Missing dates stay empty for the service defaults."""

    return BorrowedBook(
        borrow_id=integer(data, "borrow_id", default=borrow_id),
        member_id=integer(data, "member_id"),
        book_id=integer(data, "book_id"),
        borrow_date=optional_datetime(data, "borrow_date"),
        due_date=optional_datetime(data, "due_date"),
        return_date=optional_datetime(data, "return_date"),
        borrowed_during_shift_id=optional_integer(data, "borrowed_during_shift_id"),
        returned_during_shift_id=optional_integer(data, "returned_during_shift_id"),
        processed_by_employee_id=optional_integer(data, "processed_by_employee_id"),
        received_by_employee_id=optional_integer(data, "received_by_employee_id"),
        version=integer(data, "version"),
    )
