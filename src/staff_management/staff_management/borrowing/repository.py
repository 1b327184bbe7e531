from __future__ import annotations

from typing import Sequence

from ..common.repository import EntityRepository
from .model import BorrowedBook


class BorrowedBookRepository(EntityRepository[BorrowedBook]):
    """Loans, read back with their Book and Member attached."""

    def list_for_member(self, member_id: int) -> Sequence[BorrowedBook]:
        raise NotImplementedError

    def list_for_book(self, book_id: int) -> Sequence[BorrowedBook]:
        raise NotImplementedError
