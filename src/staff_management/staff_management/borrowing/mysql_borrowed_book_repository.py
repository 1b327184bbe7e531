from __future__ import annotations

from typing import Optional, Sequence

from ..books.model import Book
from ..database.mysql_base import MySQLEntityRepository
from ..members.model import Member
from .model import BorrowedBook
from .repository import BorrowedBookRepository


def _optional_int(value) -> Optional[int]:
    return int(value) if value is not None else None


class MySQLBorrowedBookRepository(MySQLEntityRepository[BorrowedBook], BorrowedBookRepository):
    table = "borrowed_books"
    key_column = "borrow_id"
    columns = (
        "member_id",
        "book_id",
        "borrow_date",
        "due_date",
        "return_date",
        "borrowed_during_shift_id",
        "returned_during_shift_id",
        "processed_by_employee_id",
        "received_by_employee_id",
    )

    def _select_sql(self) -> str:
        loan_cols = ", ".join(f"borrowed_books.{c}" for c in (self.key_column, *self.columns, "row_version"))
        return f"""
            SELECT {loan_cols},
                   b.title AS book_title, b.author AS book_author, b.isbn AS book_isbn,
                   b.status AS book_status, b.image_path AS book_image_path,
                   m.first_name AS member_first_name, m.last_name AS member_last_name,
                   m.email AS member_email, m.phone_number AS member_phone_number,
                   m.image_path AS member_image_path
            FROM borrowed_books
            LEFT JOIN books b ON b.book_id = borrowed_books.book_id
            LEFT JOIN members m ON m.member_id = borrowed_books.member_id
        """

    def _to_model(self, r) -> BorrowedBook:
        book = None
        if r.get("book_title") is not None:
            book = Book(
                book_id=int(r["book_id"]),
                title=r["book_title"],
                author=r.get("book_author") or "",
                isbn=r.get("book_isbn") or "",
                status=r.get("book_status") or "",
                image_path=r.get("book_image_path"),
            )
        member = None
        if r.get("member_first_name") is not None:
            member = Member(
                member_id=int(r["member_id"]),
                first_name=r["member_first_name"],
                last_name=r.get("member_last_name") or "",
                email=r.get("member_email") or "",
                phone_number=r.get("member_phone_number") or "",
                image_path=r.get("member_image_path"),
            )
        return BorrowedBook(
            borrow_id=int(r["borrow_id"]),
            member_id=int(r["member_id"]),
            book_id=int(r["book_id"]),
            borrow_date=r["borrow_date"],
            due_date=r["due_date"],
            return_date=r.get("return_date"),
            borrowed_during_shift_id=_optional_int(r.get("borrowed_during_shift_id")),
            returned_during_shift_id=_optional_int(r.get("returned_during_shift_id")),
            processed_by_employee_id=_optional_int(r.get("processed_by_employee_id")),
            received_by_employee_id=_optional_int(r.get("received_by_employee_id")),
            book=book,
            member=member,
            version=int(r["row_version"]),
        )

    def _to_params(self, bb: BorrowedBook) -> tuple:
        return (
            int(bb.member_id),
            int(bb.book_id),
            bb.borrow_date,
            bb.due_date,
            bb.return_date,
            bb.borrowed_during_shift_id,
            bb.returned_during_shift_id,
            bb.processed_by_employee_id,
            bb.received_by_employee_id,
        )

    def list_for_member(self, member_id: int) -> Sequence[BorrowedBook]:
        return self._query("borrowed_books.member_id=%s", (int(member_id),))

    def list_for_book(self, book_id: int) -> Sequence[BorrowedBook]:
        return self._query("borrowed_books.book_id=%s", (int(book_id),))
