"""Using the service layer without Flask: record a loan and return it."""

import importlib

from config import get_settings_module

from src.staff_management.staff_management.borrowing.model import BorrowedBook
from src.staff_management.staff_management.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, upload_root="static")

    books = container.book_service.get_all()
    members = container.member_service.get_all()
    if not books or not members:
        print("Seed the database first (scripts/seed_db.py).")
        return

    loan = container.borrowing_service.create(
        BorrowedBook(borrow_id=0, member_id=members[0].member_id, book_id=books[0].book_id, borrow_date=None, due_date=None)
    ).unwrap()
    print("Borrowed:", loan.borrow_id, "due", loan.due_date)

    returned = container.borrowing_service.return_book(loan.borrow_id).unwrap()
    print("Returned:", returned.return_date, returned.status.value)


if __name__ == "__main__":
    main()
