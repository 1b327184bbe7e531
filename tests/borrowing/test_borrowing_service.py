from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta

import pytest

from src.staff_management.staff_management.borrowing.model import BorrowedBook
from src.staff_management.staff_management.core.enums import LoanStatus, Outcome


def new_loan(member_id, book_id, **kw) -> BorrowedBook:
    return BorrowedBook(
        borrow_id=0,
        member_id=member_id,
        book_id=book_id,
        borrow_date=kw.pop("borrow_date", None),
        due_date=kw.pop("due_date", None),
        **kw,
    )


@pytest.fixture
def dune_and_alice(container, samples):
    book = container.book_service.create(samples.book("Dune")).unwrap()
    member = container.member_service.create(samples.member("Alice")).unwrap()
    return book, member


def test_by_member_returns_the_loan_with_joined_book(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service

    svc.create(
        new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1), due_date=datetime(2024, 1, 15))
    ).unwrap()

    loans = svc.by_member(member.member_id)
    assert len(loans) == 1
    assert loans[0].book.title == "Dune"
    assert loans[0].member.first_name == "Alice"
    assert loans[0].status == LoanStatus.OPEN


def test_by_book_lists_every_loan_of_the_book(container, dune_and_alice, samples):
    book, alice = dune_and_alice
    bob = container.member_service.create(samples.member("Bob", email="bob@example.com")).unwrap()
    svc = container.borrowing_service
    svc.create(new_loan(alice.member_id, book.book_id, borrow_date=datetime(2024, 1, 1))).unwrap()
    svc.create(new_loan(bob.member_id, book.book_id, borrow_date=datetime(2024, 2, 1))).unwrap()

    assert [l.member_id for l in svc.by_book(book.book_id)] == [alice.member_id, bob.member_id]


def test_create_fills_default_dates_and_current_shift(container, dune_and_alice, samples):
    book, member = dune_and_alice
    now = datetime(2026, 3, 2, 10, 30)
    shift = container.shift_service.create(
        samples.shift(start=datetime(2026, 3, 2, 8), end=datetime(2026, 3, 2, 16))
    ).unwrap()

    loan = container.borrowing_service.create(new_loan(member.member_id, book.book_id), now=now).unwrap()

    assert loan.borrow_date == datetime(2026, 3, 2)
    assert loan.due_date == datetime(2026, 3, 16)
    assert loan.borrowed_during_shift_id == shift.shift_id
    assert loan.return_date is None


def test_create_keeps_supplied_dates(container, dune_and_alice):
    book, member = dune_and_alice

    loan = container.borrowing_service.create(
        new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1), due_date=datetime(2024, 1, 15))
    ).unwrap()

    assert (loan.borrow_date, loan.due_date) == (datetime(2024, 1, 1), datetime(2024, 1, 15))
    assert loan.borrowed_during_shift_id is None


def test_create_rejects_a_return_date(container, dune_and_alice):
    book, member = dune_and_alice

    result = container.borrowing_service.create(
        new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1), return_date=datetime(2024, 1, 2))
    )

    assert result.outcome == Outcome.INVALID_ARGUMENT


def test_create_checks_references(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service

    assert svc.create(new_loan(0, book.book_id)).outcome == Outcome.INVALID_ARGUMENT
    assert svc.create(new_loan(member.member_id, 404)).outcome == Outcome.NOT_FOUND
    assert svc.create(new_loan(404, book.book_id)).outcome == Outcome.NOT_FOUND
    assert svc.create(
        new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 15), due_date=datetime(2024, 1, 1))
    ).outcome == Outcome.INVALID_ARGUMENT


def test_return_sets_timestamp_not_before_borrow_date(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1))).unwrap()

    returned = svc.return_book(loan.borrow_id, now=datetime(2024, 1, 5, 9, 0)).unwrap()

    assert returned.return_date == datetime(2024, 1, 5, 9, 0)
    assert returned.status == LoanStatus.RETURNED
    assert svc.get_by_id(loan.borrow_id).unwrap().return_date == datetime(2024, 1, 5, 9, 0)


def test_return_clock_behind_borrow_date_clamps_to_borrow_date(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 6, 1))).unwrap()

    returned = svc.return_book(loan.borrow_id, now=datetime(2024, 5, 31)).unwrap()

    assert returned.return_date == datetime(2024, 6, 1)


def test_second_return_conflicts_and_keeps_first_timestamp(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1))).unwrap()
    first = svc.return_book(loan.borrow_id, now=datetime(2024, 1, 10)).unwrap()

    again = svc.return_book(loan.borrow_id, now=datetime(2024, 1, 20))

    assert again.outcome == Outcome.CONFLICT
    assert svc.get_by_id(loan.borrow_id).unwrap().return_date == first.return_date


def test_return_records_employee_and_current_shift(container, dune_and_alice, samples):
    book, member = dune_and_alice
    carol = container.employee_service.create(samples.employee("Carol")).unwrap()
    shift = container.shift_service.create(
        samples.shift(start=datetime(2026, 3, 2, 8), end=datetime(2026, 3, 2, 16))
    ).unwrap()
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2026, 3, 1))).unwrap()

    returned = svc.return_book(
        loan.borrow_id, received_by_employee_id=carol.employee_id, now=datetime(2026, 3, 2, 9)
    ).unwrap()

    assert returned.received_by_employee_id == carol.employee_id
    assert returned.returned_during_shift_id == shift.shift_id


def test_return_missing_loan_is_not_found(container):
    assert container.borrowing_service.return_book(42).outcome == Outcome.NOT_FOUND


def test_overdue_only_while_open(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(
        new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1), due_date=datetime(2024, 1, 15))
    ).unwrap()

    assert not loan.is_overdue(datetime(2024, 1, 15))
    assert loan.is_overdue(datetime(2024, 1, 15) + timedelta(seconds=1))
    returned = svc.return_book(loan.borrow_id, now=datetime(2024, 2, 1)).unwrap()
    assert not returned.is_overdue(datetime(2024, 3, 1))


def test_deleting_member_cascades_loans(container, store, dune_and_alice):
    book, member = dune_and_alice
    container.borrowing_service.create(new_loan(member.member_id, book.book_id)).unwrap()

    container.member_service.delete(member.member_id).unwrap()

    assert container.borrowing_service.get_all() == []


def test_create_rejects_unknown_employee_or_shift(container, store, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service

    by_ghost = svc.create(new_loan(member.member_id, book.book_id, processed_by_employee_id=999))
    in_ghost_shift = svc.create(new_loan(member.member_id, book.book_id, borrowed_during_shift_id=999))

    assert by_ghost.outcome == Outcome.NOT_FOUND
    assert in_ghost_shift.outcome == Outcome.NOT_FOUND
    assert store.borrowed_books.list_all() == []


def test_update_rejects_unknown_receiving_employee(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1))).unwrap()

    result = svc.update(loan.borrow_id, dataclasses.replace(loan, received_by_employee_id=999))

    assert result.outcome == Outcome.NOT_FOUND
    assert svc.get_by_id(loan.borrow_id).unwrap().received_by_employee_id is None


def test_return_with_unknown_employee_or_shift_leaves_loan_open(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1))).unwrap()

    assert svc.return_book(loan.borrow_id, received_by_employee_id=999).outcome == Outcome.NOT_FOUND
    assert svc.return_book(loan.borrow_id, returned_during_shift_id=999).outcome == Outcome.NOT_FOUND
    assert not svc.get_by_id(loan.borrow_id).unwrap().is_returned


def test_store_level_missing_reference_maps_to_not_found(container, dune_and_alice, monkeypatch):
    book, member = dune_and_alice
    svc = container.borrowing_service
    # employee deleted between the check and the insert
    monkeypatch.setattr(svc, "_check_context", lambda **refs: None)

    result = svc.create(new_loan(member.member_id, book.book_id, processed_by_employee_id=999))

    assert result.outcome == Outcome.NOT_FOUND


def test_return_date_is_whole_seconds(container, dune_and_alice):
    book, member = dune_and_alice
    svc = container.borrowing_service
    loan = svc.create(new_loan(member.member_id, book.book_id, borrow_date=datetime(2024, 1, 1))).unwrap()

    returned = svc.return_book(loan.borrow_id, now=datetime(2024, 1, 5, 9, 0, 0, 987654)).unwrap()

    assert returned.return_date == datetime(2024, 1, 5, 9, 0, 0)
    assert svc.get_by_id(loan.borrow_id).unwrap().return_date == returned.return_date
