from __future__ import annotations

import os

os.environ["APP_ENV"] = "testing"

from datetime import datetime
from decimal import Decimal

import pytest

from memory_store import MemoryStore
from src.staff_management.staff_management.books.model import Book
from src.staff_management.staff_management.container import wire_services
from src.staff_management.staff_management.employees.model import Employee
from src.staff_management.staff_management.files.service import FileService
from src.staff_management.staff_management.main import create_app
from src.staff_management.staff_management.members.model import Member
from src.staff_management.staff_management.shifts.model import Shift

ADMIN_EMAIL = "admin@staffmanagement.com"
ADMIN_PASSWORD = "Admin@123456"


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def container(store, tmp_path):
    return wire_services(
        books=store.books,
        members=store.members,
        employees=store.employees,
        shifts=store.shifts,
        employee_shifts=store.employee_shifts,
        borrowed_books=store.borrowed_books,
        users=store.users,
        file_service=FileService(tmp_path),
    )


@pytest.fixture
def app(container):
    app = create_app(container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app, store):
    client = app.test_client()
    admin = store.users.get_by_email(ADMIN_EMAIL)
    with client.session_transaction() as sess:
        sess["user_id"] = admin.user_id
        sess["name"] = admin.email
        sess["role"] = admin.role.value
    return client


# Sample rows -----------------------------------------------------------


def make_book(title="Dune", **kw) -> Book:
    return Book(
        book_id=kw.pop("book_id", 0),
        title=title,
        author=kw.pop("author", "Frank Herbert"),
        isbn=kw.pop("isbn", "9780441013593"),
        status=kw.pop("status", "Available"),
        **kw,
    )


def make_member(first_name="Alice", **kw) -> Member:
    return Member(
        member_id=kw.pop("member_id", 0),
        first_name=first_name,
        last_name=kw.pop("last_name", "Nguyen"),
        email=kw.pop("email", "alice@example.com"),
        phone_number=kw.pop("phone_number", "555-0101"),
        **kw,
    )


def make_employee(first_name="Carol", **kw) -> Employee:
    return Employee(
        employee_id=kw.pop("employee_id", 0),
        first_name=first_name,
        last_name=kw.pop("last_name", "Le"),
        email=kw.pop("email", "carol@example.com"),
        role=kw.pop("role", "Librarian"),
        hourly_rate=kw.pop("hourly_rate", Decimal("22.50")),
        date_hired=kw.pop("date_hired", datetime(2023, 3, 1)),
        **kw,
    )


def make_shift(start=datetime(2026, 3, 2, 8, 0), end=datetime(2026, 3, 2, 16, 0), **kw) -> Shift:
    return Shift(shift_id=kw.pop("shift_id", 0), start_datetime=start, end_datetime=end, **kw)


@pytest.fixture
def samples():
    """Factories for valid, not yet stored records."""

    class Samples:
        book = staticmethod(make_book)
        member = staticmethod(make_member)
        employee = staticmethod(make_employee)
        shift = staticmethod(make_shift)

    return Samples
