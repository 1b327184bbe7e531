from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .books.mysql_book_repository import MySQLBookRepository
from .books.repository import BookRepository
from .books.service import BookService
from .borrowing.mysql_borrowed_book_repository import MySQLBorrowedBookRepository
from .borrowing.repository import BorrowedBookRepository
from .borrowing.service import BorrowingService
from .database.connection import DBConfig, DatabaseConnection
from .employee_shifts.mysql_employee_shift_repository import MySQLEmployeeShiftRepository
from .employee_shifts.repository import EmployeeShiftRepository
from .employee_shifts.service import EmployeeShiftService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .files.service import FileService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AdminService, AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    books_repo: BookRepository
    members_repo: MemberRepository
    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    employee_shifts_repo: EmployeeShiftRepository
    borrowed_books_repo: BorrowedBookRepository
    users_repo: UserRepository

    book_service: BookService
    member_service: MemberService
    employee_service: EmployeeService
    shift_service: ShiftService
    employee_shift_service: EmployeeShiftService
    borrowing_service: BorrowingService
    file_service: FileService
    auth_service: AuthService
    admin_service: AdminService


def wire_services(
    *,
    books: BookRepository,
    members: MemberRepository,
    employees: EmployeeRepository,
    shifts: ShiftRepository,
    employee_shifts: EmployeeShiftRepository,
    borrowed_books: BorrowedBookRepository,
    users: UserRepository,
    file_service: FileService,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the services over any set of repositories (MySQL or in-memory)."""

    shift_service = ShiftService(shifts)
    return Container(
        conn=conn,
        books_repo=books,
        members_repo=members,
        employees_repo=employees,
        shifts_repo=shifts,
        employee_shifts_repo=employee_shifts,
        borrowed_books_repo=borrowed_books,
        users_repo=users,
        book_service=BookService(books),
        member_service=MemberService(members),
        employee_service=EmployeeService(employees),
        shift_service=shift_service,
        employee_shift_service=EmployeeShiftService(employee_shifts, employees, shifts),
        borrowing_service=BorrowingService(borrowed_books, books, members, employees, shift_service),
        file_service=file_service,
        auth_service=AuthService(users),
        admin_service=AdminService(users),
    )


def db_config_from_settings(db_config: dict) -> DBConfig:
    return DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", 0)),
    )


def build_container(*, db_config: dict, upload_root: str | Path) -> Container:
    conn = DatabaseConnection.get_instance(db_config_from_settings(db_config))

    return wire_services(
        books=MySQLBookRepository(conn),
        members=MySQLMemberRepository(conn),
        employees=MySQLEmployeeRepository(conn),
        shifts=MySQLShiftRepository(conn),
        employee_shifts=MySQLEmployeeShiftRepository(conn),
        borrowed_books=MySQLBorrowedBookRepository(conn),
        users=MySQLUserRepository(conn),
        file_service=FileService(upload_root),
        conn=conn,
    )
