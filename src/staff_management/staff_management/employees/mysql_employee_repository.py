from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ..database.mysql_base import MySQLEntityRepository, db_cursor, fetchall
from .model import Employee, EmployeeSummary
from .repository import EmployeeRepository

SUMMARY_COLUMNS = "e.employee_id, e.first_name, e.last_name, e.email, e.role, e.image_path"


def summary_from_row(r) -> EmployeeSummary:
    return EmployeeSummary(
        employee_id=int(r["employee_id"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        email=r["email"] or "",
        role=r["role"] or "",
        image_path=r.get("image_path"),
    )


class MySQLEmployeeRepository(MySQLEntityRepository[Employee], EmployeeRepository):
    table = "employees"
    key_column = "employee_id"
    columns = ("first_name", "last_name", "email", "role", "hourly_rate", "date_hired", "image_path")

    def _to_model(self, r) -> Employee:
        return Employee(
            employee_id=int(r["employee_id"]),
            first_name=r["first_name"],
            last_name=r["last_name"],
            email=r["email"] or "",
            role=r["role"] or "",
            hourly_rate=Decimal(str(r["hourly_rate"] or 0)),
            date_hired=r["date_hired"],
            image_path=r.get("image_path"),
            version=int(r["row_version"]),
        )

    def _to_params(self, e: Employee) -> tuple:
        return (e.first_name, e.last_name, e.email, e.role, e.hourly_rate, e.date_hired, e.image_path)

    def list_summaries(self) -> Sequence[EmployeeSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {SUMMARY_COLUMNS} FROM employees e ORDER BY e.employee_id")
            return [summary_from_row(r) for r in fetchall(cur)]

    def list_for_shift(self, shift_id: int) -> Sequence[EmployeeSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {SUMMARY_COLUMNS}
                FROM employee_shifts es
                JOIN employees e ON e.employee_id = es.employee_id
                WHERE es.shift_id=%s
                ORDER BY es.employee_shift_id
                """,
                (int(shift_id),),
            )
            return [summary_from_row(r) for r in fetchall(cur)]
