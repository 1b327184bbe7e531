from __future__ import annotations

from typing import Optional, Sequence

from ..database.mysql_base import MySQLEntityRepository, db_cursor, fetchall, fetchone
from ..shifts.model import ShiftSummary
from .model import EmployeeShift
from .repository import EmployeeShiftRepository


class MySQLEmployeeShiftRepository(MySQLEntityRepository[EmployeeShift], EmployeeShiftRepository):
    table = "employee_shifts"
    key_column = "employee_shift_id"
    columns = ("employee_id", "shift_id")

    def _to_model(self, r) -> EmployeeShift:
        return EmployeeShift(
            employee_shift_id=int(r["employee_shift_id"]),
            employee_id=int(r["employee_id"]),
            shift_id=int(r["shift_id"]),
            version=int(r["row_version"]),
        )

    def _to_params(self, es: EmployeeShift) -> tuple:
        return (int(es.employee_id), int(es.shift_id))

    def find_link(self, *, employee_id: int, shift_id: int) -> Optional[EmployeeShift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_shift_id, employee_id, shift_id, row_version
                FROM employee_shifts
                WHERE employee_id=%s AND shift_id=%s
                ORDER BY employee_shift_id
                LIMIT 1
                """,
                (int(employee_id), int(shift_id)),
            )
            r = fetchone(cur)
            return self._to_model(r) if r else None

    def list_shifts_for_employee(self, employee_id: int) -> Sequence[ShiftSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.shift_id, s.start_datetime, s.end_datetime
                FROM employee_shifts es
                JOIN shifts s ON s.shift_id = es.shift_id
                WHERE es.employee_id=%s
                ORDER BY s.start_datetime
                """,
                (int(employee_id),),
            )
            return [
                ShiftSummary(
                    shift_id=int(r["shift_id"]),
                    start_datetime=r["start_datetime"],
                    end_datetime=r["end_datetime"],
                )
                for r in fetchall(cur)
            ]
