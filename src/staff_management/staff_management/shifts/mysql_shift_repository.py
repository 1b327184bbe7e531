from __future__ import annotations

from ..database.mysql_base import MySQLEntityRepository
from .model import Shift
from .repository import ShiftRepository


class MySQLShiftRepository(MySQLEntityRepository[Shift], ShiftRepository):
    table = "shifts"
    key_column = "shift_id"
    columns = ("start_datetime", "end_datetime")

    def _to_model(self, r) -> Shift:
        return Shift(
            shift_id=int(r["shift_id"]),
            start_datetime=r["start_datetime"],
            end_datetime=r["end_datetime"],
            version=int(r["row_version"]),
        )

    def _to_params(self, s: Shift) -> tuple:
        return (s.start_datetime, s.end_datetime)
