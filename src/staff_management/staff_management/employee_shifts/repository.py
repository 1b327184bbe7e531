from __future__ import annotations

from typing import Optional, Sequence

from ..common.repository import EntityRepository
from ..shifts.model import ShiftSummary
from .model import EmployeeShift


class EmployeeShiftRepository(EntityRepository[EmployeeShift]):
    def find_link(self, *, employee_id: int, shift_id: int) -> Optional[EmployeeShift]:
        """First row (lowest id) for the pair, if any."""

        raise NotImplementedError

    def list_shifts_for_employee(self, employee_id: int) -> Sequence[ShiftSummary]:
        raise NotImplementedError
