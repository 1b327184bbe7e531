from __future__ import annotations

from typing import Sequence

from ..common.repository import EntityRepository
from .model import Employee, EmployeeSummary


class EmployeeRepository(EntityRepository[Employee]):
    def list_summaries(self) -> Sequence[EmployeeSummary]:
        raise NotImplementedError

    def list_for_shift(self, shift_id: int) -> Sequence[EmployeeSummary]:
        """Employees linked to ``shift_id`` through employee_shifts."""

        raise NotImplementedError
