from __future__ import annotations

import logging
from typing import List, Optional

from ..common.entity_service import EntityService
from ..core.result import Result
from ..employees.model import EmployeeSummary
from ..employees.repository import EmployeeRepository
from ..shifts.model import ShiftSummary
from ..shifts.repository import ShiftRepository
from .model import EmployeeShift
from .repository import EmployeeShiftRepository

logger = logging.getLogger(__name__)


class EmployeeShiftService(EntityService[EmployeeShift]):
    """Assignments between employees and shifts.

    ``link``/``unlink`` are the convenience pair; the inherited CRUD works on
    join-row ids. Both paths run the same checks: positive ids, existing
    employee and shift, and at most one row per (employee, shift) pair.
    """

    entity_name = "Employee shift"
    key_field = "employee_shift_id"

    def __init__(
        self,
        links: EmployeeShiftRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
    ):
        super().__init__(links)
        self._links = links
        self._employees = employees
        self._shifts = shifts

    def _validate(self, entity: EmployeeShift) -> Optional[Result]:
        if int(entity.employee_id or 0) <= 0 or int(entity.shift_id or 0) <= 0:
            return Result.invalid("Invalid EmployeeID or ShiftID")
        if self._employees.get_by_id(entity.employee_id) is None:
            return Result.not_found(f"Employee with ID {entity.employee_id} not found.")
        if self._shifts.get_by_id(entity.shift_id) is None:
            return Result.not_found(f"Shift with ID {entity.shift_id} not found.")

        existing = self._links.find_link(employee_id=entity.employee_id, shift_id=entity.shift_id)
        if existing and existing.employee_shift_id != entity.employee_shift_id:
            return Result.conflict("Employee is already linked to this shift.")
        return None

    def link(self, employee_id: int, shift_id: int) -> Result[EmployeeShift]:
        result = self.create(EmployeeShift(employee_shift_id=0, employee_id=int(employee_id), shift_id=int(shift_id)))
        if result:
            logger.info("Linked employee %s to shift %s", employee_id, shift_id)
        return result

    def unlink(self, employee_id: int, shift_id: int) -> Result[None]:
        """Remove the assignment; a falsy NOT_FOUND result when there is none.

        Only the first matching row is removed.
        """

        link = self._links.find_link(employee_id=int(employee_id), shift_id=int(shift_id))
        if link is None:
            return Result.not_found("Link not found.")
        if not self._links.delete_by_id(link.employee_shift_id):
            return Result.not_found("Link not found.")
        logger.info("Unlinked employee %s from shift %s", employee_id, shift_id)
        return Result.ok()

    def employees_in_shift(self, shift_id: int) -> List[EmployeeSummary]:
        return list(self._employees.list_for_shift(int(shift_id)))

    def shifts_for_employee(self, employee_id: int) -> List[ShiftSummary]:
        return list(self._links.list_shifts_for_employee(int(employee_id)))

    def available_shifts_for_employee(self, employee_id: int) -> List[ShiftSummary]:
        assigned = {s.shift_id for s in self.shifts_for_employee(employee_id)}
        return [s.summary() for s in self._shifts.list_all() if s.shift_id not in assigned]

    def available_employees_for_shift(self, shift_id: int) -> List[EmployeeSummary]:
        assigned = {e.employee_id for e in self.employees_in_shift(shift_id)}
        return [e for e in self._employees.list_summaries() if e.employee_id not in assigned]
