from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from ..common.entity_service import EntityService
from ..core.result import Result
from .model import Employee, EmployeeSummary
from .repository import EmployeeRepository


class EmployeeService(EntityService[Employee]):
    """Employee CRUD plus the narrow read-model used by shift views."""

    entity_name = "Employee"
    key_field = "employee_id"

    def __init__(self, employees: EmployeeRepository):
        super().__init__(employees)
        self._employees = employees

    def _validate(self, entity: Employee) -> Optional[Result]:
        if not entity.first_name.strip() or not entity.last_name.strip():
            return Result.invalid("First and last name are required")
        if "@" not in entity.email:
            return Result.invalid("A valid email is required")
        if not entity.role.strip():
            return Result.invalid("Role is required")
        if entity.hourly_rate < Decimal("0"):
            return Result.invalid("Hourly rate cannot be negative")
        if entity.date_hired is None:
            return Result.invalid("Date hired is required")
        return None

    def list_summaries(self) -> List[EmployeeSummary]:
        return list(self._employees.list_summaries())

    def get_employees_for_shift(self, shift_id: int) -> List[EmployeeSummary]:
        return list(self._employees.list_for_shift(int(shift_id)))
