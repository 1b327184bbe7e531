from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import integer
from .model import EmployeeShift


def employee_shift_from_mapping(data: Mapping[str, Any], *, employee_shift_id: int = 0) -> EmployeeShift:
    return EmployeeShift(
        employee_shift_id=integer(data, "employee_shift_id", default=employee_shift_id),
        employee_id=integer(data, "employee_id"),
        shift_id=integer(data, "shift_id"),
        version=integer(data, "version"),
    )
