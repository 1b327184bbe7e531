from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EmployeeShift:
    """Join entity: one employee assigned to one shift.

    The assignment has its own identity so it can be managed directly.
    """

    employee_shift_id: int
    employee_id: int
    shift_id: int
    version: int = field(default=0, compare=False)
