from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a staff member (full record, incl. pay data)."""

    employee_id: int
    first_name: str
    last_name: str
    email: str
    role: str
    hourly_rate: Decimal
    date_hired: datetime
    image_path: Optional[str] = None
    version: int = field(default=0, compare=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def summary(self) -> "EmployeeSummary":
        return EmployeeSummary(
            employee_id=self.employee_id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            role=self.role,
            image_path=self.image_path,
        )


@dataclass(frozen=True)
class EmployeeSummary:
    """Display projection: no hourly rate / hire date."""

    employee_id: int
    first_name: str
    last_name: str
    email: str
    role: str
    image_path: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
