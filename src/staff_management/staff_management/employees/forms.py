from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import decimal, integer, optional_datetime, optional_text, text
from .model import Employee


def employee_from_mapping(data: Mapping[str, Any], *, employee_id: int = 0) -> Employee:
    return Employee(
        employee_id=integer(data, "employee_id", default=employee_id),
        first_name=text(data, "first_name"),
        last_name=text(data, "last_name"),
        email=text(data, "email"),
        role=text(data, "role"),
        hourly_rate=decimal(data, "hourly_rate"),
        date_hired=optional_datetime(data, "date_hired"),
        image_path=optional_text(data, "image_path"),
        version=integer(data, "version"),
    )
