from __future__ import annotations

from flask import Flask

from ..common.web import register_crud_api
from ..container import Container
from .forms import employee_from_mapping


def register(app: Flask, container: Container) -> None:
    register_crud_api(
        app,
        prefix="/api/employees",
        name="employees",
        service=container.employee_service,
        from_mapping=employee_from_mapping,
        key_field="employee_id",
        list_view=container.employee_service.list_summaries,
    )
