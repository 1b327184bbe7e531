from __future__ import annotations

from flask import Flask

from ..common.web import register_crud_api
from ..container import Container
from .forms import shift_from_mapping


def register(app: Flask, container: Container) -> None:
    register_crud_api(
        app,
        prefix="/api/shifts",
        name="shifts",
        service=container.shift_service,
        from_mapping=shift_from_mapping,
        key_field="shift_id",
    )
