from __future__ import annotations

from flask import Flask

from ..common.web import register_crud_api
from ..container import Container
from .forms import member_from_mapping


def register(app: Flask, container: Container) -> None:
    register_crud_api(
        app,
        prefix="/api/members",
        name="members",
        service=container.member_service,
        from_mapping=member_from_mapping,
        key_field="member_id",
    )
