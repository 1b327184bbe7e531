from __future__ import annotations

from flask import Flask

from ..common.pages import register_crud_pages
from ..container import Container
from .forms import member_from_mapping


def register(app: Flask, container: Container) -> None:
    register_crud_pages(
        app,
        prefix="/members",
        name="members",
        service=container.member_service,
        from_mapping=member_from_mapping,
        key_field="member_id",
        files=container.file_service,
        image_directory="members",
        details_context=lambda member: {"loans": container.borrowing_service.by_member(member.member_id)},
    )
