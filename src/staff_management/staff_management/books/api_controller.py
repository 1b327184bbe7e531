from __future__ import annotations

from flask import Flask

from ..common.web import register_crud_api
from ..container import Container
from .forms import book_from_mapping


def register(app: Flask, container: Container) -> None:
    register_crud_api(
        app,
        prefix="/api/books",
        name="books",
        service=container.book_service,
        from_mapping=book_from_mapping,
        key_field="book_id",
    )
