from __future__ import annotations

from flask import Flask

from ..common.pages import register_crud_pages
from ..container import Container
from .forms import book_from_mapping


def register(app: Flask, container: Container) -> None:
    register_crud_pages(
        app,
        prefix="/books",
        name="books",
        service=container.book_service,
        from_mapping=book_from_mapping,
        key_field="book_id",
        files=container.file_service,
        image_directory="books",
        details_context=lambda book: {"loans": container.borrowing_service.by_book(book.book_id)},
    )
