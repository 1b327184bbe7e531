from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import integer, optional_text, text
from .model import Book


def book_from_mapping(data: Mapping[str, Any], *, book_id: int = 0) -> Book:
    """Build a Book from a submitted form or JSON body."""

    return Book(
        book_id=integer(data, "book_id", default=book_id),
        title=text(data, "title"),
        author=text(data, "author"),
        isbn=text(data, "isbn"),
        status=text(data, "status", default="Available"),
        image_path=optional_text(data, "image_path"),
        version=integer(data, "version"),
    )
