from __future__ import annotations

from typing import Optional

from ..common.entity_service import EntityService
from ..core.result import Result
from .model import Book
from .repository import BookRepository


class BookService(EntityService[Book]):
    entity_name = "Book"
    key_field = "book_id"

    def __init__(self, books: BookRepository):
        super().__init__(books)

    def _validate(self, entity: Book) -> Optional[Result]:
        if not (entity.title or "").strip():
            return Result.invalid("Title is required")
        return None
