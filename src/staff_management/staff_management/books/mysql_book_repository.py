from __future__ import annotations

from ..database.mysql_base import MySQLEntityRepository
from .model import Book
from .repository import BookRepository


class MySQLBookRepository(MySQLEntityRepository[Book], BookRepository):
    table = "books"
    key_column = "book_id"
    columns = ("title", "author", "isbn", "status", "image_path")

    def _to_model(self, r) -> Book:
        return Book(
            book_id=int(r["book_id"]),
            title=r["title"],
            author=r["author"] or "",
            isbn=r["isbn"] or "",
            status=r["status"] or "",
            image_path=r.get("image_path"),
            version=int(r["row_version"]),
        )

    def _to_params(self, b: Book) -> tuple:
        return (b.title, b.author, b.isbn, b.status, b.image_path)
