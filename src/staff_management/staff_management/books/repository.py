from __future__ import annotations

from ..common.repository import EntityRepository
from .model import Book


class BookRepository(EntityRepository[Book]):
    pass
