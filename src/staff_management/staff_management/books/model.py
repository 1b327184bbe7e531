from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Book:
    """Domain entity: a catalogue title.

    Note: plain data object, no database access.
    """

    book_id: int
    title: str
    author: str
    isbn: str
    status: str
    image_path: Optional[str] = None
    version: int = field(default=0, compare=False)
