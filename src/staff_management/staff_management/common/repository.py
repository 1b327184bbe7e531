from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class EntityRepository(Protocol[T]):
    """CRUD contract shared by every entity table.

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    def list_all(self) -> Sequence[T]:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[T]:
        raise NotImplementedError

    def create(self, entity: T) -> T:
        """Insert the row and return it with the generated key and version 1."""

        raise NotImplementedError

    def update(self, entity: T, *, expected_version: int) -> bool:
        """Overwrite every mutable column if the stored version still matches.

        Returns False when no row was written (missing row or version moved on).
        """

        raise NotImplementedError

    def delete_by_id(self, entity_id: int) -> bool:
        raise NotImplementedError
