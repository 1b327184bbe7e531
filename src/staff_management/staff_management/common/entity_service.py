from __future__ import annotations

import dataclasses
import logging
from typing import Generic, List, Optional, TypeVar

from ..core.exceptions import DuplicateKeyError, MissingReferenceError
from ..core.result import Result
from .repository import EntityRepository

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EntityService(Generic[T]):
    """Generic CRUD use cases over one entity table.

    Subclasses name the key field and may override ``_validate`` to reject a
    record before it is written.
    """

    entity_name = "Entity"
    key_field = "id"

    def __init__(self, repository: EntityRepository[T]):
        self._repo = repository

    def _key_of(self, entity: T) -> int:
        return int(getattr(entity, self.key_field) or 0)

    def _missing(self, entity_id: int) -> Result:
        return Result.not_found(f"{self.entity_name} with ID {entity_id} not found.")

    def _validate(self, entity: T) -> Optional[Result]:
        """Return a failed Result to reject ``entity``; None accepts it."""

        return None

    def get_all(self) -> List[T]:
        return list(self._repo.list_all())

    def get_by_id(self, entity_id: int) -> Result[T]:
        entity = self._repo.get_by_id(int(entity_id))
        if entity is None:
            return self._missing(entity_id)
        return Result.ok(entity)

    def create(self, entity: T) -> Result[T]:
        entity = dataclasses.replace(entity, **{self.key_field: 0, "version": 0})
        rejected = self._validate(entity)
        if rejected is not None:
            return rejected
        try:
            created = self._repo.create(entity)
        except DuplicateKeyError as e:
            return Result.conflict(str(e) or f"{self.entity_name} already exists.")
        except MissingReferenceError as e:
            return Result.not_found(str(e) or f"{self.entity_name} refers to a missing row.")
        logger.info("Created %s %s", self.entity_name, self._key_of(created))
        return Result.ok(created)

    def update(self, entity_id: int, entity: T) -> Result[T]:
        entity_id = int(entity_id)
        if self._key_of(entity) != entity_id:
            return Result.invalid("ID mismatch")

        existing = self._repo.get_by_id(entity_id)
        if existing is None:
            return self._missing(entity_id)

        supplied_version = int(getattr(entity, "version", 0) or 0)
        current_version = int(getattr(existing, "version", 0) or 0)
        if supplied_version and supplied_version != current_version:
            return Result.conflict(f"{self.entity_name} {entity_id} was modified by another request.")

        rejected = self._validate(entity)
        if rejected is not None:
            return rejected

        return self._write(entity, expected_version=current_version)

    def _write(self, entity: T, *, expected_version: int) -> Result[T]:
        entity_id = self._key_of(entity)
        try:
            written = self._repo.update(entity, expected_version=expected_version)
        except DuplicateKeyError as e:
            return Result.conflict(str(e) or f"{self.entity_name} already exists.")
        except MissingReferenceError as e:
            return Result.not_found(str(e) or f"{self.entity_name} refers to a missing row.")

        if not written:
            # Row vanished or moved on between our read and the write.
            if self._repo.get_by_id(entity_id) is None:
                return self._missing(entity_id)
            logger.warning("Concurrent update rejected for %s %s", self.entity_name, entity_id)
            return Result.conflict(f"{self.entity_name} {entity_id} was modified by another request.")

        return Result.ok(dataclasses.replace(entity, version=expected_version + 1))

    def delete(self, entity_id: int) -> Result[None]:
        entity_id = int(entity_id)
        if self._repo.get_by_id(entity_id) is None:
            return self._missing(entity_id)
        if not self._repo.delete_by_id(entity_id):
            return self._missing(entity_id)
        logger.info("Deleted %s %s", self.entity_name, entity_id)
        return Result.ok()
