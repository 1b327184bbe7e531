from __future__ import annotations

from ..common.repository import EntityRepository
from .model import Shift


class ShiftRepository(EntityRepository[Shift]):
    pass
