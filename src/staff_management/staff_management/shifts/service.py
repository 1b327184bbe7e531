from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import now_local
from ..common.entity_service import EntityService
from ..core.result import Result
from .model import Shift, ShiftSummary
from .repository import ShiftRepository


class ShiftService(EntityService[Shift]):
    entity_name = "Shift"
    key_field = "shift_id"

    def __init__(self, shifts: ShiftRepository):
        super().__init__(shifts)

    def _validate(self, entity: Shift) -> Optional[Result]:
        if entity.start_datetime is None or entity.end_datetime is None:
            return Result.invalid("Start and end are required")
        if entity.end_datetime <= entity.start_datetime:
            return Result.invalid("Shift must end after it starts")
        return None

    def list_summaries(self) -> List[ShiftSummary]:
        return [s.summary() for s in self.get_all()]

    def get_current_shift(self, now: Optional[datetime] = None) -> Optional[Shift]:
        """First shift (store order) whose range contains ``now``."""

        now = now or now_local()
        return next((s for s in self._repo.list_all() if s.contains(now)), None)
