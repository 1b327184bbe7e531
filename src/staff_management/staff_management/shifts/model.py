from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Shift:
    """Domain entity: a working shift (local start/end datetimes)."""

    shift_id: int
    start_datetime: datetime
    end_datetime: datetime
    version: int = field(default=0, compare=False)

    def contains(self, moment: datetime) -> bool:
        return self.start_datetime <= moment <= self.end_datetime

    def summary(self) -> "ShiftSummary":
        return ShiftSummary(
            shift_id=self.shift_id,
            start_datetime=self.start_datetime,
            end_datetime=self.end_datetime,
        )


@dataclass(frozen=True)
class ShiftSummary:
    shift_id: int
    start_datetime: datetime
    end_datetime: datetime

    @property
    def label(self) -> str:
        return f"{self.start_datetime:%Y-%m-%d %H:%M} - {self.end_datetime:%H:%M}"
