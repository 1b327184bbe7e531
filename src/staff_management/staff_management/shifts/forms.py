from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import integer, required_datetime
from .model import Shift


def shift_from_mapping(data: Mapping[str, Any], *, shift_id: int = 0) -> Shift:
    return Shift(
        shift_id=integer(data, "shift_id", default=shift_id),
        start_datetime=required_datetime(data, "start_datetime"),
        end_datetime=required_datetime(data, "end_datetime"),
        version=integer(data, "version"),
    )
