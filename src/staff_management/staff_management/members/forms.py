from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import integer, optional_text, text
from .model import Member


def member_from_mapping(data: Mapping[str, Any], *, member_id: int = 0) -> Member:
    return Member(
        member_id=integer(data, "member_id", default=member_id),
        first_name=text(data, "first_name"),
        last_name=text(data, "last_name"),
        email=text(data, "email"),
        phone_number=text(data, "phone_number"),
        image_path=optional_text(data, "image_path"),
        version=integer(data, "version"),
    )
