from __future__ import annotations

from typing import Optional

from ..common.entity_service import EntityService
from ..core.result import Result
from .model import Member
from .repository import MemberRepository


class MemberService(EntityService[Member]):
    entity_name = "Member"
    key_field = "member_id"

    def __init__(self, members: MemberRepository):
        super().__init__(members)

    def _validate(self, entity: Member) -> Optional[Result]:
        if not entity.first_name.strip() or not entity.last_name.strip():
            return Result.invalid("First and last name are required")
        if "@" not in entity.email:
            return Result.invalid("A valid email is required")
        return None
