from __future__ import annotations

from ..database.mysql_base import MySQLEntityRepository
from .model import Member
from .repository import MemberRepository


class MySQLMemberRepository(MySQLEntityRepository[Member], MemberRepository):
    table = "members"
    key_column = "member_id"
    columns = ("first_name", "last_name", "email", "phone_number", "image_path")

    def _to_model(self, r) -> Member:
        return Member(
            member_id=int(r["member_id"]),
            first_name=r["first_name"],
            last_name=r["last_name"],
            email=r["email"] or "",
            phone_number=r["phone_number"] or "",
            image_path=r.get("image_path"),
            version=int(r["row_version"]),
        )

    def _to_params(self, m: Member) -> tuple:
        return (m.first_name, m.last_name, m.email, m.phone_number, m.image_path)
