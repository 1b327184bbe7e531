from __future__ import annotations

from ..common.repository import EntityRepository
from .model import Member


class MemberRepository(EntityRepository[Member]):
    pass
