from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Member:
    member_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    image_path: Optional[str] = None
    version: int = field(default=0, compare=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
