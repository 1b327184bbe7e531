from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login account. Staff records (Employee) are separate from accounts."""

    user_id: int
    email: str
    password_hash: str
    role: Role
    is_active: bool = True
