from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    email: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(user_id=user.user_id, email=user.email, role=user.role)


class AdminService:
    """Use case: manage administrator accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_admin_user(self, email: str, password: str) -> bool:
        """Create an admin account; False when the email is already taken."""

        email = require_non_empty(email, "Email")
        if "@" not in email:
            raise ValidationError("Email is not valid")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            return False

        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.ADMIN,
        )
        logger.info("Admin user %s created (id=%s)", email, user_id)
        return True

    def ensure_admin_user(self, email: str, password: str) -> None:
        """Seed the configured admin account when it does not exist yet.

        An existing account keeps its password; it is only promoted to admin.
        """

        existing = self._users.get_by_email(email)
        if existing is None:
            self.create_admin_user(email, password)
            return
        if existing.role != Role.ADMIN:
            self.add_to_role(existing.user_id, Role.ADMIN)

    def is_in_role(self, user_id: int, role: Role) -> bool:
        user = self._users.get_by_id(user_id)
        return bool(user and user.role == role)

    def add_to_role(self, user_id: int, role: Role) -> bool:
        if self._users.get_by_id(user_id) is None:
            return False
        changed = self._users.set_role(user_id, role)
        if changed:
            logger.info("User %s moved to role %s", user_id, role.value)
        return changed

    def users_in_role(self, role: Role) -> List[User]:
        return list(self._users.list_by_role(role))
