from __future__ import annotations

import pytest

from memory_store import MemoryUserRepository
from src.staff_management.staff_management.core.enums import Role
from src.staff_management.staff_management.core.exceptions import AuthenticationError, ValidationError
from src.staff_management.staff_management.users.service import AdminService, AuthService


def test_ensure_admin_user_is_idempotent():
    users = MemoryUserRepository()
    admins = AdminService(users)

    admins.ensure_admin_user("admin@staffmanagement.com", "Admin@123456")
    admins.ensure_admin_user("admin@staffmanagement.com", "another-password")

    (admin,) = admins.users_in_role(Role.ADMIN)
    assert admin.email == "admin@staffmanagement.com"
    assert AuthService(users).authenticate("admin@staffmanagement.com", "Admin@123456").role == Role.ADMIN


def test_ensure_admin_user_promotes_existing_account():
    users = MemoryUserRepository()
    user_id = users.create_user(email="boss@example.com", password_hash="x", role=Role.USER)

    AdminService(users).ensure_admin_user("boss@example.com", "whatever1")

    assert users.get_by_id(user_id).role == Role.ADMIN


def test_create_admin_user_rejects_taken_email_and_weak_password():
    admins = AdminService(MemoryUserRepository())

    assert admins.create_admin_user("a@example.com", "long-enough") is True
    assert admins.create_admin_user("a@example.com", "long-enough") is False
    with pytest.raises(ValidationError):
        admins.create_admin_user("b@example.com", "short")
    with pytest.raises(ValidationError):
        admins.create_admin_user("not-an-email", "long-enough")


@pytest.mark.parametrize("email, password", [("a@example.com", "wrong-password"), ("nobody@example.com", "long-enough")])
def test_authenticate_rejects_bad_credentials(email, password):
    users = MemoryUserRepository()
    AdminService(users).create_admin_user("a@example.com", "long-enough")

    with pytest.raises(AuthenticationError):
        AuthService(users).authenticate(email, password)


def test_is_in_role_and_add_to_role():
    users = MemoryUserRepository()
    admins = AdminService(users)
    user_id = users.create_user(email="u@example.com", password_hash="x", role=Role.USER)

    assert not admins.is_in_role(user_id, Role.ADMIN)
    assert admins.add_to_role(user_id, Role.ADMIN)
    assert admins.is_in_role(user_id, Role.ADMIN)
    assert not admins.add_to_role(999, Role.ADMIN)
