from __future__ import annotations

import dataclasses

import pytest

from src.staff_management.staff_management.core.enums import Outcome
from src.staff_management.staff_management.members.forms import member_from_mapping
from src.staff_management.staff_management.members.service import MemberService


def test_create_and_fetch_member(store, samples):
    svc = MemberService(store.members)
    member = samples.member("Alice")

    created = svc.create(member).unwrap()

    assert svc.get_by_id(created.member_id).unwrap() == dataclasses.replace(member, member_id=created.member_id)
    assert created.full_name == "Alice Nguyen"


@pytest.mark.parametrize(
    "changes",
    [{"first_name": ""}, {"last_name": " "}, {"email": "not-an-email"}],
)
def test_invalid_members_are_rejected(store, samples, changes):
    svc = MemberService(store.members)

    result = svc.create(dataclasses.replace(samples.member(), **changes))

    assert result.outcome == Outcome.INVALID_ARGUMENT


def test_phone_number_is_kept_as_text():
    member = member_from_mapping(
        {"first_name": "Alice", "last_name": "Nguyen", "email": "a@example.com", "phone_number": "+1 (555) 0101"}
    )

    assert member.phone_number == "+1 (555) 0101"


def test_update_mismatch_and_delete(store, samples):
    svc = MemberService(store.members)
    created = svc.create(samples.member()).unwrap()

    assert svc.update(created.member_id + 10, created).outcome == Outcome.INVALID_ARGUMENT
    assert svc.delete(created.member_id)
    assert svc.get_by_id(created.member_id).outcome == Outcome.NOT_FOUND
