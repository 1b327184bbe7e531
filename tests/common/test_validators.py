from __future__ import annotations

from decimal import Decimal

import pytest

from src.staff_management.staff_management.common.validators import decimal, integer
from src.staff_management.staff_management.core.exceptions import ValidationError


@pytest.mark.parametrize("raw", ["NaN", "sNaN", "Infinity", "-Infinity", float("nan"), float("inf")])
def test_decimal_rejects_non_finite_values(raw):
    with pytest.raises(ValidationError):
        decimal({"hourly_rate": raw}, "hourly_rate")


def test_decimal_keeps_precision():
    assert decimal({"hourly_rate": "22.50"}, "hourly_rate") == Decimal("22.50")
    assert decimal({}, "hourly_rate") == Decimal("0")


@pytest.mark.parametrize("raw", [1.9, 0.5, True, "abc", float("inf")])
def test_integer_rejects_lossy_values(raw):
    with pytest.raises(ValidationError):
        integer({"member_id": raw}, "member_id")


def test_integer_accepts_whole_numbers():
    assert integer({"member_id": "7"}, "member_id") == 7
    assert integer({"member_id": 3.0}, "member_id") == 3
    assert integer({}, "member_id", default=5) == 5
