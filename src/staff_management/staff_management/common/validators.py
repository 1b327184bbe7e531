from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_local_datetime


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


# Payload readers shared by page forms (strings) and JSON bodies (typed values).


def text(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    return str(value).strip()


def optional_text(data: Mapping[str, Any], key: str) -> Optional[str]:
    return text(data, key) or None


def integer(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key)
    if value is None or value == "":
        return default
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be an integer")


def optional_integer(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None or value == "":
        return None
    return integer(data, key)


def decimal(data: Mapping[str, Any], key: str, default: str = "0") -> Decimal:
    value = data.get(key)
    if value is None or value == "":
        value = default
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{key} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{key} must be a number")
    return number


def optional_datetime(data: Mapping[str, Any], key: str) -> Optional[datetime]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return parse_local_datetime(str(value))
    except ValueError:
        raise ValidationError(f"{key} must be a date/time (YYYY-MM-DDTHH:MM)")


def required_datetime(data: Mapping[str, Any], key: str) -> datetime:
    value = optional_datetime(data, key)
    if value is None:
        raise ValidationError(f"{key} is required")
    return value
