from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    USER = "user"


class LoanStatus(str, Enum):
    """Borrow record state: open while return_date is empty."""

    OPEN = "OPEN"
    RETURNED = "RETURNED"


class Outcome(str, Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
