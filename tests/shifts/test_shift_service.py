from __future__ import annotations

from datetime import datetime

from src.staff_management.staff_management.core.enums import Outcome
from src.staff_management.staff_management.shifts.service import ShiftService


def test_shift_must_end_after_it_starts(store, samples):
    svc = ShiftService(store.shifts)

    same = svc.create(samples.shift(start=datetime(2026, 3, 2, 8), end=datetime(2026, 3, 2, 8)))
    backwards = svc.create(samples.shift(start=datetime(2026, 3, 2, 9), end=datetime(2026, 3, 2, 8)))

    assert same.outcome == Outcome.INVALID_ARGUMENT
    assert backwards.outcome == Outcome.INVALID_ARGUMENT


def test_current_shift_is_first_containing_shift(store, samples):
    svc = ShiftService(store.shifts)
    morning = svc.create(samples.shift(start=datetime(2026, 3, 2, 8), end=datetime(2026, 3, 2, 16))).unwrap()
    svc.create(samples.shift(start=datetime(2026, 3, 2, 12), end=datetime(2026, 3, 2, 20)))

    assert svc.get_current_shift(datetime(2026, 3, 2, 13)).shift_id == morning.shift_id
    assert svc.get_current_shift(datetime(2026, 3, 2, 16)).shift_id == morning.shift_id
    assert svc.get_current_shift(datetime(2026, 3, 2, 21)) is None


def test_summary_label(store, samples):
    svc = ShiftService(store.shifts)
    svc.create(samples.shift(start=datetime(2026, 3, 2, 8), end=datetime(2026, 3, 2, 16)))

    (summary,) = svc.list_summaries()

    assert summary.label == "2026-03-02 08:00 - 16:00"
