"""Tests for the onboarding slot-count preview."""

import json
from pathlib import Path

import pytest

from hsm_booking.schemas.schedule_schema import BreakTime, WorkingHours
from hsm_booking.scheduling.slot_calculator import (
    ALLOWED_INTERVALS,
    calculate_slots,
    generate_preview_times,
)

CASES_PATH = Path(__file__).parent / "fixtures" / "slot_preview_cases.json"


def _load_cases() -> list[dict]:
    return json.loads(CASES_PATH.read_text(encoding="utf-8"))


class TestCalculateSlots:
    def test_full_day_no_break(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        preview = calculate_slots(hours, None, 30)
        assert preview.total_slots == 18
        assert preview.break_minutes == 0

    def test_full_day_with_lunch_break(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        preview = calculate_slots(hours, BreakTime(start_time="13:00", end_time="14:00"), 30)
        assert preview.effective_minutes == 480
        assert preview.total_slots == 16
        assert preview.total_working_time == "8h 0m"

    def test_partial_slot_is_floored(self):
        hours = WorkingHours(start_time="09:00", end_time="10:45")
        assert calculate_slots(hours, None, 30).total_slots == 3

    def test_never_negative(self):
        hours = WorkingHours(start_time="09:00", end_time="10:00")
        preview = calculate_slots(hours, BreakTime(start_time="08:00", end_time="12:00"), 15)
        assert preview.effective_minutes == 0
        assert preview.total_slots == 0

    @pytest.mark.parametrize("interval", [0, 10, 45, 90])
    def test_rejects_unsupported_interval(self, interval):
        with pytest.raises(ValueError, match="Slot interval"):
            calculate_slots(WorkingHours(start_time="09:00", end_time="18:00"), None, interval)

    def test_allowed_intervals(self):
        assert ALLOWED_INTERVALS == (15, 30, 60)


class TestSharedFixtureCases:
    """Cases the backend's slot generation is expected to agree with."""

    @pytest.mark.parametrize("case", _load_cases(), ids=lambda c: f"{c['start']}-{c['end']}/{c['interval']}")
    def test_case(self, case):
        hours = WorkingHours(start_time=case["start"], end_time=case["end"])
        brk = BreakTime(start_time=case["break"][0], end_time=case["break"][1]) if case["break"] else None
        preview = calculate_slots(hours, brk, case["interval"])
        assert preview.effective_minutes == case["effective_minutes"]
        assert preview.total_slots == case["total_slots"]


class TestPreviewTimes:
    def test_skips_break(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        times = generate_preview_times(hours, BreakTime(start_time="13:00", end_time="14:00"), 60, limit=None)
        assert times == ["09:00", "10:00", "11:00", "12:00", "14:00", "15:00", "16:00", "17:00"]

    def test_break_end_is_bookable(self):
        hours = WorkingHours(start_time="12:00", end_time="15:00")
        times = generate_preview_times(hours, BreakTime(start_time="13:00", end_time="13:30"), 30, limit=None)
        assert "13:00" not in times
        assert "13:30" in times

    def test_limit(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        assert len(generate_preview_times(hours, None, 15, limit=8)) == 8

    def test_last_start_before_close(self):
        hours = WorkingHours(start_time="16:00", end_time="17:00")
        assert generate_preview_times(hours, None, 30, limit=None) == ["16:00", "16:30"]
