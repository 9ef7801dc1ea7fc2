"""Tests for working-hours arithmetic and schedule validation."""

import pytest

from hsm_booking.schemas.schedule_schema import BreakTime, WorkingHours
from hsm_booking.scheduling.working_hours import (
    ScheduleErrorCode,
    ScheduleValidationError,
    ensure_valid_schedule,
    format_slot_time,
    format_time_12h,
    minutes_to_duration,
    minutes_to_time,
    time_to_minutes,
    validate_schedule,
)


class TestTimeToMinutes:
    def test_nine_am(self):
        assert time_to_minutes("09:00") == 540

    def test_six_pm(self):
        assert time_to_minutes("18:00") == 1080

    def test_accepts_seconds(self):
        assert time_to_minutes("13:30:00") == 810

    def test_single_digit_hour(self):
        assert time_to_minutes("9:05") == 545

    def test_midnight(self):
        assert time_to_minutes("00:00") == 0

    @pytest.mark.parametrize("value", ["9am", "", "12-30", "24:00", "10:60", "ab:cd"])
    def test_malformed_raises_typed_error(self, value):
        with pytest.raises(ScheduleValidationError) as exc_info:
            time_to_minutes(value)
        assert exc_info.value.code == ScheduleErrorCode.MALFORMED_TIME

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            time_to_minutes("noon")


class TestFormatting:
    def test_duration_whole_hours(self):
        assert minutes_to_duration(480) == "8h 0m"

    def test_duration_with_minutes(self):
        assert minutes_to_duration(135) == "2h 15m"

    def test_minutes_to_time(self):
        assert minutes_to_time(545) == "09:05"

    def test_12h_afternoon(self):
        assert format_time_12h("13:05:00") == "1:05 PM"

    def test_12h_midnight(self):
        assert format_time_12h("00:30") == "12:30 AM"

    def test_12h_noon(self):
        assert format_time_12h("12:00") == "12:00 PM"

    def test_slot_time_trimmed(self):
        assert format_slot_time("09:30:00") == "09:30"


class TestValidateSchedule:
    def test_valid_without_break(self):
        assert validate_schedule(WorkingHours(start_time="09:00", end_time="18:00")) is None

    def test_valid_with_break(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        assert validate_schedule(hours, BreakTime(start_time="13:00", end_time="14:00")) is None

    def test_start_after_end(self):
        error = validate_schedule(WorkingHours(start_time="18:00", end_time="09:00"))
        assert error.code == ScheduleErrorCode.START_NOT_BEFORE_END

    def test_start_equals_end(self):
        error = validate_schedule(WorkingHours(start_time="09:00", end_time="09:00"))
        assert error.code == ScheduleErrorCode.START_NOT_BEFORE_END

    def test_inverted_break(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        error = validate_schedule(hours, BreakTime(start_time="14:00", end_time="13:00"))
        assert error.code == ScheduleErrorCode.BREAK_INVERTED

    def test_break_before_opening(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        error = validate_schedule(hours, BreakTime(start_time="08:00", end_time="09:30"))
        assert error.code == ScheduleErrorCode.BREAK_OUTSIDE_HOURS

    def test_break_after_closing(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        error = validate_schedule(hours, BreakTime(start_time="17:30", end_time="18:30"))
        assert error.code == ScheduleErrorCode.BREAK_OUTSIDE_HOURS

    def test_break_covering_day(self):
        hours = WorkingHours(start_time="09:00", end_time="18:00")
        error = validate_schedule(hours, BreakTime(start_time="09:00", end_time="18:00"))
        assert error.code == ScheduleErrorCode.BREAK_COVERS_DAY

    def test_malformed_time_returned_not_raised(self):
        error = validate_schedule(WorkingHours(start_time="nine", end_time="18:00"))
        assert error.code == ScheduleErrorCode.MALFORMED_TIME

    def test_ensure_raises(self):
        with pytest.raises(ScheduleValidationError, match="start before"):
            ensure_valid_schedule(WorkingHours(start_time="18:00", end_time="09:00"))
