"""Tests for booking and reschedule date windows."""

from datetime import date, datetime, timedelta, timezone

from hsm_booking.scheduling.date_window import (
    format_display_date,
    get_booking_window,
    get_next_3_days,
    get_next_7_days,
    local_now,
    today_iso,
)
from tests.conftest import TEST_NOW, TEST_TZ


class TestNext3Days:
    def test_labels(self):
        days = get_next_3_days(TEST_NOW, TEST_TZ)
        assert [d.label for d in days] == ["Today", "Tomorrow", "Overmorrow"]

    def test_values_are_consecutive_dates(self):
        days = get_next_3_days(TEST_NOW, TEST_TZ)
        assert [d.value for d in days] == ["2026-03-10", "2026-03-11", "2026-03-12"]

    def test_values_strictly_increasing(self):
        values = [date.fromisoformat(d.value) for d in get_next_3_days(TEST_NOW, TEST_TZ)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_display_date(self):
        assert get_next_3_days(TEST_NOW, TEST_TZ)[0].display_date == "Tue, Mar 10"

    def test_crosses_month_end(self):
        now = datetime(2026, 2, 27, 10, 0, tzinfo=TEST_TZ)
        assert [d.value for d in get_next_3_days(now, TEST_TZ)] == [
            "2026-02-27", "2026-02-28", "2026-03-01",
        ]


class TestLocalCalendarDate:
    def test_just_after_local_midnight_ahead_of_utc(self):
        # 00:30 local is 19:30 the previous day in UTC
        now = datetime(2026, 3, 10, 0, 30, tzinfo=TEST_TZ)
        assert now.astimezone(timezone.utc).date() == date(2026, 3, 9)
        assert get_next_3_days(now, TEST_TZ)[0].value == "2026-03-10"

    def test_utc_now_converted_to_local(self):
        utc_now = datetime(2026, 3, 9, 20, 0, tzinfo=timezone.utc)
        assert today_iso(utc_now, TEST_TZ) == "2026-03-10"

    def test_naive_now_is_local_wall_clock(self):
        naive = datetime(2026, 3, 10, 23, 59)
        assert local_now(naive, TEST_TZ).tzinfo is TEST_TZ
        assert today_iso(naive, TEST_TZ) == "2026-03-10"

    def test_western_timezone(self):
        tz = timezone(timedelta(hours=-8))
        now = datetime(2026, 3, 11, 2, 0, tzinfo=timezone.utc)
        assert today_iso(now, tz) == "2026-03-10"


class TestNext7Days:
    def test_excludes_today(self):
        days = get_next_7_days(TEST_NOW, TEST_TZ)
        assert days[0].value == "2026-03-11"
        assert all(d.value != "2026-03-10" for d in days)

    def test_seven_entries(self):
        days = get_next_7_days(TEST_NOW, TEST_TZ)
        assert len(days) == 7
        assert days[-1].value == "2026-03-17"

    def test_label_is_display_date(self):
        day = get_next_7_days(TEST_NOW, TEST_TZ)[0]
        assert day.label == "Wed, Mar 11"
        assert day.label == day.display_date


class TestBookingWindow:
    def test_longer_window_uses_display_labels(self):
        days = get_booking_window(5, TEST_NOW, TEST_TZ)
        assert [d.label for d in days[:3]] == ["Today", "Tomorrow", "Overmorrow"]
        assert days[3].label == "Fri, Mar 13"

    def test_format_display_date(self):
        assert format_display_date(date(2026, 10, 19)) == "Mon, Oct 19"
