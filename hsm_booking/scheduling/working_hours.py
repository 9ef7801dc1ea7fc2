"""
Working-hours arithmetic at minute granularity.

Times are 24-hour "HH:mm" strings, optionally with seconds ("HH:mm:ss")
as the backend stores slot start times. Everything converts to minutes
since midnight before comparison.
"""

import logging
from enum import Enum
from typing import Optional

from hsm_booking.schemas.schedule_schema import BreakTime, WorkingHours, clock_minutes

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


class ScheduleErrorCode(str, Enum):
    MALFORMED_TIME = "malformed_time"
    START_NOT_BEFORE_END = "start_not_before_end"
    BREAK_INVERTED = "break_inverted"
    BREAK_OUTSIDE_HOURS = "break_outside_hours"
    BREAK_COVERS_DAY = "break_covers_day"


class ScheduleValidationError(ValueError):
    """Raised (or returned) when a time or schedule is unusable."""

    def __init__(self, code: ScheduleErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code


def time_to_minutes(value: str) -> int:
    """Convert "HH:mm" or "HH:mm:ss" to minutes since midnight.

    Seconds are dropped. Examples:
        >>> time_to_minutes("09:00")
        540
        >>> time_to_minutes("13:30:00")
        810
    """
    minutes = clock_minutes(value)
    if minutes is None:
        raise ScheduleValidationError(
            ScheduleErrorCode.MALFORMED_TIME, f"Invalid time {value!r}, expected HH:mm"
        )
    return minutes


def minutes_to_time(minutes: int) -> str:
    """Inverse of ``time_to_minutes``: 540 -> "09:00"."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_to_duration(minutes: int) -> str:
    """Render a minute count as "Xh Ym", e.g. 480 -> "8h 0m"."""
    return f"{minutes // 60}h {minutes % 60}m"


def format_time_12h(value: str) -> str:
    """12-hour clock display: "13:05:00" -> "1:05 PM", "00:30" -> "12:30 AM"."""
    total = time_to_minutes(value)
    hours, minutes = divmod(total, 60)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def format_slot_time(value: str) -> str:
    """Trim a backend slot time "HH:mm:ss" to "HH:mm"."""
    return value[:5]


def working_minutes(working_hours: WorkingHours) -> tuple[int, int]:
    return time_to_minutes(working_hours.start_time), time_to_minutes(working_hours.end_time)


def break_minutes(break_time: Optional[BreakTime]) -> Optional[tuple[int, int]]:
    if break_time is None:
        return None
    return time_to_minutes(break_time.start_time), time_to_minutes(break_time.end_time)


def validate_schedule(
    working_hours: WorkingHours, break_time: Optional[BreakTime] = None
) -> Optional[ScheduleValidationError]:
    """Check the working day and break, returning the first problem found.

    A valid schedule has start < end and, when present, a break that is a
    proper sub-interval of the working day. Returns None when valid.
    """
    try:
        start, end = working_minutes(working_hours)
        brk = break_minutes(break_time)
    except ScheduleValidationError as exc:
        return exc

    if start >= end:
        return ScheduleValidationError(
            ScheduleErrorCode.START_NOT_BEFORE_END,
            f"Working hours must start before they end "
            f"({working_hours.start_time} - {working_hours.end_time})",
        )
    if brk is None:
        return None

    break_start, break_end = brk
    if break_start >= break_end:
        return ScheduleValidationError(
            ScheduleErrorCode.BREAK_INVERTED, "Break must start before it ends"
        )
    if break_start < start or break_end > end:
        return ScheduleValidationError(
            ScheduleErrorCode.BREAK_OUTSIDE_HOURS, "Break must fall within working hours"
        )
    if break_end - break_start >= end - start:
        return ScheduleValidationError(
            ScheduleErrorCode.BREAK_COVERS_DAY, "Break cannot cover the whole working day"
        )
    return None


def ensure_valid_schedule(
    working_hours: WorkingHours, break_time: Optional[BreakTime] = None
) -> None:
    """Raise ``ScheduleValidationError`` if ``validate_schedule`` finds a problem."""
    error = validate_schedule(working_hours, break_time)
    if error is not None:
        logger.debug("Schedule rejected: %s (%s)", error, error.code.value)
        raise error
