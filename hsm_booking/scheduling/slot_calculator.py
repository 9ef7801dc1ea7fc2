"""
Slot-count preview for provider onboarding.

The backend materialises the real slot rows when onboarding completes;
this module only tells the provider what to expect. Both sides are
expected to follow the same rule:

    effective = max(0, (end - start) - (break_end - break_start))
    total_slots = effective // interval

``tests/fixtures/slot_preview_cases.json`` holds the shared cases.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from hsm_booking.config import settings
from hsm_booking.schemas.schedule_schema import BreakTime, WorkingHours
from hsm_booking.scheduling.working_hours import (
    break_minutes,
    minutes_to_duration,
    minutes_to_time,
    working_minutes,
)

logger = logging.getLogger(__name__)

ALLOWED_INTERVALS: tuple[int, ...] = (15, 30, 60)


@dataclass(frozen=True)
class SlotPreview:
    """What a working day yields at a given interval."""

    interval: int
    total_minutes: int
    break_minutes: int
    effective_minutes: int
    total_slots: int

    @property
    def total_working_time(self) -> str:
        return minutes_to_duration(self.effective_minutes)


def _check_interval(interval: int) -> None:
    if interval not in ALLOWED_INTERVALS:
        raise ValueError(
            f"Slot interval must be one of {list(ALLOWED_INTERVALS)}, got {interval}"
        )


def calculate_slots(
    working_hours: WorkingHours,
    break_time: Optional[BreakTime] = None,
    interval: int = settings.onboarding.default_slot_interval,
) -> SlotPreview:
    """
    Count the slots a working day yields.

    The break is subtracted as a duration without checking that it lies
    inside the working day; run ``validate_schedule`` first for that.
    The result is clamped so it is never negative.
    """
    _check_interval(interval)
    start, end = working_minutes(working_hours)
    total = end - start

    brk = break_minutes(break_time)
    brk_total = brk[1] - brk[0] if brk else 0

    effective = max(0, total - brk_total)
    preview = SlotPreview(
        interval=interval,
        total_minutes=total,
        break_minutes=brk_total,
        effective_minutes=effective,
        total_slots=effective // interval,
    )
    logger.debug(
        "Slot preview: %d effective minutes / %d = %d slots",
        effective, interval, preview.total_slots,
    )
    return preview


def generate_preview_times(
    working_hours: WorkingHours,
    break_time: Optional[BreakTime] = None,
    interval: int = settings.onboarding.default_slot_interval,
    limit: Optional[int] = settings.onboarding.preview_slot_limit,
) -> list[str]:
    """List slot start times ("HH:mm") from opening to close, skipping the break.

    A start time falls in the break when ``break_start <= t < break_end``.
    ``limit=None`` returns every start time.
    """
    _check_interval(interval)
    start, end = working_minutes(working_hours)
    brk = break_minutes(break_time)

    times: list[str] = []
    current = start
    while current < end:
        if not (brk and brk[0] <= current < brk[1]):
            times.append(minutes_to_time(current))
            if limit is not None and len(times) >= limit:
                break
        current += interval
    return times
