"""
Same-day slot filtering.

The backend returns a business's recurring daily slots, not slots for a
specific calendar date. For any future date every slot is offered. For
today, slots that have started or start within the buffer are removed so
a provider has time to travel and prepare.
"""

import logging
from datetime import datetime, tzinfo
from typing import Optional

from hsm_booking.config import settings
from hsm_booking.schemas.slot_schema import Slot
from hsm_booking.scheduling.date_window import local_now, to_iso
from hsm_booking.scheduling.working_hours import time_to_minutes

logger = logging.getLogger(__name__)

NO_SLOTS_MESSAGE = "No slots available for this date"


def filter_slots_for_date(
    slots: list[Slot],
    date: str,
    now: Optional[datetime] = None,
    buffer_minutes: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> list[Slot]:
    """
    Slots a customer may pick on ``date`` ("YYYY-MM-DD").

    For any date other than today the input list is returned as is.
    For today a slot is kept only when its start is strictly later than
    now + buffer, so a slot starting exactly at the buffer edge is dropped.
    """
    current = local_now(now, tz)
    if date != to_iso(current.date()):
        return slots

    if buffer_minutes is None:
        buffer_minutes = settings.booking.today_buffer_minutes
    cutoff = current.hour * 60 + current.minute + buffer_minutes

    kept = [slot for slot in slots if time_to_minutes(slot.start_time) > cutoff]
    logger.debug(
        "Filtered today's slots: %d of %d start after minute %d",
        len(kept), len(slots), cutoff,
    )
    return kept


def describe_empty(date: str, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> str:
    """Message for the explicit "no slots" state."""
    if date == to_iso(local_now(now, tz).date()):
        return f"{NO_SLOTS_MESSAGE}. Try tomorrow or another day."
    return f"{NO_SLOTS_MESSAGE}."
