"""Slot listing and generation calls."""

import logging
from typing import Optional

from hsm_booking.api import endpoints
from hsm_booking.api.client import ApiClient
from hsm_booking.schemas.schedule_schema import BreakTime, WorkingHours
from hsm_booking.schemas.slot_schema import Slot, normalize_slots

logger = logging.getLogger(__name__)


def get_available_slots(
    client: ApiClient, business_id: int, date: Optional[str] = None
) -> list[Slot]:
    """Public recurring slot list for a business (``GET /slots/public/{id}``)."""
    payload = client.get(endpoints.slots_public(business_id), params={"date": date})
    slots = normalize_slots(payload)
    logger.info("Loaded %d slot(s) for business %d", len(slots), business_id)
    return slots


def get_business_slots(client: ApiClient, business_id: int) -> list[Slot]:
    """Provider view of the slot templates (``GET /slots/{id}``)."""
    return normalize_slots(client.get(endpoints.slots(business_id)))


def generate_slots(
    client: ApiClient,
    business_id: int,
    working_hours: WorkingHours,
    break_time: Optional[BreakTime],
    slot_interval: int,
) -> None:
    """Ask the backend to materialise slots from the working day."""
    body = {"workingHours": working_hours.to_wire(), "slotInterval": slot_interval}
    if break_time is not None:
        body["breakTime"] = break_time.to_wire()
    client.post(endpoints.generate_slots(business_id), body)
    logger.info(
        "Requested slot generation for business %d at %d-minute interval",
        business_id, slot_interval,
    )
