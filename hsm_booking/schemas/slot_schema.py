"""Slot data models and the response adapter for slot listings."""

import logging
from typing import Any, Optional

from pydantic import AliasChoices, ConfigDict, Field, ValidationError, field_validator

from hsm_booking.schemas.schedule_schema import CamelModel, clock_minutes

logger = logging.getLogger(__name__)


class Slot(CamelModel):
    """Recurring daily slot owned by the backend. Read-only on the client."""

    model_config = ConfigDict(frozen=True)

    id: int
    start_time: str
    end_time: Optional[str] = None
    business_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("businessId", "businessProfileId", "business_id"),
    )

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_clock_time(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and clock_minutes(value) is None:
            raise ValueError(f"Invalid slot time {value!r}, expected HH:mm or HH:mm:ss")
        return value


def normalize_slots(payload: Any) -> list[Slot]:
    """Turn a slot listing response into a list of ``Slot``.

    The backend answers either ``{"slots": [...]}`` or a bare list.
    Anything else is treated as no slots. Rows that do not parse are
    skipped so one bad row cannot hide the rest of the day.
    """
    if isinstance(payload, dict) and isinstance(payload.get("slots"), list):
        raw = payload["slots"]
    elif isinstance(payload, list):
        raw = payload
    else:
        logger.warning("Unexpected slots response format: %r", payload)
        return []

    slots = []
    for item in raw:
        try:
            slots.append(Slot.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping malformed slot %r: %s", item, exc.errors()[0]["msg"])
    return slots
