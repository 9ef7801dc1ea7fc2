"""Working hours, break time and onboarding data models."""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def clock_minutes(value: object) -> Optional[int]:
    """Minutes since midnight for "HH:mm" or "HH:mm:ss", or None when ``value`` is not a clock time."""
    match = TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class WorkingHours(CamelModel):
    """Daily opening window, applies to every day. Times are "HH:mm"."""
    start_time: str
    end_time: str


class BreakTime(CamelModel):
    """Optional daily break inside the working hours. Times are "HH:mm"."""
    start_time: str
    end_time: str


class BusinessDetails(CamelModel):
    """Stage 1 of provider onboarding."""
    name: str = ""
    description: str = ""
    category_id: int = 0
    category: str = ""
    business_phone: str = ""
    state: str = ""
    city: str = ""
    website: str = ""

    def to_create_payload(self) -> dict[str, Any]:
        """Body for ``POST /businesses``; the backend calls the phone field ``phone``."""
        return {
            "name": self.name,
            "description": self.description,
            "categoryId": self.category_id,
            "phone": self.business_phone or None,
            "state": self.state,
            "city": self.city,
            "website": self.website or None,
        }


class OnboardingData(CamelModel):
    """Everything collected by the onboarding wizard, submitted in one call."""
    business_details: BusinessDetails = Field(default_factory=BusinessDetails)
    working_hours: Optional[WorkingHours] = None
    break_time: Optional[BreakTime] = None
    slot_interval: int = 30
