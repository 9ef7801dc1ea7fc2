"""Business profile model and its response adapter."""

from enum import Enum
from typing import Any, Optional

from hsm_booking.schemas.schedule_schema import BusinessDetails, CamelModel


class BusinessStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"


class Business(CamelModel):
    """Canonical business profile used everywhere past the API boundary."""
    id: int
    provider_id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    category_id: Optional[int] = None
    category: Optional[str] = None
    phone: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[str] = None
    cover_image: Optional[str] = None
    status: BusinessStatus = BusinessStatus.PENDING
    is_verified: bool = False
    rating: float = 0
    total_reviews: int = 0

    @property
    def display_image(self) -> Optional[str]:
        return self.cover_image or self.logo

    def to_details(self) -> BusinessDetails:
        """Pre-fill data for onboarding stage 1."""
        return BusinessDetails(
            name=self.name,
            description=self.description or "",
            category_id=self.category_id or 0,
            category=self.category or "",
            business_phone=self.phone or "",
            state=self.state or "",
            city=self.city or "",
            website=self.website or "",
        )


def normalize_business(payload: Any) -> Optional[Business]:
    """Map any of the backend's business response shapes onto ``Business``.

    Handles ``{"business": {...}}`` wrapping, ``businessName`` vs ``name``
    and ``userId`` vs ``providerId``. Returns None for empty payloads.
    """
    if not payload:
        return None
    raw = payload.get("business", payload) if isinstance(payload, dict) else None
    if not isinstance(raw, dict) or not raw:
        return None

    raw = dict(raw)
    name = raw.pop("businessName", None)
    if name and not raw.get("name"):
        raw["name"] = name
    if raw.get("providerId") is None and raw.get("userId") is not None:
        raw["providerId"] = raw["userId"]
    raw = {k: v for k, v in raw.items() if v is not None}
    return Business.model_validate(raw)
