"""Customer-side data models: addresses and services."""

from typing import Any, Optional

from pydantic import AliasChoices, Field

from hsm_booking.schemas.schedule_schema import CamelModel

DEFAULT_ESTIMATE_DURATION = 30


class Address(CamelModel):
    """Saved customer address."""
    id: int
    user_id: Optional[int] = None
    address_type: str = "home"
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    is_default: bool = False

    def one_line(self) -> str:
        parts = [self.street, self.city, self.state, self.zip_code]
        return ", ".join(p for p in parts if p)


class ProviderSummary(CamelModel):
    """Business summary embedded in service details."""
    id: int = 0
    business_name: str = "Unknown Provider"
    phone: str = "N/A"
    state: str = "N/A"
    city: str = "N/A"
    rating: float = 0
    total_reviews: int = 0
    is_verified: bool = False
    logo: Optional[str] = None


class Service(CamelModel):
    """A bookable service offered by a business."""
    id: int
    business_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("businessId", "businessProfileId", "business_id"),
    )
    name: str
    description: Optional[str] = None
    price: float = 0
    estimate_duration: int = DEFAULT_ESTIMATE_DURATION
    image: Optional[str] = None
    is_active: bool = True
    provider: Optional[ProviderSummary] = None


def normalize_service(payload: Any) -> Service:
    """Map a service details response onto one canonical ``Service``.

    Older backends send ``EstimateDuration`` and omit the provider block.
    Payloads that are not objects fail validation like any other bad shape.
    """
    source = payload.get("service", payload) if isinstance(payload, dict) else payload
    if not isinstance(source, dict):
        return Service.model_validate(source)
    raw = dict(source)
    duration = raw.pop("EstimateDuration", None)
    if not raw.get("estimateDuration"):
        raw["estimateDuration"] = duration or DEFAULT_ESTIMATE_DURATION

    provider = raw.get("provider")
    if not isinstance(provider, dict):
        raw["provider"] = {
            "id": raw.get("businessProfileId") or raw.get("businessId") or 0,
            "businessName": "Provider Business",
        }
    else:
        provider = {k: v for k, v in provider.items() if v is not None}
        provider.setdefault("id", raw.get("businessProfileId") or 0)
        raw["provider"] = provider
    return Service.model_validate(raw)
