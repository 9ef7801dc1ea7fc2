"""Business profile calls and onboarding submission."""

from typing import Optional

from hsm_booking.api import endpoints
from hsm_booking.api.client import ApiClient, ApiError, parse_response
from hsm_booking.api.slots import generate_slots
from hsm_booking.logging_context import get_session_logger
from hsm_booking.schemas.business_schema import Business, normalize_business
from hsm_booking.schemas.schedule_schema import BusinessDetails, OnboardingData

logger = get_session_logger(__name__)


def get_provider_business(client: ApiClient, user_id: int) -> Optional[Business]:
    """The provider's business, or None if they have not created one yet."""
    endpoint = endpoints.business_by_provider(user_id)
    try:
        payload = client.get(endpoint)
    except ApiError as exc:
        if exc.status_code == 404:
            return None
        raise
    return parse_response(normalize_business, payload, endpoint)


def create_business(client: ApiClient, details: BusinessDetails) -> Business:
    payload = client.post(endpoints.BUSINESSES, details.to_create_payload())
    business = parse_response(normalize_business, payload, endpoints.BUSINESSES)
    if business is None:
        raise ApiError("Business was not returned by the server")
    logger.info("Business %d created: %s", business.id, business.name)
    return business


def complete_onboarding(client: ApiClient, data: OnboardingData) -> Business:
    """
    Submit the whole onboarding in one go.

    Creates the business, then asks the backend to generate its slots.
    A failed slot generation is logged and tolerated because the business
    already exists and slots can be regenerated from provider settings.
    Business creation errors propagate.
    """
    if data.working_hours is None:
        raise ValueError("Working hours are required to complete onboarding")

    business = create_business(client, data.business_details)
    try:
        generate_slots(
            client, business.id, data.working_hours, data.break_time, data.slot_interval
        )
    except ApiError as exc:
        logger.warning("Slot generation failed for business %d: %s", business.id, exc)
    return business
