from hsm_booking.api.bookings import (
    cancel_booking,
    create_booking,
    get_booking,
    get_customer_bookings,
    reschedule_booking,
)
from hsm_booking.api.business import complete_onboarding, create_business, get_provider_business
from hsm_booking.api.client import ApiClient, ApiError
from hsm_booking.api.customer import get_addresses, get_service
from hsm_booking.api.slots import generate_slots, get_available_slots, get_business_slots

__all__ = [
    "ApiClient",
    "ApiError",
    "cancel_booking",
    "complete_onboarding",
    "create_booking",
    "create_business",
    "generate_slots",
    "get_addresses",
    "get_available_slots",
    "get_booking",
    "get_business_slots",
    "get_customer_bookings",
    "get_provider_business",
    "get_service",
    "reschedule_booking",
]
