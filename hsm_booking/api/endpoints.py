"""Backend routes, relative to the API base URL (no /api prefix)."""

BUSINESSES = "/businesses"
ADDRESSES = "/address"
ADD_BOOKING = "/add-booking"
CUSTOMER_BOOKINGS = "/bookings/customer"


def business_by_provider(user_id: int) -> str:
    return f"/business/provider/{user_id}"


def service_by_id(service_id: int) -> str:
    return f"/services/{service_id}"


def slots_public(business_id: int) -> str:
    return f"/slots/public/{business_id}"


def slots(business_id: int) -> str:
    return f"/slots/{business_id}"


def generate_slots(business_id: int) -> str:
    return f"/slots/{business_id}/generate"


def booking_by_id(booking_id: int) -> str:
    return f"/booking/{booking_id}"


def cancel_booking(booking_id: int) -> str:
    return f"/booking/{booking_id}/cancel"


def reschedule_booking(booking_id: int) -> str:
    return f"/booking/{booking_id}/reschedule"
