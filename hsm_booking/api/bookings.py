"""Booking creation, cancellation and rescheduling calls."""

import logging
from typing import Any, Optional

from hsm_booking.api import endpoints
from hsm_booking.api.client import ApiClient, parse_response
from hsm_booking.schemas.booking_schema import (
    BookingList,
    BookingRequest,
    BookingResponse,
    CustomerBooking,
    RescheduleRequest,
)

logger = logging.getLogger(__name__)


def _booking_response(payload: Any) -> BookingResponse:
    return BookingResponse.model_validate(payload or {})


def create_booking(client: ApiClient, request: BookingRequest) -> BookingResponse:
    """``POST /add-booking``."""
    payload = client.post(endpoints.ADD_BOOKING, request.to_wire())
    response = parse_response(_booking_response, payload, endpoints.ADD_BOOKING)
    logger.info(
        "Booking created for service %d, slot %d on %s",
        request.service_id, request.slot_id, request.booking_date,
    )
    return response


def cancel_booking(
    client: ApiClient, booking_id: int, reason: Optional[str] = None
) -> BookingResponse:
    endpoint = endpoints.cancel_booking(booking_id)
    payload = client.put(endpoint, {"reason": reason})
    logger.info("Booking %d cancelled", booking_id)
    return parse_response(_booking_response, payload, endpoint)


def reschedule_booking(
    client: ApiClient, booking_id: int, request: RescheduleRequest
) -> BookingResponse:
    endpoint = endpoints.reschedule_booking(booking_id)
    payload = client.put(endpoint, request.to_wire())
    logger.info("Booking %d rescheduled to slot %d", booking_id, request.new_slot_id)
    return parse_response(_booking_response, payload, endpoint)


def get_booking(client: ApiClient, booking_id: int) -> CustomerBooking:
    endpoint = endpoints.booking_by_id(booking_id)
    payload = client.get(endpoint)
    if isinstance(payload, dict) and "booking" in payload:
        payload = payload["booking"]
    return parse_response(CustomerBooking.model_validate, payload, endpoint)


def get_customer_bookings(
    client: ApiClient,
    status: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> BookingList:
    payload = client.get(
        endpoints.CUSTOMER_BOOKINGS,
        params={"status": status, "limit": limit, "offset": offset},
    )
    return parse_response(
        lambda body: BookingList.model_validate(body or {}), payload, endpoints.CUSTOMER_BOOKINGS
    )
