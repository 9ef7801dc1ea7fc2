"""Booking request and response models."""

from typing import Optional

from pydantic import ConfigDict, Field

from hsm_booking.schemas.schedule_schema import CamelModel


class BookingRequest(CamelModel):
    """Body for ``POST /add-booking``. ``booking_date`` is a local "YYYY-MM-DD"."""
    service_id: int
    slot_id: int
    address_id: int
    booking_date: str


class RescheduleRequest(CamelModel):
    """Body for ``PUT /booking/{id}/reschedule``."""
    new_slot_id: int
    new_date: Optional[str] = None


class CustomerBooking(CamelModel):
    """Booking record as returned by the backend. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    id: int
    service_id: Optional[int] = None
    slot_id: Optional[int] = None
    address_id: Optional[int] = None
    booking_date: Optional[str] = None
    status: str = "pending"


class BookingResponse(CamelModel):
    """Result of a booking mutation."""
    message: str = ""
    booking: Optional[CustomerBooking] = None


class BookingList(CamelModel):
    bookings: list[CustomerBooking] = Field(default_factory=list)
    total: int = 0
