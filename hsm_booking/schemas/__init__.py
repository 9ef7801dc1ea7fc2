from hsm_booking.schemas.booking_schema import (
    BookingList,
    BookingRequest,
    BookingResponse,
    CustomerBooking,
    RescheduleRequest,
)
from hsm_booking.schemas.business_schema import Business, BusinessStatus, normalize_business
from hsm_booking.schemas.customer_schema import Address, Service, normalize_service
from hsm_booking.schemas.schedule_schema import (
    BreakTime,
    BusinessDetails,
    OnboardingData,
    WorkingHours,
)
from hsm_booking.schemas.slot_schema import Slot, normalize_slots

__all__ = [
    "Address",
    "BookingList",
    "BookingRequest",
    "BookingResponse",
    "BreakTime",
    "Business",
    "BusinessDetails",
    "BusinessStatus",
    "CustomerBooking",
    "OnboardingData",
    "RescheduleRequest",
    "Service",
    "Slot",
    "WorkingHours",
    "normalize_business",
    "normalize_service",
    "normalize_slots",
]
