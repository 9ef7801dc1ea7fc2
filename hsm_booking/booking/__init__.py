from hsm_booking.booking.selection import BookingSelectionState, RescheduleSelection

__all__ = ["BookingSelectionState", "RescheduleSelection"]
