from hsm_booking.scheduling.date_window import (
    DateOption,
    get_booking_window,
    get_next_3_days,
    get_next_7_days,
    get_reschedule_window,
    today_iso,
)
from hsm_booking.scheduling.slot_calculator import (
    ALLOWED_INTERVALS,
    SlotPreview,
    calculate_slots,
    generate_preview_times,
)
from hsm_booking.scheduling.slot_filter import describe_empty, filter_slots_for_date
from hsm_booking.scheduling.working_hours import (
    ScheduleErrorCode,
    ScheduleValidationError,
    minutes_to_duration,
    time_to_minutes,
    validate_schedule,
)

__all__ = [
    "ALLOWED_INTERVALS",
    "DateOption",
    "ScheduleErrorCode",
    "ScheduleValidationError",
    "SlotPreview",
    "calculate_slots",
    "describe_empty",
    "filter_slots_for_date",
    "generate_preview_times",
    "get_booking_window",
    "get_next_3_days",
    "get_next_7_days",
    "get_reschedule_window",
    "minutes_to_duration",
    "time_to_minutes",
    "today_iso",
    "validate_schedule",
]
