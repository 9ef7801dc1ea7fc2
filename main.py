"""
Command-line entry point for slot previews and availability checks.

Usage:
    Slot preview:   python main.py preview --start 09:00 --end 18:00 --break-start 13:00 --break-end 14:00 --interval 30
    Booking dates:  python main.py dates
    Reschedule:     python main.py dates --reschedule
    Live slots:     python main.py slots --business-id 12 --date 2026-10-19 --base-url http://localhost:8000
"""

import argparse
import logging
import sys
from typing import Optional

from hsm_booking.api.client import ApiClient, ApiError
from hsm_booking.api.slots import get_available_slots
from hsm_booking.config import settings
from hsm_booking.schemas.schedule_schema import BreakTime, WorkingHours
from hsm_booking.scheduling.date_window import get_booking_window, get_reschedule_window, today_iso
from hsm_booking.scheduling.slot_calculator import (
    ALLOWED_INTERVALS,
    calculate_slots,
    generate_preview_times,
)
from hsm_booking.scheduling.slot_filter import describe_empty, filter_slots_for_date
from hsm_booking.scheduling.working_hours import (
    ScheduleValidationError,
    ensure_valid_schedule,
    format_time_12h,
)

logger = logging.getLogger(__name__)


def _run_preview(args: argparse.Namespace) -> int:
    working_hours = WorkingHours(start_time=args.start, end_time=args.end)
    break_time: Optional[BreakTime] = None
    if args.break_start or args.break_end:
        if not (args.break_start and args.break_end):
            logger.error("Both --break-start and --break-end are required for a break")
            return 2
        break_time = BreakTime(start_time=args.break_start, end_time=args.break_end)

    try:
        ensure_valid_schedule(working_hours, break_time)
    except ScheduleValidationError as exc:
        logger.error("Invalid schedule: %s", exc)
        return 2

    preview = calculate_slots(working_hours, break_time, args.interval)
    times = generate_preview_times(working_hours, break_time, args.interval)
    lines = [
        f"Working hours: {format_time_12h(args.start)} - {format_time_12h(args.end)}",
        f"Working time:  {preview.total_working_time}",
        f"Slots per day: {preview.total_slots} ({args.interval}-minute interval)",
        "First slots:   " + ", ".join(format_time_12h(t) for t in times),
    ]
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


def _run_dates(args: argparse.Namespace) -> int:
    options = get_reschedule_window() if args.reschedule else get_booking_window()
    for option in options:
        sys.stdout.write(f"{option.value}  {option.label:<12} {option.display_date}\n")
    return 0


def _run_slots(args: argparse.Namespace) -> int:
    date = args.date or today_iso()
    with ApiClient(base_url=args.base_url) as client:
        try:
            slots = get_available_slots(client, args.business_id, date=date)
        except ApiError as exc:
            logger.error("Failed to load available slots: %s", exc)
            return 1

    available = filter_slots_for_date(slots, date)
    if not available:
        sys.stdout.write(describe_empty(date) + "\n")
        return 0
    for slot in available:
        sys.stdout.write(f"#{slot.id:<5} {format_time_12h(slot.start_time)}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Preview provider slots and check customer booking availability."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    preview = sub.add_parser("preview", help="Preview slots generated from working hours.")
    preview.add_argument("--start", default=settings.onboarding.default_start_time,
                         help="Opening time, HH:mm.")
    preview.add_argument("--end", default=settings.onboarding.default_end_time,
                         help="Closing time, HH:mm.")
    preview.add_argument("--break-start", default=None, help="Break start, HH:mm.")
    preview.add_argument("--break-end", default=None, help="Break end, HH:mm.")
    preview.add_argument("--interval", type=int, choices=ALLOWED_INTERVALS,
                         default=settings.onboarding.default_slot_interval,
                         help="Slot interval in minutes.")
    preview.set_defaults(func=_run_preview)

    dates = sub.add_parser("dates", help="List selectable booking dates.")
    dates.add_argument("--reschedule", action="store_true",
                       help="Show the reschedule window instead of the booking window.")
    dates.set_defaults(func=_run_dates)

    slots = sub.add_parser("slots", help="List bookable slots for a business.")
    slots.add_argument("--business-id", type=int, required=True)
    slots.add_argument("--date", default=None, help="YYYY-MM-DD, defaults to today.")
    slots.add_argument("--base-url", default=settings.api.base_url,
                       help="Backend base URL.")
    slots.set_defaults(func=_run_slots)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
