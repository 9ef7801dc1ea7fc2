"""
Selectable booking dates.

Customers pick from a short window starting today; reschedules pick from
the following week. Dates are built from the local calendar date in the
configured timezone, never from a UTC timestamp, so a customer booking
just after midnight ahead of UTC still sees the right day.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from hsm_booking.config import settings

logger = logging.getLogger(__name__)

RELATIVE_LABELS = ("Today", "Tomorrow", "Overmorrow")


@dataclass(frozen=True)
class DateOption:
    """One selectable day."""

    value: str  # YYYY-MM-DD
    label: str
    display_date: str


def resolve_tz(tz: Optional[tzinfo] = None) -> tzinfo:
    """Pick the timezone: explicit argument, then TIMEZONE setting, then system local."""
    if tz is not None:
        return tz
    if settings.booking.timezone:
        return ZoneInfo(settings.booking.timezone)
    # astimezone() always returns an aware datetime
    return datetime.now().astimezone().tzinfo  # type: ignore[return-value]


def local_now(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock time in the booking timezone.

    A naive ``now`` is taken to already be local wall-clock time.
    """
    zone = resolve_tz(tz)
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        return now.replace(tzinfo=zone)
    return now.astimezone(zone)


def local_today(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> date:
    return local_now(now, tz).date()


def today_iso(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> str:
    """Today's local date as "YYYY-MM-DD", built from year/month/day."""
    return to_iso(local_today(now, tz))


def to_iso(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def format_display_date(day: date) -> str:
    """Short display form, e.g. "Mon, Oct 19"."""
    return f"{day:%a}, {day:%b} {day.day}"


def get_booking_window(
    days: int = settings.booking.booking_window_days,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> list[DateOption]:
    """Dates from today onwards, earliest first.

    The first three carry relative labels; any further days are labelled
    with their display date.
    """
    today = local_today(now, tz)
    options = []
    for offset in range(days):
        day = today + timedelta(days=offset)
        label = RELATIVE_LABELS[offset] if offset < len(RELATIVE_LABELS) else format_display_date(day)
        options.append(DateOption(value=to_iso(day), label=label, display_date=format_display_date(day)))
    return options


def get_next_3_days(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> list[DateOption]:
    """Today, Tomorrow and Overmorrow for the initial booking choice."""
    return get_booking_window(3, now, tz)


def get_next_7_days(now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> list[DateOption]:
    """The seven days after today (today excluded), for rescheduling."""
    return get_reschedule_window(7, now, tz)


def get_reschedule_window(
    days: int = settings.booking.reschedule_window_days,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> list[DateOption]:
    today = local_today(now, tz)
    options = []
    for offset in range(1, days + 1):
        day = today + timedelta(days=offset)
        display = format_display_date(day)
        options.append(DateOption(value=to_iso(day), label=display, display_date=display))
    return options
