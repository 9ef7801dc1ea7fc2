"""
In-progress booking selection: date -> slot -> address -> book.

Slot choices are scoped to the selected date, so picking a new date
drops the chosen slot. Nothing is persisted; a fresh selection starts
empty on every page load.

Usage:
    selection = BookingSelectionState(service=service, slots=slots)
    selection.select_date(selection.date_options[0].value)
    selection.select_slot(selection.available_slots[0])
    selection.select_address(address)
    if selection.can_book:
        selection.book(client)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, tzinfo
from typing import Callable, Optional

from hsm_booking.api.bookings import create_booking, reschedule_booking
from hsm_booking.api.client import ApiClient, ApiError
from hsm_booking.logging_context import get_session_logger, new_session_id
from hsm_booking.notices import NoticeBoard
from hsm_booking.schemas.booking_schema import BookingRequest, BookingResponse, RescheduleRequest
from hsm_booking.schemas.customer_schema import Address, Service
from hsm_booking.schemas.slot_schema import Slot
from hsm_booking.scheduling.date_window import DateOption, get_booking_window, get_reschedule_window
from hsm_booking.scheduling.slot_filter import describe_empty, filter_slots_for_date

logger = get_session_logger(__name__)

Clock = Callable[[], datetime]


class _DateSlotSelection(ABC):
    """Date and slot picking shared by new bookings and reschedules."""

    def __init__(
        self,
        slots: Optional[list[Slot]] = None,
        notices: Optional[NoticeBoard] = None,
        clock: Optional[Clock] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.all_slots: list[Slot] = list(slots or [])
        self.notices = notices if notices is not None else NoticeBoard()
        self._clock = clock
        self._tz = tz
        self.date: str = ""
        self.slot: Optional[Slot] = None
        self.is_submitting: bool = False

    def _now(self) -> Optional[datetime]:
        return self._clock() if self._clock else None

    @property
    @abstractmethod
    def date_options(self) -> list[DateOption]:
        """Dates the customer may pick from."""

    @property
    def available_slots(self) -> list[Slot]:
        if not self.date:
            return []
        return self.all_slots

    @property
    def empty_message(self) -> Optional[str]:
        """Text for the "no slots" state, or None when there are slots to show."""
        if not self.date or self.available_slots:
            return None
        return describe_empty(self.date, self._now(), self._tz)

    def set_slots(self, slots: list[Slot]) -> None:
        """Replace the backend slot list; drops the chosen slot if it vanished."""
        self.all_slots = list(slots)
        if self.slot is not None and self.slot not in self.available_slots:
            self.slot = None

    def select_date(self, date: str) -> None:
        valid = [option.value for option in self.date_options]
        if date not in valid:
            raise ValueError(f"Date {date!r} is outside the selectable window {valid}")
        self.date = date
        self.slot = None
        logger.debug("Date selected: %s", date)

    def select_slot(self, slot: Slot) -> None:
        if slot not in self.available_slots:
            raise ValueError(f"Slot {slot.id} is not available on {self.date or 'an unselected date'}")
        self.slot = slot
        logger.debug("Slot selected: %d (%s)", slot.id, slot.start_time)


class BookingSelectionState(_DateSlotSelection):
    """Customer's choice of date, slot and address for one service."""

    def __init__(
        self,
        service: Optional[Service] = None,
        slots: Optional[list[Slot]] = None,
        notices: Optional[NoticeBoard] = None,
        clock: Optional[Clock] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        super().__init__(slots, notices, clock, tz)
        self.service = service
        self.address: Optional[Address] = None
        self.session_id = new_session_id("BOOK")

    @property
    def date_options(self) -> list[DateOption]:
        return get_booking_window(now=self._now(), tz=self._tz)

    @property
    def available_slots(self) -> list[Slot]:
        if not self.date:
            return []
        return filter_slots_for_date(self.all_slots, self.date, now=self._now(), tz=self._tz)

    @property
    def is_booking(self) -> bool:
        return self.is_submitting

    @property
    def can_book(self) -> bool:
        return bool(self.service and self.date and self.slot and self.address)

    def select_address(self, address: Address) -> None:
        self.address = address

    def missing_fields(self) -> list[str]:
        return [
            name
            for name, value in [
                ("service", self.service),
                ("date", self.date),
                ("slot", self.slot),
                ("address", self.address),
            ]
            if not value
        ]

    def reset(self) -> None:
        self.date = ""
        self.slot = None
        self.address = None

    def book(self, client: ApiClient) -> Optional[BookingResponse]:
        """
        Submit the booking once.

        Returns None without calling the backend when a booking is already
        in flight or the selection is incomplete. Backend errors become an
        error notice and the selection stays as it was so the user can retry.
        """
        if self.is_submitting:
            logger.debug("Booking already in flight, ignoring duplicate submit")
            return None
        service, slot, address = self.service, self.slot, self.address
        if service is None or slot is None or address is None or not self.date:
            self.notices.error(
                "Please complete all selections",
                f"Missing: {', '.join(self.missing_fields())}",
            )
            return None

        request = BookingRequest(
            service_id=service.id,
            slot_id=slot.id,
            address_id=address.id,
            booking_date=self.date,
        )
        self.is_submitting = True
        try:
            response = create_booking(client, request)
        except ApiError as exc:
            self.notices.error(exc.message or "Failed to create booking")
            return None
        finally:
            self.is_submitting = False

        self.notices.success(response.message or "Booking created successfully!")
        return response


class RescheduleSelection(_DateSlotSelection):
    """New date and slot for an existing booking, picked from the following week."""

    def __init__(
        self,
        booking_id: int,
        slots: Optional[list[Slot]] = None,
        notices: Optional[NoticeBoard] = None,
        clock: Optional[Clock] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        super().__init__(slots, notices, clock, tz)
        self.booking_id = booking_id
        self.session_id = new_session_id("RESCHED")

    @property
    def date_options(self) -> list[DateOption]:
        return get_reschedule_window(now=self._now(), tz=self._tz)

    @property
    def can_reschedule(self) -> bool:
        return bool(self.date and self.slot)

    def reschedule(self, client: ApiClient) -> Optional[BookingResponse]:
        if self.is_submitting:
            return None
        slot = self.slot
        if slot is None or not self.date:
            self.notices.error("Please select a date and time slot")
            return None

        self.is_submitting = True
        try:
            response = reschedule_booking(
                client,
                self.booking_id,
                RescheduleRequest(new_slot_id=slot.id, new_date=self.date),
            )
        except ApiError as exc:
            self.notices.error(exc.message or "Failed to reschedule booking")
            return None
        finally:
            self.is_submitting = False

        self.notices.success(response.message or "Booking rescheduled successfully")
        return response
