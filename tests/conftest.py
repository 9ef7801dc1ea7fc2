"""Shared test fixtures and helpers."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import httpx
import pytest

from hsm_booking.api.client import ApiClient
from hsm_booking.notices import NoticeBoard
from hsm_booking.onboarding.wizard import OnboardingWizard
from hsm_booking.schemas.customer_schema import Address, Service
from hsm_booking.schemas.schedule_schema import BusinessDetails
from hsm_booking.schemas.slot_schema import Slot

# UTC+5, so local midnight is still "yesterday" in UTC
TEST_TZ = timezone(timedelta(hours=5))
TEST_NOW = datetime(2026, 3, 10, 14, 0, tzinfo=TEST_TZ)
TEST_TODAY = "2026-03-10"
TEST_BASE_URL = "http://backend.test"


def make_slot(slot_id: int, start: str, end: Optional[str] = None) -> Slot:
    """Helper to create a Slot from "HH:mm"."""
    return Slot(
        id=slot_id,
        start_time=f"{start}:00",
        end_time=f"{end}:00" if end else None,
        business_id=5,
    )


def make_day_slots(start_hour: int = 9, end_hour: int = 18, step: int = 30) -> list[Slot]:
    """Recurring slots from start_hour up to (not including) end_hour."""
    slots = []
    minute = start_hour * 60
    slot_id = 1
    while minute < end_hour * 60:
        slots.append(make_slot(slot_id, f"{minute // 60:02d}:{minute % 60:02d}"))
        slot_id += 1
        minute += step
    return slots


def make_client(handler: Callable[[httpx.Request], httpx.Response], base_url: str = TEST_BASE_URL) -> ApiClient:
    """ApiClient whose requests are answered by ``handler``."""
    return ApiClient(base_url=base_url, transport=httpx.MockTransport(handler))


def valid_details(**overrides) -> BusinessDetails:
    values = {
        "name": "Sparkle Cleaning",
        "description": "Home and office cleaning",
        "category_id": 3,
        "category": "Cleaning",
        "business_phone": "03001234567",
        "state": "Punjab",
        "city": "Lahore",
    }
    values.update(overrides)
    return BusinessDetails(**values)


@pytest.fixture
def clock():
    return lambda: TEST_NOW


@pytest.fixture
def day_slots():
    return make_day_slots()


@pytest.fixture
def service():
    return Service(id=7, business_id=5, name="Deep Cleaning", price=4500, estimate_duration=120)


@pytest.fixture
def address():
    return Address(id=3, user_id=11, street="12 Mall Road", city="Lahore", state="Punjab", zip_code="54000")


@pytest.fixture
def other_address():
    return Address(id=4, user_id=11, address_type="work", street="5 Canal Bank", city="Lahore")


@pytest.fixture
def notices():
    return NoticeBoard()


@pytest.fixture
def wizard(notices):
    return OnboardingWizard(notices=notices)
