"""
Three-stage provider onboarding wizard.

Stages run strictly in order with no skipping:

    BUSINESS_DETAILS -> WORKING_HOURS -> SLOT_GENERATION

Each stage has a validity predicate. Moving forward requires the
current stage to be valid; moving back keeps everything entered.
Completing re-checks every stage, jumps back to the first invalid one
if needed, and submits the aggregated data in a single call. Nothing is
saved locally, so discarding the wizard discards the data.

Usage:
    wizard = OnboardingWizard()
    wizard.update_business_details(name="Sparkle", category_id=3, state="Punjab", city="Lahore")
    wizard.next()
    wizard.update_schedule(WorkingHours(start_time="09:00", end_time="18:00"))
    wizard.next()
    wizard.complete(lambda data: complete_onboarding(client, data))
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional, TypeVar

from hsm_booking.api.client import ApiError
from hsm_booking.config import settings
from hsm_booking.logging_context import get_session_logger, new_session_id
from hsm_booking.notices import NoticeBoard
from hsm_booking.schemas.business_schema import Business
from hsm_booking.schemas.schedule_schema import (
    BreakTime,
    BusinessDetails,
    OnboardingData,
    WorkingHours,
)
from hsm_booking.scheduling.slot_calculator import (
    ALLOWED_INTERVALS,
    SlotPreview,
    calculate_slots,
    generate_preview_times,
)
from hsm_booking.scheduling.working_hours import ScheduleValidationError, validate_schedule

logger = get_session_logger(__name__)

T = TypeVar("T")


class OnboardingStage(int, Enum):
    """Wizard stages in display order."""
    BUSINESS_DETAILS = 1
    WORKING_HOURS = 2
    SLOT_GENERATION = 3


STAGE_TITLES: dict[OnboardingStage, str] = {
    OnboardingStage.BUSINESS_DETAILS: "Business Details",
    OnboardingStage.WORKING_HOURS: "Working Hours",
    OnboardingStage.SLOT_GENERATION: "Slot Generation",
}


class WizardTrigger(str, Enum):
    """Events that move the wizard between stages."""
    NEXT = "next"
    BACK = "back"
    REVALIDATE = "revalidate"


@dataclass
class Transition:
    """A single valid stage transition."""
    from_stage: OnboardingStage
    to_stage: OnboardingStage
    trigger: WizardTrigger


@dataclass
class StageEntry:
    """Recorded history entry for a stage visit."""
    stage: OnboardingStage
    entered_at: datetime
    trigger: Optional[WizardTrigger] = None


class InvalidTransitionError(Exception):
    """Raised when the wizard cannot move as requested from the current stage."""


class OnboardingWizard:
    """
    Sequences onboarding stages and accumulates ``OnboardingData``.

    The transition table lists every allowed move. ``next()`` is further
    gated by the current stage's predicate, ``REVALIDATE`` is only used by
    ``complete()`` to send the user back to a stage that went stale.
    """

    TRANSITIONS: list[Transition] = [
        # --- Forward ---
        Transition(OnboardingStage.BUSINESS_DETAILS, OnboardingStage.WORKING_HOURS,
                   WizardTrigger.NEXT),
        Transition(OnboardingStage.WORKING_HOURS, OnboardingStage.SLOT_GENERATION,
                   WizardTrigger.NEXT),

        # --- Back ---
        Transition(OnboardingStage.WORKING_HOURS, OnboardingStage.BUSINESS_DETAILS,
                   WizardTrigger.BACK),
        Transition(OnboardingStage.SLOT_GENERATION, OnboardingStage.WORKING_HOURS,
                   WizardTrigger.BACK),

        # --- Final re-check ---
        Transition(OnboardingStage.SLOT_GENERATION, OnboardingStage.BUSINESS_DETAILS,
                   WizardTrigger.REVALIDATE),
        Transition(OnboardingStage.SLOT_GENERATION, OnboardingStage.WORKING_HOURS,
                   WizardTrigger.REVALIDATE),
    ]

    def __init__(
        self,
        existing: Optional[OnboardingData] = None,
        initial_stage: OnboardingStage = OnboardingStage.BUSINESS_DETAILS,
        notices: Optional[NoticeBoard] = None,
    ) -> None:
        self.data = existing.model_copy(deep=True) if existing else OnboardingData(
            working_hours=WorkingHours(
                start_time=settings.onboarding.default_start_time,
                end_time=settings.onboarding.default_end_time,
            ),
            slot_interval=settings.onboarding.default_slot_interval,
        )
        self.notices = notices if notices is not None else NoticeBoard()
        self.session_id = new_session_id("ONBOARD")
        self.is_submitting = False
        self.completed = False
        self._current_stage = initial_stage
        self._history: list[StageEntry] = [
            StageEntry(stage=initial_stage, entered_at=datetime.now(timezone.utc))
        ]

    @classmethod
    def from_business(cls, business: Business, notices: Optional[NoticeBoard] = None) -> OnboardingWizard:
        """Start a wizard with stage 1 pre-filled from an existing business."""
        wizard = cls(notices=notices)
        wizard.data.business_details = business.to_details()
        return wizard

    @property
    def current_stage(self) -> OnboardingStage:
        return self._current_stage

    @property
    def stage_index(self) -> int:
        """Zero-based position of the current stage."""
        return list(OnboardingStage).index(self._current_stage)

    @property
    def progress(self) -> int:
        """Percent complete, counting the current stage."""
        return round((self.stage_index + 1) / len(OnboardingStage) * 100)

    @property
    def title(self) -> str:
        return STAGE_TITLES[self._current_stage]

    @property
    def is_last_stage(self) -> bool:
        return self._current_stage == OnboardingStage.SLOT_GENERATION

    # --- Stage data -------------------------------------------------------

    def update_business_details(
        self, details: Optional[BusinessDetails] = None, **changes: object
    ) -> None:
        base = details or self.data.business_details
        self.data.business_details = base.model_copy(update=changes) if changes else base

    def update_schedule(
        self, working_hours: WorkingHours, break_time: Optional[BreakTime] = None
    ) -> None:
        self.data.working_hours = working_hours
        self.data.break_time = break_time

    def update_slot_interval(self, interval: int) -> None:
        if interval not in ALLOWED_INTERVALS:
            raise ValueError(
                f"Slot interval must be one of {list(ALLOWED_INTERVALS)}, got {interval}"
            )
        self.data.slot_interval = interval

    # --- Validation -------------------------------------------------------

    def _business_details_problem(self) -> Optional[str]:
        details = self.data.business_details
        if not details.name.strip():
            return "Business name is required"
        if details.category_id <= 0:
            return "Please select a category"
        if not details.state.strip():
            return "Please select a state"
        if not details.city.strip():
            return "Please select a city"
        return None

    @property
    def schedule_error(self) -> Optional[ScheduleValidationError]:
        if self.data.working_hours is None:
            return None
        return validate_schedule(self.data.working_hours, self.data.break_time)

    def _working_hours_problem(self) -> Optional[str]:
        if self.data.working_hours is None:
            return "Please set your working hours"
        error = self.schedule_error
        return str(error) if error else None

    def _slot_generation_problem(self) -> Optional[str]:
        if self.data.slot_interval not in ALLOWED_INTERVALS:
            return "Please choose a slot interval"
        return None

    def stage_problem(self, stage: OnboardingStage) -> Optional[str]:
        """Why ``stage`` is incomplete, or None when its predicate holds."""
        checks: dict[OnboardingStage, Callable[[], Optional[str]]] = {
            OnboardingStage.BUSINESS_DETAILS: self._business_details_problem,
            OnboardingStage.WORKING_HOURS: self._working_hours_problem,
            OnboardingStage.SLOT_GENERATION: self._slot_generation_problem,
        }
        return checks[stage]()

    def is_stage_valid(self, stage: OnboardingStage) -> bool:
        return self.stage_problem(stage) is None

    def first_invalid_stage(self) -> Optional[OnboardingStage]:
        for stage in OnboardingStage:
            if not self.is_stage_valid(stage):
                return stage
        return None

    @property
    def can_go_next(self) -> bool:
        return (
            not self.is_last_stage
            and not self.is_submitting
            and self.is_stage_valid(self._current_stage)
        )

    @property
    def can_go_back(self) -> bool:
        return self._current_stage != OnboardingStage.BUSINESS_DETAILS and not self.is_submitting

    # --- Preview ----------------------------------------------------------

    def slot_preview(self) -> Optional[SlotPreview]:
        """Slot count for the current schedule, or None while stage 2 is invalid."""
        if self.data.working_hours is None or not self.is_stage_valid(OnboardingStage.WORKING_HOURS):
            return None
        return calculate_slots(self.data.working_hours, self.data.break_time, self.data.slot_interval)

    def preview_times(self) -> list[str]:
        if self.data.working_hours is None or not self.is_stage_valid(OnboardingStage.WORKING_HOURS):
            return []
        return generate_preview_times(
            self.data.working_hours, self.data.break_time, self.data.slot_interval
        )

    # --- Movement ---------------------------------------------------------

    def _transition(self, trigger: WizardTrigger, to_stage: Optional[OnboardingStage] = None) -> OnboardingStage:
        for t in self.TRANSITIONS:
            if t.from_stage != self._current_stage or t.trigger != trigger:
                continue
            if to_stage is not None and t.to_stage != to_stage:
                continue

            old_stage = self._current_stage
            self._current_stage = t.to_stage
            self._history.append(StageEntry(
                stage=self._current_stage,
                entered_at=datetime.now(timezone.utc),
                trigger=trigger,
            ))
            logger.debug(
                "Onboarding stage: %s -> %s (trigger: %s)",
                old_stage.name, self._current_stage.name, trigger.value,
            )
            return self._current_stage

        valid = [t.trigger.value for t in self.TRANSITIONS if t.from_stage == self._current_stage]
        raise InvalidTransitionError(
            f"No valid transition from '{self._current_stage.name}' "
            f"with trigger '{trigger.value}'. Valid triggers: {valid}"
        )

    def _ensure_idle(self) -> None:
        if self.is_submitting:
            raise InvalidTransitionError("Cannot change stage while setup is being submitted")

    def next(self) -> OnboardingStage:
        """Advance one stage. Raises ``InvalidTransitionError`` if the stage is incomplete."""
        self._ensure_idle()
        problem = self.stage_problem(self._current_stage)
        if problem is not None:
            raise InvalidTransitionError(
                f"Cannot leave '{self._current_stage.name}': {problem}"
            )
        return self._transition(WizardTrigger.NEXT)

    def back(self) -> OnboardingStage:
        """Go back one stage, keeping all entered data."""
        self._ensure_idle()
        return self._transition(WizardTrigger.BACK)

    def complete(self, submit: Callable[[OnboardingData], T]) -> Optional[T]:
        """
        Re-validate every stage and submit the aggregated data.

        On a validation failure the wizard jumps to the first invalid stage,
        records an error notice and returns None. While ``submit`` runs the
        wizard is locked; if it raises ``ApiError`` or ``ValueError`` the
        wizard unlocks on the same stage so the user can retry.
        """
        if self.is_submitting:
            logger.debug("Onboarding submit already in flight")
            return None
        if not self.is_last_stage:
            raise InvalidTransitionError(
                f"Setup can only be completed from '{OnboardingStage.SLOT_GENERATION.name}'"
            )

        invalid = self.first_invalid_stage()
        if invalid is not None:
            problem = self.stage_problem(invalid)
            if invalid != self._current_stage:
                self._transition(WizardTrigger.REVALIDATE, to_stage=invalid)
            self.notices.error(problem or "Please complete all required fields")
            return None

        self.is_submitting = True
        try:
            result = submit(self.data.model_copy(deep=True))
        except (ApiError, ValueError) as exc:
            self.notices.error("Failed to complete setup", str(exc) or "Please try again.")
            return None
        finally:
            self.is_submitting = False

        self.completed = True
        self.notices.success(
            "Setup completed successfully!", "Your business profile is now active."
        )
        logger.info("Onboarding completed for '%s'", self.data.business_details.name)
        return result

    # --- History ----------------------------------------------------------

    def get_history(self) -> list[StageEntry]:
        return list(self._history)

    def get_stage_trace(self) -> list[str]:
        return [entry.stage.name for entry in self._history]
