from hsm_booking.onboarding.wizard import (
    InvalidTransitionError,
    OnboardingStage,
    OnboardingWizard,
    WizardTrigger,
)

__all__ = [
    "InvalidTransitionError",
    "OnboardingStage",
    "OnboardingWizard",
    "WizardTrigger",
]
