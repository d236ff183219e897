"""User profile and notification settings schemas."""

from pydantic import Field

from workout_logger.core.constants import DEFAULT_REMINDER_HOUR
from workout_logger.core.enums import UnitSystem
from workout_logger.schemas.common import DocumentModel, Timestamp


class UserProfileBase(DocumentModel):
    display_name: str = Field(..., max_length=255)
    email: str | None = None
    unit_system: UnitSystem = UnitSystem.METRIC
    birth_year: int | None = Field(None, ge=1900)
    height_cm: float | None = Field(None, gt=0)
    bodyweight_kg: float | None = Field(None, gt=0)
    weekly_workout_goal: int | None = Field(None, ge=0)  # sessions per week


class UserProfileInput(UserProfileBase):
    """Create-or-update payload for the singleton profile."""

    id: str | None = None
    created_at: Timestamp | None = None


class UserProfile(UserProfileBase):
    id: str
    created_at: Timestamp


class NotificationSettings(DocumentModel):
    enabled: bool = False
    default_reminder_hour: int = Field(DEFAULT_REMINDER_HOUR, ge=0, le=23)
