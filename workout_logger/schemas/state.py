"""Root persisted document: the unit of persistence and of export/import."""

from pydantic import Field

from workout_logger.schemas.common import DocumentModel, Timestamp
from workout_logger.schemas.exercise import ExerciseDefinition
from workout_logger.schemas.profile import NotificationSettings, UserProfile
from workout_logger.schemas.routine import Routine
from workout_logger.schemas.session import WorkoutSession


class PersistedAppState(DocumentModel):
    user_profile: UserProfile | None = None
    routines: list[Routine] = []
    exercise_library: list[ExerciseDefinition] = []
    workout_history: list[WorkoutSession] = []
    notification_settings: NotificationSettings = Field(default_factory=NotificationSettings)
    last_analytics_rebuild_at: Timestamp | None = None


def initial_state() -> PersistedAppState:
    """Empty state: no profile, empty collections, reminders off at 18:00."""
    return PersistedAppState()
