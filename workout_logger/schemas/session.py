"""Workout session (logged training) and derived statistics schemas."""

from pydantic import Field

from workout_logger.schemas.common import DocumentModel, Timestamp, new_id


class PerformedSet(DocumentModel):
    id: str = Field(default_factory=new_id)
    routine_set_template_id: str | None = None
    reps: int | None = Field(None, ge=0)
    time_sec: int | None = Field(None, ge=0)
    weight: float | None = None
    is_completed: bool = False
    rpe: float | None = Field(None, ge=0, le=10)  # rate of perceived exertion
    notes: str | None = None


class PerformedExercise(DocumentModel):
    id: str = Field(default_factory=new_id)
    routine_exercise_id: str | None = None
    exercise_id: str  # denormalized: survives routine edits
    order_index: int = Field(0, ge=0)
    sets: list[PerformedSet] = []


class WorkoutSessionBase(DocumentModel):
    routine_id: str | None = None
    custom_name: str | None = None
    started_at: Timestamp
    finished_at: Timestamp | None = None  # None: in progress or abandoned
    performed_exercises: list[PerformedExercise] = []
    notes: str | None = None


class WorkoutSessionCreate(WorkoutSessionBase):
    """A session being logged; gets its id when it is added to history."""


class WorkoutSession(WorkoutSessionBase):
    id: str


class SessionStats(DocumentModel):
    """Derived per-session numbers (never persisted)."""

    total_sets: int = 0
    total_reps: int = 0
    total_volume: float = 0.0  # sum(weight * reps) over completed sets
    duration_minutes: int | None = None


class TimeSeriesEntry(DocumentModel):
    session: WorkoutSession
    stats: SessionStats


class VolumePoint(DocumentModel):
    started_at: Timestamp
    volume: float


class ProgressSummary(DocumentModel):
    total_workouts: int
    total_volume: float
    volume_by_date: list[VolumePoint] = []


class WeeklyGoalProgress(DocumentModel):
    goal: int | None = None
    completed: int = 0
    remaining: int | None = None
