"""Routine (reusable workout template) schemas."""

from pydantic import Field

from workout_logger.schemas.common import DocumentModel, Timestamp, Weekday, new_id
from workout_logger.schemas.exercise import ExerciseDefinition


class RoutineSetTemplate(DocumentModel):
    """Planned targets for one set, e.g. 8 reps @ 60 kg."""

    id: str = Field(default_factory=new_id)
    target_reps: int | None = Field(None, ge=0)
    target_time_sec: int | None = Field(None, ge=0)
    target_weight: float | None = None
    notes: str | None = None


class RoutineExercise(DocumentModel):
    """An exercise placed in a routine with its own order and set plan."""

    id: str = Field(default_factory=new_id)
    exercise_id: str
    order_index: int = Field(0, ge=0)
    set_templates: list[RoutineSetTemplate] = []
    rest_seconds_between_sets: int | None = Field(None, ge=0)


class RoutineBase(DocumentModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    is_favorite: bool = False
    scheduled_weekdays: list[Weekday] = []
    exercises: list[RoutineExercise] = []
    last_used_at: Timestamp | None = None


class RoutineInput(RoutineBase):
    """Create-or-update payload: no id means create."""

    id: str | None = None


class Routine(RoutineBase):
    id: str


class RoutineExerciseView(DocumentModel):
    """A routine entry with its library exercise (placeholder when deleted)."""

    routine_exercise: RoutineExercise
    exercise: ExerciseDefinition
