"""Exercise library schemas."""

from pydantic import Field

from workout_logger.schemas.common import DocumentModel


class ExerciseBase(DocumentModel):
    name: str = Field(..., min_length=1, max_length=255)
    primary_muscle_group: str = Field(..., min_length=1)
    secondary_muscle_groups: list[str] | None = None
    equipment: str | None = None  # Barbell, Dumbbell, Machine, Bodyweight...
    is_custom: bool = False
    instructions: str | None = None
    video_url: str | None = None
    tags: list[str] | None = None  # compound, push, pull, beginner...


class ExerciseInput(ExerciseBase):
    """Create-or-update payload: no id means create."""

    id: str | None = None


class ExerciseDefinition(ExerciseBase):
    id: str
