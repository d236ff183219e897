"""Building and editing a workout session while it is being logged.

A session starts from a routine with every planned set pre-filled from its
targets and marked incomplete. It is added to history once finished.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from workout_logger.core.exceptions import SessionAlreadyFinishedError
from workout_logger.schemas.common import as_utc, utcnow
from workout_logger.schemas.routine import Routine
from workout_logger.schemas.session import (
    PerformedExercise,
    PerformedSet,
    WorkoutSessionCreate,
)
from workout_logger.services.routine_editor import ordered_exercises


def build_session_from_routine(
    routine: Routine,
    now: datetime | None = None,
) -> WorkoutSessionCreate:
    performed = [
        PerformedExercise(
            routine_exercise_id=re.id,
            exercise_id=re.exercise_id,
            order_index=re.order_index,
            sets=[
                PerformedSet(
                    routine_set_template_id=st.id,
                    reps=st.target_reps,
                    weight=st.target_weight,
                    time_sec=st.target_time_sec,
                    is_completed=False,
                )
                for st in re.set_templates
            ],
        )
        for re in ordered_exercises(routine)
    ]
    return WorkoutSessionCreate(
        routine_id=routine.id,
        started_at=now or utcnow(),
        performed_exercises=performed,
        notes="",
    )


def _edit_set(
    session: WorkoutSessionCreate,
    performed_exercise_id: str,
    set_id: str,
    fn,
) -> WorkoutSessionCreate:
    exercises = []
    for ex in session.performed_exercises:
        if ex.id == performed_exercise_id:
            ex = ex.model_copy(
                update={"sets": [fn(s) if s.id == set_id else s for s in ex.sets]}
            )
        exercises.append(ex)
    return session.model_copy(update={"performed_exercises": exercises})


def update_performed_set(
    session: WorkoutSessionCreate,
    performed_exercise_id: str,
    set_id: str,
    **changes: Any,
) -> WorkoutSessionCreate:
    """Patch reps / weight / time_sec / rpe / notes / is_completed on one set.

    The patched set is validated again; bad values raise ValidationError.
    """
    patch = {k: v for k, v in changes.items() if k in PerformedSet.model_fields and k != "id"}
    return _edit_set(
        session,
        performed_exercise_id,
        set_id,
        lambda s: PerformedSet.model_validate({**s.model_dump(), **patch}),
    )


def toggle_set_completed(
    session: WorkoutSessionCreate,
    performed_exercise_id: str,
    set_id: str,
) -> WorkoutSessionCreate:
    return _edit_set(
        session,
        performed_exercise_id,
        set_id,
        lambda s: s.model_copy(update={"is_completed": not s.is_completed}),
    )


def count_sets(session: WorkoutSessionCreate) -> tuple[int, int]:
    """(completed sets, planned sets) for the in-session progress line."""
    sets = [s for ex in session.performed_exercises for s in ex.sets]
    return sum(1 for s in sets if s.is_completed), len(sets)


def finish_session(
    session: WorkoutSessionCreate,
    now: datetime | None = None,
) -> WorkoutSessionCreate:
    """Stamp finished_at. Once set it is never cleared or revised."""
    if session.finished_at is not None:
        raise SessionAlreadyFinishedError(session.finished_at)
    return session.model_copy(update={"finished_at": as_utc(now or utcnow())})
