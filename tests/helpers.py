"""Builders shared by the test modules."""

from datetime import datetime, timedelta, timezone

from workout_logger.schemas.session import PerformedExercise, PerformedSet, WorkoutSession

T0 = datetime(2024, 3, 4, 18, 0, tzinfo=timezone.utc)  # a Monday


def make_session(
    session_id: str = "s1",
    started_at: datetime = T0,
    minutes: float | None = 60,
    sets: list[PerformedSet] | None = None,
    exercise_id: str = "bench",
) -> WorkoutSession:
    finished_at = started_at + timedelta(minutes=minutes) if minutes is not None else None
    return WorkoutSession(
        id=session_id,
        started_at=started_at,
        finished_at=finished_at,
        performed_exercises=[
            PerformedExercise(id=f"{session_id}-pe", exercise_id=exercise_id, sets=sets or [])
        ],
    )
