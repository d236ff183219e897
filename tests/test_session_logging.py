"""Starting a session from a routine, editing sets, finishing."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from tests.helpers import T0
from workout_logger.core.exceptions import SessionAlreadyFinishedError
from workout_logger.schemas.routine import Routine, RoutineExercise, RoutineSetTemplate
from workout_logger.services.analytics import compute_session_stats
from workout_logger.services.session_logging import (
    build_session_from_routine,
    count_sets,
    finish_session,
    toggle_set_completed,
    update_performed_set,
)


@pytest.fixture
def routine() -> Routine:
    return Routine(
        id="r1",
        name="Push",
        exercises=[
            RoutineExercise(
                id="re-b",
                exercise_id="ohp",
                order_index=1,
                set_templates=[RoutineSetTemplate(id="t3", target_reps=6, target_weight=40)],
            ),
            RoutineExercise(
                id="re-a",
                exercise_id="bench",
                order_index=0,
                set_templates=[
                    RoutineSetTemplate(id="t1", target_reps=8, target_weight=60),
                    RoutineSetTemplate(id="t2", target_time_sec=30),
                ],
            ),
        ],
    )


def test_build_session_prefills_targets_in_routine_order(routine):
    session = build_session_from_routine(routine, now=T0)
    assert session.routine_id == "r1"
    assert session.started_at == T0
    assert session.finished_at is None
    assert [ex.routine_exercise_id for ex in session.performed_exercises] == ["re-a", "re-b"]
    first = session.performed_exercises[0].sets
    assert [(s.routine_set_template_id, s.reps, s.weight, s.time_sec) for s in first] == [
        ("t1", 8, 60, None),
        ("t2", None, None, 30),
    ]
    assert not any(s.is_completed for ex in session.performed_exercises for s in ex.sets)


def test_toggle_and_update_sets(routine):
    session = build_session_from_routine(routine, now=T0)
    ex = session.performed_exercises[0]
    set_id = ex.sets[0].id

    session = update_performed_set(session, ex.id, set_id, reps=10, rpe=8.5)
    session = toggle_set_completed(session, ex.id, set_id)

    edited = session.performed_exercises[0].sets[0]
    assert (edited.reps, edited.rpe, edited.is_completed) == (10, 8.5, True)
    assert count_sets(session) == (1, 3)
    assert compute_session_stats(session).total_volume == 600


def test_update_set_rejects_invalid_values(routine):
    session = build_session_from_routine(routine, now=T0)
    ex = session.performed_exercises[0]
    set_id = ex.sets[0].id

    with pytest.raises(ValidationError):
        update_performed_set(session, ex.id, set_id, reps=-5, weight=100, is_completed=True)
    with pytest.raises(ValidationError):
        update_performed_set(session, ex.id, set_id, weight=float("nan"))
    with pytest.raises(ValidationError):
        update_performed_set(session, ex.id, set_id, rpe=11)

    session = update_performed_set(session, ex.id, set_id, reps="10", is_completed=True)
    assert session.performed_exercises[0].sets[0].reps == 10
    assert compute_session_stats(session).total_reps == 10


def test_finish_stamps_once(routine):
    session = build_session_from_routine(routine, now=T0)
    finished = finish_session(session, now=T0 + timedelta(minutes=50))
    assert compute_session_stats(finished).duration_minutes == 50
    with pytest.raises(SessionAlreadyFinishedError):
        finish_session(finished, now=T0 + timedelta(hours=2))
