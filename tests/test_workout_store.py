"""Action API: identity assignment, persistence scheduling, hydration."""

import json
import logging

import pytest

from tests.helpers import T0, make_session
from workout_logger.core.constants import STORAGE_KEY_APP_STATE, UNKNOWN_EXERCISE_NAME
from workout_logger.core.exceptions import NotFoundError
from workout_logger.core.seed_data import BUILTIN_EXERCISES
from workout_logger.schemas.exercise import ExerciseBase, ExerciseInput
from workout_logger.schemas.profile import NotificationSettings, UserProfileInput
from workout_logger.schemas.routine import RoutineBase, RoutineExercise, RoutineInput
from workout_logger.schemas.session import PerformedSet, WorkoutSessionCreate
from workout_logger.storage.memory import InMemoryKeyValueStorage
from workout_logger.store.workout_store import WorkoutStore


class FailingStorage(InMemoryKeyValueStorage):
    async def get_item(self, key):
        raise OSError("disk unavailable")

    async def set_item(self, key, value):
        raise OSError("disk full")


async def test_create_routine_assigns_id_and_persists(store, storage):
    routine = store.create_or_update_routine(RoutineInput(name="Push"))

    assert routine.id
    assert routine.is_favorite is False
    assert routine.scheduled_weekdays == []
    assert store.state.routines == [routine]

    await store.flush()
    saved = json.loads(storage.items[STORAGE_KEY_APP_STATE])
    assert saved["routines"][0]["id"] == routine.id


async def test_create_without_id_always_creates(store):
    a = store.create_or_update_routine(RoutineInput(name="Same"))
    b = store.create_or_update_routine(RoutineInput(name="Same"))
    assert a.id != b.id
    assert len(store.state.routines) == 2


async def test_upsert_with_id_inserts_then_updates_in_place(store):
    store.create_or_update_routine(RoutineInput(name="Other"))
    store.create_or_update_routine(RoutineInput(id="fixed", name="Legs"))
    store.create_or_update_routine(RoutineInput(id="fixed", name="Legs v2"))
    assert [r.name for r in store.state.routines] == ["Other", "Legs v2"]


async def test_routine_upsert_idempotent(store):
    payload = RoutineInput(
        id="r1",
        name="Pull",
        exercises=[RoutineExercise(id="e1", exercise_id="row")],
    )
    store.create_or_update_routine(payload)
    once = store.state
    store.create_or_update_routine(payload)
    assert store.state == once


async def test_routine_order_is_normalized_on_save(store):
    routine = store.create_routine(
        RoutineBase(
            name="R",
            exercises=[
                RoutineExercise(id="b", exercise_id="x", order_index=5),
                RoutineExercise(id="a", exercise_id="x", order_index=3),
            ],
        )
    )
    assert [(ex.id, ex.order_index) for ex in routine.exercises] == [("a", 0), ("b", 1)]


async def test_update_routine_requires_existing_id(store):
    with pytest.raises(NotFoundError):
        store.update_routine("missing", RoutineBase(name="X"))
    created = store.create_routine(RoutineBase(name="X"))
    updated = store.update_routine(created.id, RoutineBase(name="Y"))
    assert updated.id == created.id
    assert store.get_routine(created.id).name == "Y"


async def test_delete_routine(store):
    routine = store.create_routine(RoutineBase(name="X"))
    store.delete_routine(routine.id)
    store.delete_routine("never-existed")
    assert store.state.routines == []


async def test_sorted_routines_by_name(store):
    for name in ["legs", "Arms", "back"]:
        store.create_routine(RoutineBase(name=name))
    assert [r.name for r in store.sorted_routines()] == ["Arms", "back", "legs"]


async def test_exercise_crud_and_dangling_reference(store):
    bench = store.upsert_exercise(ExerciseInput(name="Bench", primary_muscle_group="Chest"))
    routine = store.create_routine(
        RoutineBase(name="Push", exercises=[RoutineExercise(exercise_id=bench.id)])
    )

    store.delete_exercise(bench.id)

    assert store.get_exercise(bench.id) is None
    assert store.get_routine(routine.id).exercises[0].exercise_id == bench.id
    placeholder = store.resolve_exercise(bench.id)
    assert placeholder.name == UNKNOWN_EXERCISE_NAME
    assert placeholder.id == bench.id


async def test_update_exercise_not_found(store):
    with pytest.raises(NotFoundError):
        store.update_exercise("nope", ExerciseBase(name="X", primary_muscle_group="Y"))


async def test_custom_exercise_and_search(store):
    created = store.create_custom_exercise("  Zercher Squat ")
    store.create_custom_exercise("Bench Press")
    assert created.is_custom is True
    assert created.name == "Zercher Squat"
    assert created.primary_muscle_group == "Custom"
    assert created.equipment == "Unknown"
    assert [e.name for e in store.search_exercises("squat")] == ["Zercher Squat"]
    assert len(store.search_exercises("")) == 2


async def test_seed_only_when_library_empty(store):
    assert store.seed_exercise_library() == len(BUILTIN_EXERCISES)
    assert store.seed_exercise_library() == 0
    ids = [e.id for e in store.state.exercise_library]
    assert len(set(ids)) == len(ids)
    assert not any(e.is_custom for e in store.state.exercise_library)


async def test_profile_defaults(store):
    profile = store.set_user_profile(UserProfileInput(display_name="   "))
    assert profile.display_name == "Athlete"
    assert profile.created_at is not None
    assert profile.unit_system.value == "metric"

    again = store.set_user_profile(
        UserProfileInput(id=profile.id, display_name="Sam", created_at=profile.created_at, weekly_workout_goal=3)
    )
    assert again.id == profile.id
    assert again.created_at == profile.created_at
    assert store.state.user_profile == again


async def test_notification_settings_validation(store):
    store.set_notification_settings(NotificationSettings(enabled=True, default_reminder_hour=6))
    assert store.state.notification_settings.default_reminder_hour == 6
    with pytest.raises(ValueError):
        NotificationSettings(enabled=True, default_reminder_hour=24)


async def test_log_session_assigns_fresh_id(store):
    data = WorkoutSessionCreate(started_at=T0, performed_exercises=[])
    a = store.log_workout_session(data)
    b = store.log_workout_session(data)
    assert a.id != b.id
    assert [s.id for s in store.state.workout_history] == [a.id, b.id]
    assert store.get_session(a.id) == a


async def test_start_session_missing_routine_returns_none(store):
    assert store.start_session("missing") is None


async def test_start_finish_and_log_from_routine(store):
    routine = store.create_routine(
        RoutineBase(
            name="Push",
            exercises=[RoutineExercise(exercise_id="bench", set_templates=[{"targetReps": 8, "targetWeight": 60}])],
        )
    )
    session = store.start_session(routine.id, now=T0)
    assert session.routine_id == routine.id
    logged = store.log_workout_session(session)
    assert logged.performed_exercises[0].sets[0].reps == 8
    assert store.state.workout_history[-1].id == logged.id


async def test_write_failure_is_logged_and_state_kept(caplog):
    store = WorkoutStore(FailingStorage())
    with caplog.at_level(logging.WARNING):
        routine = store.create_routine(RoutineBase(name="Still here"))
        await store.flush()
    assert store.state.routines == [routine]
    assert "Failed to save app state" in caplog.text


async def test_hydrate_missing_unreadable_and_corrupt(caplog):
    empty = WorkoutStore(InMemoryKeyValueStorage())
    assert await empty.hydrate_from_storage() is False

    broken = WorkoutStore(FailingStorage())
    assert await broken.hydrate_from_storage() is False

    corrupt = WorkoutStore(InMemoryKeyValueStorage({STORAGE_KEY_APP_STATE: "{not json"}))
    with caplog.at_level(logging.WARNING):
        assert await corrupt.hydrate_from_storage() is False
    assert corrupt.state.routines == []
    assert "Failed to hydrate app state" in caplog.text


async def test_hydrate_restores_previous_run(storage):
    first = WorkoutStore(storage)
    first.create_routine(RoutineBase(name="Legs"))
    first.log_workout_session(make_session().model_copy(update={"finished_at": None}))
    await first.flush()

    second = WorkoutStore(storage)
    assert await second.hydrate_from_storage() is True
    assert second.state == first.state


async def test_each_write_holds_state_after_its_action(store, storage):
    store.create_routine(RoutineBase(name="A"))
    store.create_routine(RoutineBase(name="B"))
    await store.flush()
    saved = json.loads(storage.items[STORAGE_KEY_APP_STATE])
    assert [r["name"] for r in saved["routines"]] == ["A", "B"]


def test_mutation_without_event_loop_still_applies(caplog):
    store = WorkoutStore(InMemoryKeyValueStorage())
    with caplog.at_level(logging.WARNING):
        store.create_routine(RoutineBase(name="Offline"))
    assert [r.name for r in store.state.routines] == ["Offline"]
    assert "not persisted" in caplog.text


async def test_remove_persisted_state(store, storage):
    store.create_routine(RoutineBase(name="A"))
    await store.flush()
    assert await store.remove_persisted_state() is True
    assert STORAGE_KEY_APP_STATE not in storage.items


async def test_stats_over_logged_history(store):
    store.log_workout_session(
        make_session(sets=[PerformedSet(reps=8, weight=60, is_completed=True)])
    )
    assert store.state.workout_history[0].performed_exercises[0].sets[0].weight == 60
