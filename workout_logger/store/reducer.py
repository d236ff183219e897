"""Actions and the pure state transition function.

``reduce(state, action)`` never mutates its input and returns the input
unchanged for any action it does not know.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from workout_logger.schemas.exercise import ExerciseDefinition
from workout_logger.schemas.profile import NotificationSettings, UserProfile
from workout_logger.schemas.routine import Routine
from workout_logger.schemas.session import WorkoutSession
from workout_logger.schemas.state import PersistedAppState, initial_state


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class Hydrate(Action):
    state: PersistedAppState


class SetProfile(Action):
    profile: UserProfile


class UpsertRoutine(Action):
    routine: Routine


class DeleteRoutine(Action):
    routine_id: str


class AddWorkoutSession(Action):
    session: WorkoutSession


class UpsertExerciseDefinition(Action):
    exercise: ExerciseDefinition


class DeleteExerciseDefinition(Action):
    exercise_id: str


class SetNotificationSettings(Action):
    settings: NotificationSettings


class ResetAll(Action):
    pass


T = TypeVar("T", Routine, ExerciseDefinition)


def _upsert(items: list[T], item: T) -> list[T]:
    """Replace the first entry with the same id in place, else append."""
    for i, existing in enumerate(items):
        if existing.id == item.id:
            return [*items[:i], item, *items[i + 1 :]]
    return [*items, item]


def reduce(state: PersistedAppState, action: Action) -> PersistedAppState:
    if isinstance(action, Hydrate):
        return action.state
    if isinstance(action, SetProfile):
        return state.model_copy(update={"user_profile": action.profile})
    if isinstance(action, UpsertRoutine):
        return state.model_copy(update={"routines": _upsert(state.routines, action.routine)})
    if isinstance(action, DeleteRoutine):
        routines = [r for r in state.routines if r.id != action.routine_id]
        return state.model_copy(update={"routines": routines})
    if isinstance(action, AddWorkoutSession):
        return state.model_copy(update={"workout_history": [*state.workout_history, action.session]})
    if isinstance(action, UpsertExerciseDefinition):
        library = _upsert(state.exercise_library, action.exercise)
        return state.model_copy(update={"exercise_library": library})
    if isinstance(action, DeleteExerciseDefinition):
        # No cascade: routines and sessions keep their (now dangling) references
        library = [e for e in state.exercise_library if e.id != action.exercise_id]
        return state.model_copy(update={"exercise_library": library})
    if isinstance(action, SetNotificationSettings):
        return state.model_copy(update={"notification_settings": action.settings})
    if isinstance(action, ResetAll):
        return initial_state()
    return state
