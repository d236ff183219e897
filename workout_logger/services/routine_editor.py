"""Routine editing helpers.

Pure functions over a Routine value: each returns a new routine and leaves
exercise order_index values as a contiguous 0..n-1 sequence.
"""

from __future__ import annotations

from typing import Any, TypeVar

from workout_logger.core.constants import DEFAULT_SET_COUNT, DEFAULT_TARGET_REPS
from workout_logger.core.enums import MoveDirection
from workout_logger.schemas.routine import RoutineBase, RoutineExercise, RoutineSetTemplate

R = TypeVar("R", bound=RoutineBase)


def _renumber(exercises: list[RoutineExercise]) -> list[RoutineExercise]:
    return [
        ex if ex.order_index == i else ex.model_copy(update={"order_index": i})
        for i, ex in enumerate(exercises)
    ]


def ordered_exercises(routine: RoutineBase) -> list[RoutineExercise]:
    """Exercises by order_index; ties keep list position."""
    return sorted(routine.exercises, key=lambda ex: ex.order_index)


def normalize_order(routine: R) -> R:
    """Sort by current order_index and renumber 0..n-1."""
    return routine.model_copy(update={"exercises": _renumber(ordered_exercises(routine))})


def default_set_templates(
    count: int = DEFAULT_SET_COUNT,
    target_reps: int | None = DEFAULT_TARGET_REPS,
) -> list[RoutineSetTemplate]:
    return [RoutineSetTemplate(target_reps=target_reps) for _ in range(count)]


def add_exercise(
    routine: R,
    exercise_id: str,
    set_templates: list[RoutineSetTemplate] | None = None,
    rest_seconds_between_sets: int | None = None,
) -> R:
    """Append an exercise at the end; defaults to 3 sets of 8 reps."""
    exercises = ordered_exercises(routine)
    exercises.append(
        RoutineExercise(
            exercise_id=exercise_id,
            order_index=len(exercises),
            set_templates=default_set_templates() if set_templates is None else set_templates,
            rest_seconds_between_sets=rest_seconds_between_sets,
        )
    )
    return routine.model_copy(update={"exercises": _renumber(exercises)})


def move_exercise(routine: R, index: int, direction: MoveDirection | int) -> R:
    """Swap the exercise at ``index`` with its neighbour; out of range is a no-op."""
    exercises = ordered_exercises(routine)
    target = index + int(direction)
    if not (0 <= index < len(exercises)) or not (0 <= target < len(exercises)):
        return normalize_order(routine)
    item = exercises.pop(index)
    exercises.insert(target, item)
    return routine.model_copy(update={"exercises": _renumber(exercises)})


def remove_exercise(routine: R, routine_exercise_id: str) -> R:
    exercises = [ex for ex in ordered_exercises(routine) if ex.id != routine_exercise_id]
    return routine.model_copy(update={"exercises": _renumber(exercises)})


def _replace_sets(routine: R, routine_exercise_id: str, fn) -> R:
    exercises = [
        ex.model_copy(update={"set_templates": fn(ex.set_templates)})
        if ex.id == routine_exercise_id
        else ex
        for ex in ordered_exercises(routine)
    ]
    return routine.model_copy(update={"exercises": _renumber(exercises)})


def add_set_template(
    routine: R,
    routine_exercise_id: str,
    target_reps: int | None = DEFAULT_TARGET_REPS,
) -> R:
    return _replace_sets(
        routine,
        routine_exercise_id,
        lambda sets: [*sets, RoutineSetTemplate(target_reps=target_reps)],
    )


def remove_set_template(routine: R, routine_exercise_id: str, set_id: str) -> R:
    return _replace_sets(
        routine,
        routine_exercise_id,
        lambda sets: [s for s in sets if s.id != set_id],
    )


def update_set_template(
    routine: R,
    routine_exercise_id: str,
    set_id: str,
    **changes: Any,
) -> R:
    """Patch target_reps / target_time_sec / target_weight / notes on one set.

    The patched template is validated again; bad values raise ValidationError.
    """
    patch = {k: v for k, v in changes.items() if k in RoutineSetTemplate.model_fields and k != "id"}
    return _replace_sets(
        routine,
        routine_exercise_id,
        lambda sets: [
            RoutineSetTemplate.model_validate({**s.model_dump(), **patch}) if s.id == set_id else s
            for s in sets
        ],
    )
