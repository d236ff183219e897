"""Routine endpoints: CRUD, editing the exercise list, starting a session."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from workout_logger.api.deps import get_store
from workout_logger.core.constants import DEFAULT_SET_COUNT, DEFAULT_TARGET_REPS
from workout_logger.core.enums import MoveDirection
from workout_logger.core.exceptions import NotFoundError
from workout_logger.schemas.common import DocumentModel
from workout_logger.schemas.routine import Routine, RoutineBase, RoutineExerciseView, RoutineInput
from workout_logger.schemas.session import WorkoutSessionCreate
from workout_logger.services import routine_editor
from workout_logger.store.workout_store import WorkoutStore

router = APIRouter()


class RoutineExerciseAdd(DocumentModel):
    exercise_id: str
    set_count: int = Field(DEFAULT_SET_COUNT, ge=0, le=20)
    target_reps: int | None = Field(DEFAULT_TARGET_REPS, ge=0)
    rest_seconds_between_sets: int | None = Field(None, ge=0)


def _get_or_404(store: WorkoutStore, routine_id: str) -> Routine:
    routine = store.get_routine(routine_id)
    if not routine:
        raise HTTPException(status_code=404, detail="Routine not found")
    return routine


@router.get("", response_model=list[Routine])
async def list_routines(store: WorkoutStore = Depends(get_store)):
    """All routines sorted by name."""
    return store.sorted_routines()


@router.post("", response_model=Routine, status_code=201)
async def save_routine(payload: RoutineInput, store: WorkoutStore = Depends(get_store)):
    """Create (no id) or create-or-replace under the given id."""
    return store.create_or_update_routine(payload)


@router.get("/{routine_id}", response_model=Routine)
async def get_routine(routine_id: str, store: WorkoutStore = Depends(get_store)):
    return _get_or_404(store, routine_id)


@router.put("/{routine_id}", response_model=Routine)
async def update_routine(
    routine_id: str,
    payload: RoutineBase,
    store: WorkoutStore = Depends(get_store),
):
    """Replace an existing routine."""
    try:
        return store.update_routine(routine_id, payload)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Routine not found")


@router.delete("/{routine_id}", status_code=204)
async def delete_routine(routine_id: str, store: WorkoutStore = Depends(get_store)):
    _get_or_404(store, routine_id)
    store.delete_routine(routine_id)
    return None


@router.get("/{routine_id}/exercises", response_model=list[RoutineExerciseView])
async def list_routine_exercises(routine_id: str, store: WorkoutStore = Depends(get_store)):
    """Exercises in routine order, each with its library entry (or the unknown placeholder)."""
    routine = _get_or_404(store, routine_id)
    return [
        RoutineExerciseView(routine_exercise=re, exercise=store.resolve_exercise(re.exercise_id))
        for re in routine_editor.ordered_exercises(routine)
    ]


@router.post("/{routine_id}/exercises", response_model=Routine, status_code=201)
async def add_routine_exercise(
    routine_id: str,
    payload: RoutineExerciseAdd,
    store: WorkoutStore = Depends(get_store),
):
    routine = _get_or_404(store, routine_id)
    edited = routine_editor.add_exercise(
        routine,
        payload.exercise_id,
        set_templates=routine_editor.default_set_templates(payload.set_count, payload.target_reps),
        rest_seconds_between_sets=payload.rest_seconds_between_sets,
    )
    return store.update_routine(routine_id, edited)


@router.post("/{routine_id}/exercises/{index}/move", response_model=Routine)
async def move_routine_exercise(
    routine_id: str,
    index: int,
    direction: Literal["up", "down"],
    store: WorkoutStore = Depends(get_store),
):
    """Move the exercise at position ``index`` one place up or down."""
    routine = _get_or_404(store, routine_id)
    step = MoveDirection.UP if direction == "up" else MoveDirection.DOWN
    return store.update_routine(routine_id, routine_editor.move_exercise(routine, index, step))


@router.delete("/{routine_id}/exercises/{routine_exercise_id}", response_model=Routine)
async def remove_routine_exercise(
    routine_id: str,
    routine_exercise_id: str,
    store: WorkoutStore = Depends(get_store),
):
    routine = _get_or_404(store, routine_id)
    if not any(ex.id == routine_exercise_id for ex in routine.exercises):
        raise HTTPException(status_code=404, detail="Routine exercise not found")
    return store.update_routine(routine_id, routine_editor.remove_exercise(routine, routine_exercise_id))


@router.post("/{routine_id}/start", response_model=WorkoutSessionCreate, status_code=201)
async def start_session(routine_id: str, store: WorkoutStore = Depends(get_store)):
    """In-progress session pre-filled from the routine's set targets (not saved yet)."""
    session = store.start_session(routine_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return session
