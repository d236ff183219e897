"""Exercise library endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from workout_logger.api.deps import get_store
from workout_logger.core.exceptions import NotFoundError
from workout_logger.schemas.common import DocumentModel
from workout_logger.schemas.exercise import ExerciseBase, ExerciseDefinition, ExerciseInput
from workout_logger.store.workout_store import WorkoutStore

router = APIRouter()


class CustomExerciseCreate(DocumentModel):
    name: str = Field(..., min_length=1, max_length=255)


@router.get("", response_model=list[ExerciseDefinition])
async def list_exercises(
    store: WorkoutStore = Depends(get_store),
    q: str = "",
):
    """Library entries whose name contains ``q`` (case-insensitive)."""
    return store.search_exercises(q)


@router.post("", response_model=ExerciseDefinition, status_code=201)
async def upsert_exercise(payload: ExerciseInput, store: WorkoutStore = Depends(get_store)):
    """Create (no id) or create-or-replace under the given id."""
    return store.upsert_exercise(payload)


@router.post("/custom", response_model=ExerciseDefinition, status_code=201)
async def create_custom_exercise(payload: CustomExerciseCreate, store: WorkoutStore = Depends(get_store)):
    """Quick-add a user exercise by name only."""
    return store.create_custom_exercise(payload.name)


@router.post("/seed")
async def seed_library(store: WorkoutStore = Depends(get_store)):
    """Add built-in exercises when the library is empty."""
    return {"added": store.seed_exercise_library()}


@router.get("/{exercise_id}", response_model=ExerciseDefinition)
async def get_exercise(exercise_id: str, store: WorkoutStore = Depends(get_store)):
    exercise = store.get_exercise(exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.put("/{exercise_id}", response_model=ExerciseDefinition)
async def update_exercise(
    exercise_id: str,
    payload: ExerciseBase,
    store: WorkoutStore = Depends(get_store),
):
    try:
        return store.update_exercise(exercise_id, payload)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Exercise not found")


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(exercise_id: str, store: WorkoutStore = Depends(get_store)):
    """Delete from the library. Routines and sessions keep their references."""
    if not store.get_exercise(exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    store.delete_exercise(exercise_id)
    return None
