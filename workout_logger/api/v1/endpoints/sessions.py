"""Workout history endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from workout_logger.api.deps import get_store
from workout_logger.core.exceptions import SessionAlreadyFinishedError
from workout_logger.schemas.session import SessionStats, WorkoutSession, WorkoutSessionCreate
from workout_logger.services.analytics import compute_session_stats, recent_sessions
from workout_logger.services.session_logging import finish_session
from workout_logger.store.workout_store import WorkoutStore

router = APIRouter()


@router.get("", response_model=list[WorkoutSession])
async def list_sessions(
    store: WorkoutStore = Depends(get_store),
    limit: int = Query(50, ge=1, le=1000),
):
    """Newest first."""
    return recent_sessions(store.state.workout_history, limit=limit)


@router.post("", response_model=WorkoutSession, status_code=201)
async def log_session(payload: WorkoutSessionCreate, store: WorkoutStore = Depends(get_store)):
    """Add a session to history as sent (finished or not)."""
    return store.log_workout_session(payload)


@router.post("/finish", response_model=WorkoutSession, status_code=201)
async def finish_and_log_session(payload: WorkoutSessionCreate, store: WorkoutStore = Depends(get_store)):
    """Stamp finished_at now and add the session to history."""
    try:
        finished = finish_session(payload)
    except SessionAlreadyFinishedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return store.log_workout_session(finished)


@router.post("/preview-stats", response_model=SessionStats)
async def preview_stats(payload: WorkoutSessionCreate):
    """Stats for a session still being logged."""
    return compute_session_stats(payload)


@router.get("/{session_id}", response_model=WorkoutSession)
async def get_session(session_id: str, store: WorkoutStore = Depends(get_store)):
    session = store.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Workout session not found")
    return session


@router.get("/{session_id}/stats", response_model=SessionStats)
async def get_session_stats(session_id: str, store: WorkoutStore = Depends(get_store)):
    session = store.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Workout session not found")
    return compute_session_stats(session)
