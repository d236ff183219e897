"""Backup and restore of the whole app state."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from workout_logger.api.deps import get_store
from workout_logger.store.workout_store import WorkoutStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/export")
async def export_data(store: WorkoutStore = Depends(get_store)):
    """The full app-state document as pretty-printed JSON."""
    return Response(content=store.export_all_data(), media_type="application/json")


@router.post("/import", status_code=204)
async def import_data(request: Request, store: WorkoutStore = Depends(get_store)):
    """Replace everything with the posted document. Nothing changes if it does not parse."""
    try:
        body = (await request.body()).decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=422, detail="Import document is not valid UTF-8")
    if not body.strip():
        raise HTTPException(status_code=422, detail="Empty import document")
    if not store.import_all_data(body):
        raise HTTPException(status_code=422, detail="Import document could not be parsed")
    logger.info("Imported app state (%d chars)", len(body))
    return None


@router.post("/reset", status_code=204)
async def reset_data(store: WorkoutStore = Depends(get_store)):
    """Back to the empty default state."""
    store.reset_all()
    return None
