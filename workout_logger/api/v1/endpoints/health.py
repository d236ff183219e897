"""Health check endpoint for load balancers and monitoring."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from workout_logger.api.deps import get_store
from workout_logger.store.workout_store import WorkoutStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check. Optionally includes built_at if BACKEND_BUILT_AT env is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(store: WorkoutStore = Depends(get_store)):
    """Readiness: app + storage connectivity."""
    try:
        await store.storage.get_item(store.storage_key)
        return {"status": "ok", "storage": "connected"}
    except Exception as e:
        logger.exception("Storage readiness check failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "storage": str(e)},
        )
