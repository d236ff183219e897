"""Singleton user profile and reminder settings."""

from typing import Optional

from fastapi import APIRouter, Depends

from workout_logger.api.deps import get_store
from workout_logger.schemas.profile import NotificationSettings, UserProfile, UserProfileInput
from workout_logger.store.workout_store import WorkoutStore

router = APIRouter()


@router.get("", response_model=Optional[UserProfile])
async def get_profile(store: WorkoutStore = Depends(get_store)):
    """The profile, or null before one has been saved."""
    return store.state.user_profile


@router.put("", response_model=UserProfile)
async def put_profile(payload: UserProfileInput, store: WorkoutStore = Depends(get_store)):
    """Create or replace the profile (keeps created_at when the caller sends it)."""
    return store.set_user_profile(payload)


@router.get("/notifications", response_model=NotificationSettings)
async def get_notifications(store: WorkoutStore = Depends(get_store)):
    return store.state.notification_settings


@router.put("/notifications", response_model=NotificationSettings)
async def put_notifications(payload: NotificationSettings, store: WorkoutStore = Depends(get_store)):
    """Replace reminder settings. Scheduling device notifications is up to the client."""
    return store.set_notification_settings(payload)
