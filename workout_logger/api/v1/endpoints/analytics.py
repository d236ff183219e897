"""Progress analytics computed on demand from the workout history."""

from fastapi import APIRouter, Depends

from workout_logger.api.deps import get_store
from workout_logger.schemas.session import ProgressSummary, TimeSeriesEntry, WeeklyGoalProgress
from workout_logger.services.analytics import (
    build_time_series_stats,
    summarize_progress,
    weekly_goal_progress,
)
from workout_logger.store.workout_store import WorkoutStore

router = APIRouter()


@router.get("/time-series", response_model=list[TimeSeriesEntry])
async def time_series(store: WorkoutStore = Depends(get_store)):
    """Every session oldest first with its stats."""
    return build_time_series_stats(store.state.workout_history)


@router.get("/summary", response_model=ProgressSummary)
async def summary(store: WorkoutStore = Depends(get_store)):
    """Total workouts, total volume and the volume trend."""
    return summarize_progress(store.state.workout_history)


@router.get("/weekly", response_model=WeeklyGoalProgress)
async def weekly(store: WorkoutStore = Depends(get_store)):
    """Sessions this week against the profile's weekly goal."""
    profile = store.state.user_profile
    goal = profile.weekly_workout_goal if profile else None
    return weekly_goal_progress(store.state.workout_history, goal)
