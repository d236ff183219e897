"""Training analytics: per-session stats, chronological time series, progress.

Volume is weight x reps over completed sets. Everything here is computed on
demand from the session history and never cached or persisted.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from workout_logger.core.constants import RECENT_SESSIONS_LIMIT
from workout_logger.schemas.common import utcnow
from workout_logger.schemas.session import (
    PerformedSet,
    ProgressSummary,
    SessionStats,
    TimeSeriesEntry,
    VolumePoint,
    WeeklyGoalProgress,
    WorkoutSession,
    WorkoutSessionBase,
)


def volume_for_set(performed: PerformedSet) -> float:
    """weight * reps for a completed set with both values; 0 otherwise."""
    if not performed.is_completed:
        return 0.0
    if performed.weight is None or performed.reps is None:
        return 0.0
    return performed.weight * performed.reps


def compute_session_stats(session: WorkoutSessionBase) -> SessionStats:
    """
    Totals over completed sets only. Reps without a weight still count toward
    total_reps. Duration (whole minutes, rounded) needs both timestamps and is
    independent of set completion.
    """
    completed = [
        s for ex in session.performed_exercises for s in ex.sets if s.is_completed
    ]
    duration_minutes: int | None = None
    if session.started_at is not None and session.finished_at is not None:
        elapsed = (session.finished_at - session.started_at).total_seconds()
        # half-up, so 2.5 min reads as 3
        duration_minutes = math.floor(elapsed / 60 + 0.5)
    return SessionStats(
        total_sets=len(completed),
        total_reps=sum(s.reps or 0 for s in completed),
        total_volume=sum(volume_for_set(s) for s in completed),
        duration_minutes=duration_minutes,
    )


def build_time_series_stats(sessions: Iterable[WorkoutSession]) -> list[TimeSeriesEntry]:
    """Oldest first, each session paired with its stats. The input is not modified."""
    # sorted() is stable: sessions sharing a start time keep their input order
    ordered = sorted(sessions, key=lambda s: s.started_at)
    return [TimeSeriesEntry(session=s, stats=compute_session_stats(s)) for s in ordered]


def summarize_progress(sessions: Sequence[WorkoutSession]) -> ProgressSummary:
    """Workout count, all-time volume and the volume trend for charts."""
    series = build_time_series_stats(sessions)
    return ProgressSummary(
        total_workouts=len(sessions),
        total_volume=sum(entry.stats.total_volume for entry in series),
        volume_by_date=[
            VolumePoint(started_at=entry.session.started_at, volume=entry.stats.total_volume)
            for entry in series
        ],
    )


def recent_sessions(
    sessions: Iterable[WorkoutSession],
    limit: int = RECENT_SESSIONS_LIMIT,
) -> list[WorkoutSession]:
    """Newest first, at most ``limit`` sessions."""
    ordered = sorted(sessions, key=lambda s: s.started_at, reverse=True)
    return ordered[: max(limit, 0)]


def week_start(now: datetime) -> datetime:
    """Monday 00:00 of the week containing ``now`` (same tzinfo)."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=midnight.weekday())


def weekly_goal_progress(
    sessions: Iterable[WorkoutSession],
    goal: int | None,
    now: datetime | None = None,
) -> WeeklyGoalProgress:
    """Sessions started this week (Monday start) against the weekly goal, if any."""
    now = now or utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    start = week_start(now)
    end = start + timedelta(days=7)
    completed = sum(1 for s in sessions if start <= s.started_at < end)
    if goal is None:
        return WeeklyGoalProgress(goal=None, completed=completed, remaining=None)
    return WeeklyGoalProgress(goal=goal, completed=completed, remaining=max(goal - completed, 0))
