"""Request dependencies shared by the v1 routers."""

from fastapi import Request

from workout_logger.store.workout_store import WorkoutStore


def get_store(request: Request) -> WorkoutStore:
    """The store built by the application lifespan."""
    return request.app.state.store
