"""FastAPI application factory and lifespan.

The lifespan is the composition root: it builds the storage binding and the
single WorkoutStore, hydrates it, and hangs it on ``app.state.store``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workout_logger.api.v1 import api_router
from workout_logger.core.config import Settings, get_settings
from workout_logger.db.session import build_engine
from workout_logger.storage.base import KeyValueStorage
from workout_logger.storage.sql import SqlKeyValueStorage
from workout_logger.store.workout_store import WorkoutStore

logger = logging.getLogger(__name__)


def create_application(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
) -> FastAPI:
    """Build the app. Without ``storage`` the SQLite key-value store from settings is used."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: open storage, hydrate, seed; shutdown: flush pending writes."""
        sql_storage: SqlKeyValueStorage | None = None
        backend = storage
        if backend is None:
            sql_storage = SqlKeyValueStorage(build_engine(settings), prefix=settings.storage_prefix)
            await sql_storage.init()
            backend = sql_storage

        store = WorkoutStore(backend, storage_key=settings.storage_key)
        if not await store.hydrate_from_storage():
            logger.info("No stored app state; starting empty")
        if settings.seed_exercise_library:
            store.seed_exercise_library()
        app.state.store = store
        yield
        await store.flush()
        if sql_storage is not None:
            await sql_storage.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow everything in debug, localhost in dev, CORS_ORIGINS otherwise
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": "Workout Logger API"}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
