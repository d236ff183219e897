"""WorkoutStore: the single in-memory app state and its action API.

Every mutating call computes the next state synchronously through the
reducer, then schedules a write of the whole document on the running event
loop without waiting for it. Write failures are logged and dropped; the
in-memory state stays the source of truth for the running process.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from pydantic import ValidationError

from workout_logger.core.constants import (
    CUSTOM_MUSCLE_GROUP,
    DEFAULT_DISPLAY_NAME,
    STORAGE_KEY_APP_STATE,
    UNKNOWN_EQUIPMENT,
    UNKNOWN_EXERCISE_ID,
    UNKNOWN_EXERCISE_NAME,
    UNKNOWN_MUSCLE_GROUP,
)
from workout_logger.core.exceptions import NotFoundError
from workout_logger.core.seed_data import BUILTIN_EXERCISES
from workout_logger.schemas.common import new_id, utcnow
from workout_logger.schemas.exercise import ExerciseBase, ExerciseDefinition, ExerciseInput
from workout_logger.schemas.profile import NotificationSettings, UserProfile, UserProfileInput
from workout_logger.schemas.routine import Routine, RoutineBase, RoutineInput
from workout_logger.schemas.session import WorkoutSession, WorkoutSessionBase, WorkoutSessionCreate
from workout_logger.schemas.state import PersistedAppState, initial_state
from workout_logger.services.routine_editor import normalize_order
from workout_logger.services.session_logging import build_session_from_routine
from workout_logger.storage.base import KeyValueStorage
from workout_logger.store.reducer import (
    Action,
    AddWorkoutSession,
    DeleteExerciseDefinition,
    DeleteRoutine,
    Hydrate,
    ResetAll,
    SetNotificationSettings,
    SetProfile,
    UpsertExerciseDefinition,
    UpsertRoutine,
    reduce,
)
from workout_logger.store.transfer import export_state, import_state

logger = logging.getLogger(__name__)


class WorkoutStore:
    """Owns the app state. Built once by the composition root and shared.

    ``state`` is a read-only snapshot; change it only through the methods here.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = STORAGE_KEY_APP_STATE,
        state: PersistedAppState | None = None,
    ):
        self.storage = storage
        self.storage_key = storage_key
        self._state = state or initial_state()
        self._pending: set[asyncio.Task] = set()

    @property
    def state(self) -> PersistedAppState:
        return self._state

    def dispatch(self, action: Action) -> PersistedAppState:
        """Apply one action in memory (no persistence)."""
        self._state = reduce(self._state, action)
        return self._state

    def _commit(self, action: Action) -> None:
        self.dispatch(action)
        self._schedule_save()

    # ── Persistence ──────────────────────────────────────────────────────

    def _schedule_save(self) -> None:
        text = export_state(self._state)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop; app state change not persisted")
            return
        task = loop.create_task(self._write(text))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _write(self, text: str) -> bool:
        try:
            await self.storage.set_item(self.storage_key, text)
            return True
        except Exception as e:
            logger.warning("Failed to save app state: %s", e)
            return False

    async def hydrate_from_storage(self) -> bool:
        """Load the stored document. Absent or unreadable: keep current state."""
        try:
            text = await self.storage.get_item(self.storage_key)
        except Exception as e:
            logger.warning("Failed to read app state: %s", e)
            return False
        if not text:
            return False
        try:
            loaded = import_state(text)
        except ValidationError as e:
            logger.warning("Failed to hydrate app state: %s", e)
            return False
        self.dispatch(Hydrate(state=loaded))
        return True

    async def save_to_storage(self) -> bool:
        """Write the current state now and wait for it."""
        return await self._write(export_state(self._state))

    async def flush(self) -> None:
        """Wait for every write scheduled so far."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def remove_persisted_state(self) -> bool:
        try:
            await self.storage.remove_item(self.storage_key)
            return True
        except Exception as e:
            logger.warning("Failed to remove app state: %s", e)
            return False

    # ── Profile & settings ───────────────────────────────────────────────

    def set_user_profile(self, data: UserProfileInput) -> UserProfile:
        profile = UserProfile.model_validate(
            {
                **data.model_dump(exclude={"id", "created_at", "display_name"}),
                "id": data.id or new_id(),
                "display_name": data.display_name.strip() or DEFAULT_DISPLAY_NAME,
                "created_at": data.created_at or utcnow(),
            }
        )
        self._commit(SetProfile(profile=profile))
        return profile

    def set_notification_settings(self, settings: NotificationSettings) -> NotificationSettings:
        self._commit(SetNotificationSettings(settings=settings))
        return settings

    # ── Routines ─────────────────────────────────────────────────────────

    def get_routine(self, routine_id: str) -> Routine | None:
        return next((r for r in self._state.routines if r.id == routine_id), None)

    def sorted_routines(self) -> list[Routine]:
        return sorted(self._state.routines, key=lambda r: r.name.casefold())

    @staticmethod
    def _build_routine(data: RoutineBase, routine_id: str) -> Routine:
        routine = Routine.model_validate({**data.model_dump(exclude={"id"}), "id": routine_id})
        return normalize_order(routine)

    def create_routine(self, data: RoutineBase) -> Routine:
        """Always creates, with a fresh id."""
        routine = self._build_routine(data, new_id())
        self._commit(UpsertRoutine(routine=routine))
        return routine

    def update_routine(self, routine_id: str, data: RoutineBase) -> Routine:
        if self.get_routine(routine_id) is None:
            raise NotFoundError("Routine", routine_id)
        routine = self._build_routine(data, routine_id)
        self._commit(UpsertRoutine(routine=routine))
        return routine

    def create_or_update_routine(self, data: RoutineInput) -> Routine:
        """No id: create. With id: replace that routine, or insert it under that id."""
        if data.id is None:
            return self.create_routine(data)
        routine = self._build_routine(data, data.id)
        self._commit(UpsertRoutine(routine=routine))
        return routine

    def delete_routine(self, routine_id: str) -> None:
        self._commit(DeleteRoutine(routine_id=routine_id))

    # ── Exercise library ─────────────────────────────────────────────────

    def get_exercise(self, exercise_id: str) -> ExerciseDefinition | None:
        return next((e for e in self._state.exercise_library if e.id == exercise_id), None)

    def resolve_exercise(self, exercise_id: str) -> ExerciseDefinition:
        """Library entry, or an "Unknown exercise" placeholder for dangling ids."""
        found = self.get_exercise(exercise_id)
        if found is not None:
            return found
        return ExerciseDefinition(
            id=exercise_id or UNKNOWN_EXERCISE_ID,
            name=UNKNOWN_EXERCISE_NAME,
            primary_muscle_group=UNKNOWN_MUSCLE_GROUP,
            is_custom=False,
        )

    def search_exercises(self, query: str = "") -> list[ExerciseDefinition]:
        needle = query.strip().casefold()
        return [e for e in self._state.exercise_library if needle in e.name.casefold()]

    def create_exercise(self, data: ExerciseBase) -> ExerciseDefinition:
        exercise = ExerciseDefinition.model_validate({**data.model_dump(exclude={"id"}), "id": new_id()})
        self._commit(UpsertExerciseDefinition(exercise=exercise))
        return exercise

    def update_exercise(self, exercise_id: str, data: ExerciseBase) -> ExerciseDefinition:
        if self.get_exercise(exercise_id) is None:
            raise NotFoundError("Exercise", exercise_id)
        exercise = ExerciseDefinition.model_validate({**data.model_dump(exclude={"id"}), "id": exercise_id})
        self._commit(UpsertExerciseDefinition(exercise=exercise))
        return exercise

    def upsert_exercise(self, data: ExerciseInput) -> ExerciseDefinition:
        if data.id is None:
            return self.create_exercise(data)
        exercise = ExerciseDefinition.model_validate(data.model_dump())
        self._commit(UpsertExerciseDefinition(exercise=exercise))
        return exercise

    def create_custom_exercise(self, name: str) -> ExerciseDefinition:
        return self.create_exercise(
            ExerciseBase(
                name=name.strip(),
                primary_muscle_group=CUSTOM_MUSCLE_GROUP,
                equipment=UNKNOWN_EQUIPMENT,
                is_custom=True,
            )
        )

    def delete_exercise(self, exercise_id: str) -> None:
        """Routines and sessions referencing it are left as they are."""
        self._commit(DeleteExerciseDefinition(exercise_id=exercise_id))

    def seed_exercise_library(self) -> int:
        """Add the built-in exercises if the library is empty. Returns how many were added."""
        if self._state.exercise_library:
            return 0
        for entry in BUILTIN_EXERCISES:
            exercise = ExerciseDefinition.model_validate({**entry, "id": new_id(), "is_custom": False})
            self.dispatch(UpsertExerciseDefinition(exercise=exercise))
        self._schedule_save()
        logger.info("Seeded exercise library with %d built-in exercises", len(BUILTIN_EXERCISES))
        return len(BUILTIN_EXERCISES)

    # ── Sessions ─────────────────────────────────────────────────────────

    def get_session(self, session_id: str) -> WorkoutSession | None:
        return next((s for s in self._state.workout_history if s.id == session_id), None)

    def start_session(
        self,
        routine_id: str,
        now: datetime | None = None,
    ) -> WorkoutSessionCreate | None:
        """In-progress session for a routine; None when the routine does not exist."""
        routine = self.get_routine(routine_id)
        if routine is None:
            return None
        return build_session_from_routine(routine, now)

    def log_workout_session(self, data: WorkoutSessionBase) -> WorkoutSession:
        """Append to history under a fresh id. Sessions are never updated afterwards."""
        session = WorkoutSession.model_validate({**data.model_dump(exclude={"id"}), "id": new_id()})
        self._commit(AddWorkoutSession(session=session))
        return session

    # ── Whole document ───────────────────────────────────────────────────

    def export_all_data(self) -> str:
        return export_state(self._state)

    def import_all_data(self, text: str) -> bool:
        """Replace the whole state with ``text``. On parse failure nothing changes."""
        try:
            loaded = import_state(text)
        except ValidationError as e:
            logger.warning("Failed to import data: %s", e)
            return False
        self._commit(Hydrate(state=loaded))
        return True

    def reset_all(self) -> None:
        self._commit(ResetAll())
