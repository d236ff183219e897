"""State store package: reducer, import/export and the action API."""

from workout_logger.store.reducer import reduce
from workout_logger.store.transfer import export_state, import_state
from workout_logger.store.workout_store import WorkoutStore

__all__ = ["WorkoutStore", "export_state", "import_state", "reduce"]
