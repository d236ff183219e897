"""Storage package: the key-value port and its bindings."""

from workout_logger.storage.base import KeyValueStorage
from workout_logger.storage.memory import InMemoryKeyValueStorage
from workout_logger.storage.sql import SqlKeyValueStorage

__all__ = ["InMemoryKeyValueStorage", "KeyValueStorage", "SqlKeyValueStorage"]
