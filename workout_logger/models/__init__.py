"""ORM models - import all so Base.metadata is complete for create_all."""

from workout_logger.models.kv_item import KeyValueItem

__all__ = ["KeyValueItem"]
