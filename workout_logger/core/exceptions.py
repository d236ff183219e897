"""Domain errors raised by the store and the session-logging helpers."""

from datetime import datetime


class NotFoundError(LookupError):
    """An update targeted an entity id that does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class SessionAlreadyFinishedError(ValueError):
    """finished_at is set once; a second finish is rejected."""

    def __init__(self, finished_at: datetime):
        self.finished_at = finished_at
        super().__init__(f"Workout session already finished at {finished_at.isoformat()}")
