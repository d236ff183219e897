"""Key-value storage on SQLite through async SQLAlchemy."""

from __future__ import annotations

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncEngine

from workout_logger.core.constants import STORAGE_PREFIX
from workout_logger.db.base import Base
from workout_logger.db.session import build_session_maker, session_scope
from workout_logger.models.kv_item import KeyValueItem

logger = logging.getLogger(__name__)


class SqlKeyValueStorage:
    """Stores each key as one ``kv_items`` row; keys are namespaced by ``prefix``."""

    def __init__(self, engine: AsyncEngine, prefix: str = STORAGE_PREFIX):
        self.engine = engine
        self.prefix = prefix
        self._session_maker = build_session_maker(engine)

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def init(self) -> None:
        """Create the table if this is a fresh database."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def get_item(self, key: str) -> str | None:
        async with session_scope(self._session_maker) as db:
            item = await db.get(KeyValueItem, self._key(key))
            return item.value if item else None

    async def set_item(self, key: str, value: str) -> None:
        async with session_scope(self._session_maker) as db:
            item = await db.get(KeyValueItem, self._key(key))
            if item:
                item.value = value
            else:
                db.add(KeyValueItem(key=self._key(key), value=value))
        logger.debug("Stored %d chars under %s", len(value), self._key(key))

    async def remove_item(self, key: str) -> None:
        async with session_scope(self._session_maker) as db:
            await db.execute(delete(KeyValueItem).where(KeyValueItem.key == self._key(key)))
