"""Key-value storage port consumed by the workout store."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """Async text storage by key. Implementations must return exactly the
    text last written for a key, or None when nothing is stored."""

    async def get_item(self, key: str) -> str | None: ...

    async def set_item(self, key: str, value: str) -> None: ...

    async def remove_item(self, key: str) -> None: ...
