from __future__ import annotations

import asyncio

from .interfaces import ObjectStore


class AsyncObjectStore:
    """
    Async wrapper around any synchronous ObjectStore.
    Uses asyncio.to_thread to avoid blocking the event loop on backend I/O.
    """

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    @property
    def name(self) -> str:
        return self._store.name

    async def put(self, key: str, body: bytes, *, content_type: str) -> str:
        return await asyncio.to_thread(self._store.put, key, body, content_type=content_type)

    async def list_keys(self) -> list[str]:
        return await asyncio.to_thread(self._store.list_keys)

    async def get(self, key: str) -> bytes:
        return await asyncio.to_thread(self._store.get, key)

    def locator(self, key: str) -> str:
        return self._store.locator(key)
