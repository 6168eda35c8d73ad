from __future__ import annotations

import logging
from typing import Any

from errors import BackendError, StorageListFailed, StorageReadFailed
from json_store import parse_json_bytes
from persistence.repositories import AsyncObjectStore

from .scatter_gather import gather_bounded

logger = logging.getLogger(__name__)


class RetrieveService:
    """
    Lists the whole namespace and returns every stored document.

    Fetches run concurrently, at most `max_concurrency` at a time. A single
    unreadable or unparsable object fails the whole call; callers never see a
    partial collection.

    Large namespaces are neither paginated nor streamed: the listing and the
    concurrency bound are where that would be added.
    """

    def __init__(self, store: AsyncObjectStore, *, max_concurrency: int | None = None) -> None:
        self._store = store
        self._max_concurrency = max_concurrency

    async def retrieve_all(self) -> list[Any]:
        try:
            keys = await self._store.list_keys()
        except BackendError as e:
            logger.warning("RETRIEVE: listing %s backend failed: %s", self._store.name, e)
            raise StorageListFailed(str(e)) from e

        documents = await gather_bounded(keys, self._fetch_document, limit=self._max_concurrency)
        logger.info("RETRIEVE: returned %d documents", len(documents))
        return documents

    async def _fetch_document(self, key: str) -> Any:
        try:
            body = await self._store.get(key)
        except BackendError as e:
            logger.warning("RETRIEVE: read of %s failed: %s", key, e)
            raise StorageReadFailed(key, str(e)) from e

        try:
            return parse_json_bytes(body)
        except ValueError as e:
            logger.warning("RETRIEVE: %s is not valid JSON: %s", key, e)
            raise StorageReadFailed(key, f"stored object is not valid JSON: {e}") from e
