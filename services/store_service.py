from __future__ import annotations

import logging
from typing import Callable

from errors import BackendError, InvalidPayload, StorageWriteFailed
from json_store import JSON_CONTENT_TYPE, canonical_json_bytes, parse_json_bytes
from persistence.repositories import AsyncObjectStore

from .records import StoredRecord, new_document_id, object_key_for

logger = logging.getLogger(__name__)


class StoreService:
    """
    Accepts a raw JSON body, assigns it a fresh id, and writes it to the backend.

    There is no existence check before the write: ids come from uuid4, so a
    collision is not a case this service handles.
    """

    def __init__(self, store: AsyncObjectStore, *, id_factory: Callable[[], str] = new_document_id) -> None:
        self._store = store
        self._id_factory = id_factory

    async def store(self, raw_body: bytes) -> StoredRecord:
        try:
            payload = parse_json_bytes(raw_body)
            body = canonical_json_bytes(payload)
        except ValueError as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors.
            raise InvalidPayload(f"request body is not valid JSON: {e}") from e

        document_id = self._id_factory()
        key = object_key_for(document_id)

        try:
            integrity_tag = await self._store.put(key, body, content_type=JSON_CONTENT_TYPE)
        except BackendError as e:
            logger.warning("STORE: write of %s to %s backend failed: %s", key, self._store.name, e)
            raise StorageWriteFailed(str(e)) from e

        logger.info("STORE: wrote %s (%d bytes)", key, len(body))
        return StoredRecord(
            id=document_id,
            payload=payload,
            integrity_tag=integrity_tag,
            locator=self._store.locator(key),
        )
