from __future__ import annotations

from .records import StoredRecord, new_document_id, object_key_for
from .retrieve_service import RetrieveService
from .scatter_gather import gather_bounded
from .store_service import StoreService

__all__ = [
    "StoredRecord",
    "StoreService",
    "RetrieveService",
    "gather_bounded",
    "new_document_id",
    "object_key_for",
]
