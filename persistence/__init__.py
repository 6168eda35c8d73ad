from __future__ import annotations

from .disk_store import DiskObjectStore
from .factory import open_object_store
from .interfaces import ObjectStore
from .memory_store import MemoryObjectStore
from .repositories import AsyncObjectStore
from .s3_store import S3ObjectStore, create_s3_client

__all__ = [
    "ObjectStore",
    "AsyncObjectStore",
    "DiskObjectStore",
    "MemoryObjectStore",
    "S3ObjectStore",
    "create_s3_client",
    "open_object_store",
]
