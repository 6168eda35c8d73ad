from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errors import ConfigError

from .disk_store import DiskObjectStore
from .interfaces import ObjectStore
from .memory_store import MemoryObjectStore
from .s3_store import S3ObjectStore, create_s3_client

if TYPE_CHECKING:
    from settings import Settings

logger = logging.getLogger(__name__)


def open_object_store(settings: Settings) -> ObjectStore:
    """
    Build the backend selected by settings.storage_backend.
    """
    backend = settings.storage_backend
    if backend == "disk":
        logger.info("Using disk object store at %s", settings.data_dir)
        return DiskObjectStore(settings.data_dir)
    if backend == "s3":
        if not settings.s3_bucket:
            raise ConfigError("S3 backend requires a bucket name")
        logger.info("Using S3 object store s3://%s/%s", settings.s3_bucket, settings.s3_prefix)
        return S3ObjectStore(
            create_s3_client(settings),
            settings.s3_bucket,
            prefix=settings.s3_prefix,
            region=settings.s3_region,
            endpoint_url=settings.s3_endpoint_url,
        )
    if backend == "memory":
        logger.warning("Using in-memory object store; documents will not survive a restart")
        return MemoryObjectStore()
    raise ConfigError(f"unknown storage backend: {backend!r}")
