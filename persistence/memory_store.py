from __future__ import annotations

import hashlib
import threading

from errors import BackendError

from .interfaces import ObjectStore


class MemoryObjectStore(ObjectStore):
    """
    Process-local object store. Nothing survives a restart; meant for local
    development and tests.
    """

    name = "memory"

    def __init__(self, namespace: str = "documents") -> None:
        self._namespace = namespace
        self._lock = threading.Lock()
        self._objects: dict[str, bytes] = {}
        self._content_types: dict[str, str] = {}

    def put(self, key: str, body: bytes, *, content_type: str) -> str:
        with self._lock:
            self._objects[key] = bytes(body)
            self._content_types[key] = content_type
        return hashlib.md5(body, usedforsecurity=False).hexdigest()

    def list_keys(self) -> list[str]:
        with self._lock:
            return list(self._objects)

    def get(self, key: str) -> bytes:
        with self._lock:
            body = self._objects.get(key)
        if body is None:
            raise BackendError(f"no such key: {key}")
        return body

    def locator(self, key: str) -> str:
        return f"memory://{self._namespace}/{key}"

    def content_type(self, key: str) -> str | None:
        with self._lock:
            return self._content_types.get(key)
