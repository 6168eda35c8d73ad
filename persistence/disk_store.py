from __future__ import annotations

import hashlib
from pathlib import Path

from errors import BackendError
from json_store import atomic_write_bytes

from .interfaces import ObjectStore

TMP_SUFFIX = ".tmp"


class DiskObjectStore(ObjectStore):
    """
    Stores each object as one file under a root directory.

    - Writes atomically (temp file, then replace); temp files are never listed.
    - Integrity tag is the MD5 hex digest of the stored bytes, matching what S3
      reports for a single-part upload.
    - The directory is created lazily on first write.
    """

    name = "disk"

    def __init__(self, root: Path):
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def put(self, key: str, body: bytes, *, content_type: str) -> str:
        path = self._path_for(key)
        try:
            atomic_write_bytes(path, body)
        except OSError as e:
            raise BackendError(f"failed to write {path}: {e}") from e
        return hashlib.md5(body, usedforsecurity=False).hexdigest()

    def list_keys(self) -> list[str]:
        if not self._root.exists():
            return []
        try:
            return sorted(
                p.name
                for p in self._root.iterdir()
                if p.is_file() and not p.name.endswith(TMP_SUFFIX)
            )
        except OSError as e:
            raise BackendError(f"failed to list {self._root}: {e}") from e

    def get(self, key: str) -> bytes:
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except OSError as e:
            raise BackendError(f"failed to read {path}: {e}") from e

    def locator(self, key: str) -> str:
        return self._path_for(key).resolve().as_uri()

    def _path_for(self, key: str) -> Path:
        # Keys are flat file names; anything else could escape the root.
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise BackendError(f"invalid object key: {key!r}")
        return self._root / key
