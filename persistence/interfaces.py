from __future__ import annotations

from typing import Protocol


class ObjectStore(Protocol):
    """
    Minimal blob-store interface: flat keys in one namespace, bytes in, bytes out.

    Implementations raise errors.BackendError for any storage failure.
    """

    name: str

    def put(self, key: str, body: bytes, *, content_type: str) -> str:
        """Persist body under key and return the backend's integrity tag."""
        ...

    def list_keys(self) -> list[str]:
        """Return every key in the namespace, in backend listing order."""
        ...

    def get(self, key: str) -> bytes:
        """Return the stored body for key."""
        ...

    def locator(self, key: str) -> str:
        """Return a stable reference that addresses the stored object."""
        ...
