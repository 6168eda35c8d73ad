"""Document store exception hierarchy.

Service-level errors carry a stable ``kind`` that the HTTP layer maps to a
status code. Backends raise ``BackendError``; the services convert it into
the matching storage error before it reaches a client.
"""

from __future__ import annotations


class DocumentStoreError(Exception):
    """Base exception for all failures surfaced to clients."""

    kind = "DocumentStoreError"

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class InvalidPayload(DocumentStoreError):
    """Raised when a submitted body is not valid JSON."""

    kind = "InvalidPayload"


class StorageWriteFailed(DocumentStoreError):
    """Raised when the backend rejects a document write."""

    kind = "StorageWriteFailed"


class StorageListFailed(DocumentStoreError):
    """Raised when the backend namespace cannot be enumerated."""

    kind = "StorageListFailed"


class StorageReadFailed(DocumentStoreError):
    """Raised when a stored object cannot be fetched or parsed."""

    kind = "StorageReadFailed"

    def __init__(self, key: str, details: str) -> None:
        super().__init__(f"{key}: {details}")
        self.key = key


class BackendError(Exception):
    """Raised by object store backends for any storage-level failure."""


class ConfigError(Exception):
    """Raised for invalid runtime configuration."""


# Client input problems are 4xx; anything the backend did wrong is 5xx.
ERROR_STATUS_CODES: dict[str, int] = {
    InvalidPayload.kind: 400,
    StorageWriteFailed.kind: 502,
    StorageListFailed.kind: 502,
    StorageReadFailed.kind: 502,
}


def status_code_for(error: DocumentStoreError) -> int:
    return ERROR_STATUS_CODES.get(error.kind, 500)
