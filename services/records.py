from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict

OBJECT_KEY_SUFFIX = ".json"


class StoredRecord(BaseModel):
    """
    A persisted document plus its generated id and backend metadata.

    Stored on the backend as one object named "<id>.json" holding the
    canonical JSON of `payload`.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    payload: Any
    integrity_tag: str
    locator: str

    @property
    def key(self) -> str:
        return object_key_for(self.id)


def new_document_id() -> str:
    return str(uuid.uuid4())


def object_key_for(document_id: str) -> str:
    return f"{document_id}{OBJECT_KEY_SUFFIX}"
