from __future__ import annotations

from pathlib import Path
import sys

import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from errors import BackendError  # noqa: E402
from persistence import AsyncObjectStore, MemoryObjectStore  # noqa: E402
from settings import Settings  # noqa: E402


class FlakyObjectStore(MemoryObjectStore):
    """
    Memory store that can be told to fail specific operations or keys.
    """

    def __init__(self) -> None:
        super().__init__()
        self.fail_put = False
        self.fail_list = False
        self.fail_get_keys: set[str] = set()
        self.put_calls = 0
        self.get_calls = 0

    def put(self, key: str, body: bytes, *, content_type: str) -> str:
        self.put_calls += 1
        if self.fail_put:
            raise BackendError("simulated write outage")
        return super().put(key, body, content_type=content_type)

    def list_keys(self) -> list[str]:
        if self.fail_list:
            raise BackendError("simulated list outage")
        return super().list_keys()

    def get(self, key: str) -> bytes:
        self.get_calls += 1
        if key in self.fail_get_keys:
            raise BackendError(f"simulated read outage for {key}")
        return super().get(key)


@pytest.fixture
def sandbox_data_dir(tmp_path: Path) -> Path:
    """
    Temp directory for the disk backend so tests never touch real ./data.
    """
    p = tmp_path / "data" / "documents"
    return p


@pytest.fixture
def flaky_store() -> FlakyObjectStore:
    return FlakyObjectStore()


@pytest.fixture
def async_store(flaky_store: FlakyObjectStore) -> AsyncObjectStore:
    return AsyncObjectStore(flaky_store)


@pytest.fixture
def memory_settings(sandbox_data_dir: Path) -> Settings:
    return Settings(storage_backend="memory", data_dir=sandbox_data_dir, retrieve_max_concurrency=4)


@pytest.fixture
def client(memory_settings: Settings, flaky_store: FlakyObjectStore):
    from fastapi.testclient import TestClient

    import app as app_module

    return TestClient(app_module.create_app(settings=memory_settings, object_store=flaky_store))
