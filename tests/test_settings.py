from __future__ import annotations

from pathlib import Path

import pytest

from errors import ConfigError
from persistence import DiskObjectStore, MemoryObjectStore, S3ObjectStore, open_object_store
from settings import Settings, get_settings

ENV_VARS = (
    "STORAGE_BACKEND",
    "DATA_DIR",
    "S3_BUCKET",
    "S3_PREFIX",
    "S3_REGION",
    "S3_ENDPOINT_URL",
    "RETRIEVE_MAX_CONCURRENCY",
    "LOG_LEVEL",
    "DEBUG_LOG_REQUESTS",
    "CORS_ALLOW_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = get_settings()
    assert s.storage_backend == "disk"
    assert s.data_dir.parts[-2:] == ("data", "documents")
    assert s.retrieve_max_concurrency == 16
    assert s.log_level == "INFO"
    assert s.debug_log_requests is False
    assert s.cors_allow_origins == ("*",)


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE_BACKEND", "S3")
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("S3_BUCKET", "my-bucket")
    monkeypatch.setenv("S3_PREFIX", "/documents/")
    monkeypatch.setenv("S3_ENDPOINT_URL", "http://localhost:4566/")
    monkeypatch.setenv("RETRIEVE_MAX_CONCURRENCY", "0")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEBUG_LOG_REQUESTS", "yes")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")

    s = get_settings()
    assert s.storage_backend == "s3"
    assert s.data_dir == Path(tmp_path)
    assert s.s3_bucket == "my-bucket"
    assert s.s3_prefix == "documents"
    assert s.s3_endpoint_url == "http://localhost:4566"
    assert s.retrieve_max_concurrency is None
    assert s.log_level == "DEBUG"
    assert s.debug_log_requests is True
    assert s.cors_allow_origins == ("https://a.example", "https://b.example")


@pytest.mark.parametrize(
    "env",
    [
        {"STORAGE_BACKEND": "ftp"},
        {"STORAGE_BACKEND": "s3"},
        {"RETRIEVE_MAX_CONCURRENCY": "lots"},
    ],
)
def test_invalid_config(monkeypatch, env):
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    with pytest.raises(ConfigError):
        get_settings()


def test_open_object_store_selects_backend(tmp_path, monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")

    assert isinstance(open_object_store(Settings(storage_backend="disk", data_dir=tmp_path)), DiskObjectStore)
    assert isinstance(open_object_store(Settings(storage_backend="memory", data_dir=tmp_path)), MemoryObjectStore)
    s3 = open_object_store(
        Settings(storage_backend="s3", data_dir=tmp_path, s3_bucket="b", s3_region="us-east-1")
    )
    assert isinstance(s3, S3ObjectStore)

    with pytest.raises(ConfigError):
        open_object_store(Settings(storage_backend="s3", data_dir=tmp_path))
    with pytest.raises(ConfigError):
        open_object_store(Settings(storage_backend="tape", data_dir=tmp_path))
