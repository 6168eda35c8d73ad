from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from errors import ConfigError
from persistence.paths import data_dir, documents_dir

STORAGE_BACKENDS = ("disk", "s3", "memory")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    # Storage backend
    storage_backend: str
    data_dir: Path

    # S3 (only read when storage_backend == "s3")
    s3_bucket: str = ""
    s3_prefix: str = ""
    s3_region: str = ""
    s3_endpoint_url: str = ""

    # Retrieval fan-out; None means unbounded
    retrieve_max_concurrency: int | None = 16

    # Logging / debug
    log_level: str = "INFO"
    debug_log_requests: bool = False

    # HTTP
    cors_allow_origins: tuple[str, ...] = ("*",)


def get_settings() -> Settings:
    storage_backend = os.getenv("STORAGE_BACKEND", "disk").strip().lower()
    if storage_backend not in STORAGE_BACKENDS:
        raise ConfigError(
            f"STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}, got {storage_backend!r}"
        )

    raw_data_dir = os.getenv("DATA_DIR", "").strip()
    documents_path = Path(raw_data_dir) if raw_data_dir else documents_dir(data_dir())

    s3_bucket = os.getenv("S3_BUCKET", "").strip()
    if storage_backend == "s3" and not s3_bucket:
        raise ConfigError("S3_BUCKET is required when STORAGE_BACKEND=s3")

    max_concurrency = _env_int("RETRIEVE_MAX_CONCURRENCY", 16)

    origins = tuple(
        o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
    )

    return Settings(
        storage_backend=storage_backend,
        data_dir=documents_path,
        s3_bucket=s3_bucket,
        s3_prefix=os.getenv("S3_PREFIX", "").strip().strip("/"),
        s3_region=os.getenv("S3_REGION", "").strip(),
        s3_endpoint_url=os.getenv("S3_ENDPOINT_URL", "").strip().rstrip("/"),
        retrieve_max_concurrency=max_concurrency if max_concurrency > 0 else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        debug_log_requests=_env_bool("DEBUG_LOG_REQUESTS", False),
        cors_allow_origins=origins or ("*",),
    )
