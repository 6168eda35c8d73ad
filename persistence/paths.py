from __future__ import annotations

from pathlib import Path


def project_root() -> Path:
    # persistence/paths.py -> persistence -> project root
    return Path(__file__).resolve().parents[1]


def data_dir() -> Path:
    return project_root() / "data"


def documents_dir(data_dir: Path) -> Path:
    return data_dir / "documents"
