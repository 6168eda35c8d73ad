from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

JSON_CONTENT_TYPE = "application/json"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(literal: str) -> float:
    value = float(literal)
    # 1e400 is legal JSON but overflows to inf, which cannot be written back out.
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    return value


def parse_json_bytes(raw: bytes) -> Any:
    """
    Parse a UTF-8 JSON document.

    Raises ValueError for empty input, invalid UTF-8, malformed JSON, the
    non-standard NaN/Infinity literals, numbers that overflow a float, and
    nesting deeper than the interpreter can decode.
    """
    text = raw.decode("utf-8")
    if not text.strip():
        raise ValueError("empty body is not valid JSON")
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except RecursionError as e:
        raise ValueError("JSON nesting too deep") from e


def canonical_json_bytes(payload: Any) -> bytes:
    """
    Serialize to canonical JSON: sorted keys, compact separators, UTF-8.
    """
    try:
        text = json.dumps(
            payload,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except RecursionError as e:
        raise ValueError("JSON nesting too deep") from e
    return text.encode("utf-8")


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Atomically write bytes to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("wb") as f:
        f.write(data)
    tmp_path.replace(path)
