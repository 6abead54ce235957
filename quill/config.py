from __future__ import annotations
import os

from quill.errors import QuillConfigError


DEFAULT_MAX_CALL_DEPTH = 128


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise QuillConfigError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise QuillConfigError(f"{var} must be positive, got {value}")
    return value


def get_max_call_depth() -> int:
    return int_from_env('QUILL_MAX_CALL_DEPTH', DEFAULT_MAX_CALL_DEPTH)
