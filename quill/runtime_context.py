from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from quill.config import get_max_call_depth
from quill.errors import RecursionDepthExceeded

# Nested evaluation frames (applications and closure activations) active in
# this context, and the limit fixed when the outermost frame was entered.
_call_depth: ContextVar[int] = ContextVar("quill_call_depth", default=0)
_call_limit: ContextVar[int] = ContextVar("quill_call_limit", default=0)


def get_call_depth() -> int:
    return _call_depth.get()


@contextmanager
def call_frame() -> Iterator[int]:
    """Account for one nested evaluation frame; raises before entering past the limit.

    The limit is read from the configuration once, on the outermost frame. If the
    host stack still runs out, the outermost frame reports it as
    RecursionDepthExceeded.
    """
    depth = _call_depth.get() + 1
    if depth == 1:
        limit_token = _call_limit.set(get_max_call_depth())
    limit = _call_limit.get()
    if depth > limit:
        raise RecursionDepthExceeded(limit)
    token = _call_depth.set(depth)
    try:
        yield depth
    except RecursionError as exc:
        if depth > 1:
            raise
        raise RecursionDepthExceeded(limit) from exc
    finally:
        _call_depth.reset(token)
        if depth == 1:
            _call_limit.reset(limit_token)
