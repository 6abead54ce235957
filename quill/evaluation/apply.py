"""Call dispatch for Quill.

`try_call` is the single entry point through which a value is invoked, whether
from an Application node or from a builtin such as `apply`:
- Function values run through their closure's calling convention.
- Builtin values call their native capability directly, with no new frame.
- Every other value is rejected with CannotCallValue.
"""

from __future__ import annotations

import logging
from typing import Iterable

from quill.errors import CannotCallValue
from quill.types.values import Builtin, Function, Value

logger = logging.getLogger(__name__)


def try_call(value: Value, args: Iterable[Value]) -> Value:
    """Invoke `value` with the already-evaluated `args`."""
    match value:
        case Function(closure):
            return closure.call(args)
        case Builtin():
            logger.debug("Invoking builtin %s", value.name or value)
            return value.invoke(args)
    raise CannotCallValue("must call a function")
