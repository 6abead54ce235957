# Core type aliases for Quill's data model.
# Runtime values are the frozen dataclasses in quill.types.values; expressions
# and statements live in quill.types.expressions. Both variant sets are closed.
#
# Naming guidance:
# - QuillValue: use in evaluator/runtime code to denote evaluated values.
# - NativeFn:   the signature a Builtin wraps (argument tuple in, value out).
# The aliases resolve to `Any` here so that low level modules can annotate
# without importing the value module (which would create import cycles).

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
QuillValue = Any

# Native callable wrapped by a Builtin value
NativeFn = Callable[[tuple], QuillValue]
