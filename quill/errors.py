"""Error taxonomy for the Quill runtime.

Every failure the evaluator reports is raised as a subclass of QuillError and
travels up to whichever driver started the evaluation. Nothing in the core
catches these; the first error raised aborts the enclosing evaluation.
"""

from __future__ import annotations


class QuillError(Exception):
    """ Base class for all Quill errors"""

    def _fields(self) -> tuple:
        return self.args

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class QuillRuntimeError(QuillError):
    """ Raised for failures during evaluation"""


class UndefinedVariable(QuillRuntimeError):
    """ Raised when a name is not bound anywhere in the scope chain"""

    def __init__(self, name):
        super().__init__(f"Undefined variable {name}")
        self.name = name

    def _fields(self) -> tuple:
        return (self.name,)


class IncorrectNumberOfArgs(QuillRuntimeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expected {expected} argument(s), got {actual}")
        self.expected = expected
        self.actual = actual

    def _fields(self) -> tuple:
        return (self.expected, self.actual)


class _DescribedError(QuillRuntimeError):
    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    def _fields(self) -> tuple:
        return (self.description,)


class CannotCallValue(_DescribedError):
    """ Raised when a value that is not a function is called"""


class Unimplemented(_DescribedError):
    """ Raised when a feature that is reserved but not built is used"""


class QuillTypeError(_DescribedError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class RecursionDepthExceeded(QuillRuntimeError):
    """ Raised when nested closure calls go deeper than the configured limit"""

    def __init__(self, limit: int):
        super().__init__(f"Maximum call depth of {limit} exceeded")
        self.limit = limit

    def _fields(self) -> tuple:
        return (self.limit,)


class QuillConfigError(QuillError, ValueError):
    """ Raised when a QUILL_* environment variable holds an invalid setting"""
