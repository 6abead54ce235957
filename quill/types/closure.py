"""Closures and the calling convention for interpreted functions."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from quill import QuillValue
from quill.errors import IncorrectNumberOfArgs, Unimplemented
from quill.runtime_context import call_frame
from quill.types.environment import Environment
from quill.types.name import Name

logger = logging.getLogger(__name__)


class Closure:
    """A closure holds a reference to its enclosing environment, and the
    expression that is run when it is called.

    It also has the ordered names of its parameters, and whether it's variadic
    or not, meaning it looks like `(a, b, c, x.) -> ...`. The captured
    environment is shared with any other closure defined in the same scope.
    """

    __slots__ = ("env", "argnames", "variadic", "body")

    def __init__(
        self,
        env: Environment,
        argnames: Sequence[Name],
        body,
        variadic: bool = False,
    ):
        self.env: Environment = env
        self.argnames: tuple[Name, ...] = tuple(argnames)
        self.body = body
        self.variadic: bool = variadic
        logger.debug(
            "Closure created: arity=%d, variadic=%s", len(self.argnames), variadic
        )

    @property
    def arity(self) -> int:
        return len(self.argnames)

    def bind(self, args: Sequence[QuillValue]) -> Environment:
        """Return the call frame binding each parameter to its argument, in order."""
        if self.variadic:
            # TODO: bind trailing arguments to the last parameter as a ListValue
            raise Unimplemented("variadic calling convention not implemented")
        if len(args) != len(self.argnames):
            raise IncorrectNumberOfArgs(len(self.argnames), len(args))
        return Environment(self.env, zip(self.argnames, args))

    def call(self, args: Iterable[QuillValue]) -> QuillValue:
        """Evaluate the body in a fresh frame layered on the captured environment."""
        from quill.evaluation.evaluator import evaluate

        args = tuple(args)
        new_env = self.bind(args)
        with call_frame() as depth:
            logger.debug("Calling closure with %d argument(s) at depth %d", len(args), depth)
            return evaluate(self.body, new_env)

    def __repr__(self) -> str:
        params = " ".join(str(n) for n in self.argnames)
        if self.variadic:
            params += "."
        return f"<Closure ({params}) body={self.body!r}>"
