"""Expression, statement and program nodes.

Both variant sets are closed. The evaluator matches on them exhaustively and
rejects anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from quill.types.name import Name
from quill.types.values import Value


@dataclass(frozen=True)
class Atomic:
    value: Value


@dataclass(frozen=True)
class Variable:
    name: Name


@dataclass(frozen=True)
class Application:
    """Call `callee` with `args`.

    Callee and arguments are sub-expressions evaluated at call time, callee
    first and then arguments left to right. Use `of_values` for a call whose
    parts are already resolved.
    """

    callee: Expression
    args: tuple[Expression, ...] = ()

    def __post_init__(self):
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def of_values(cls, callee: Value, args: Iterable[Value] = ()) -> Application:
        return cls(Atomic(callee), tuple(Atomic(arg) for arg in args))


@dataclass(frozen=True)
class Lambda:
    """Builds a closure over the environment it is evaluated in.

    A variadic lambda looks like `(a, b, c, x.) -> ...`; calling one is not
    supported yet.
    """

    argnames: tuple[Name, ...]
    body: Expression
    variadic: bool = False

    def __post_init__(self):
        if not isinstance(self.argnames, tuple):
            object.__setattr__(self, "argnames", tuple(self.argnames))


Expression = Union[Atomic, Variable, Application, Lambda]


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression


@dataclass(frozen=True)
class Assignment:
    # Either a ready value, or an expression evaluated in the top-level scope.
    name: Name
    value: Value | Expression


Statement = Union[ExpressionStatement, Assignment]

Program = Sequence[Statement]
