"""Tree-walking evaluator for Quill expressions."""

from __future__ import annotations

from quill.errors import QuillTypeError
from quill.evaluation.apply import try_call
from quill.runtime_context import call_frame
from quill.types.closure import Closure
from quill.types.environment import Environment
from quill.types.expressions import Application, Atomic, Expression, Lambda, Variable
from quill.types.values import Function, Value


def evaluate(expr: Expression, env: Environment) -> Value:
    """
    Evaluate `expr` in `env`.

    Applications evaluate the callee first, then each argument left to right,
    and dispatch through try_call. The first error raised aborts the whole
    evaluation; remaining arguments are not evaluated. Each application counts
    as one nested frame against the configured call depth limit.
    """
    match expr:
        case Atomic(value):
            return value
        case Variable(name):
            return env.get(name)
        case Application(callee, args):
            with call_frame():
                fn = evaluate(callee, env)
                values = []
                for arg in args:
                    values.append(evaluate(arg, env))
                return try_call(fn, values)
        case Lambda(argnames, body, variadic):
            return Function(Closure(env, argnames, body, variadic))
    raise QuillTypeError(f"Cannot evaluate {expr!r}: not an expression")
