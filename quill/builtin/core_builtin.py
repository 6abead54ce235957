"""Built-in functions for the Quill runtime environment.

This module defines a small arithmetic and list processing library, plus
`apply`, and the `register` helper that exposes them to Quill code as Builtin
values in a top-level environment.
"""
from __future__ import annotations

from quill.errors import IncorrectNumberOfArgs, QuillTypeError
from quill.evaluation.apply import try_call
from quill.types.environment import GlobalEnvironment
from quill.types.name import Name
from quill.types.values import Builtin, ListValue, Number, Value, display


def _numbers(op: str, args: tuple[Value, ...]) -> list:
    for arg in args:
        if not isinstance(arg, Number):
            raise QuillTypeError(f"All arguments to {op} must be numbers, got {display(arg)}")
    return [arg.value for arg in args]


def _expect(args: tuple[Value, ...], n: int) -> None:
    if len(args) != n:
        raise IncorrectNumberOfArgs(n, len(args))


def _list_arg(op: str, value: Value) -> ListValue:
    if not isinstance(value, ListValue):
        raise QuillTypeError(f"{op} requires a list, got {display(value)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: tuple[Value, ...]) -> Number:
    """Return the numeric sum of all arguments."""
    return Number(sum(_numbers("+", args)))


def sub(args: tuple[Value, ...]) -> Number:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise IncorrectNumberOfArgs(1, 0)
    nums = _numbers("-", args)
    if len(nums) == 1:
        return Number(-nums[0])
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return Number(result)


def mul(args: tuple[Value, ...]) -> Number:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return Number(result)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: tuple[Value, ...]) -> ListValue:
    return ListValue.of(*args)


def cons(args: tuple[Value, ...]) -> ListValue:
    """(cons x xs) => xs with x in front; xs is shared, not copied."""
    _expect(args, 2)
    return _list_arg("cons", args[1]).prepend(args[0])


def head(args: tuple[Value, ...]) -> Value:
    _expect(args, 1)
    return _list_arg("head", args[0]).first


def tail(args: tuple[Value, ...]) -> ListValue:
    _expect(args, 1)
    return _list_arg("tail", args[0]).rest


def length(args: tuple[Value, ...]) -> Number:
    _expect(args, 1)
    return Number(len(_list_arg("length", args[0])))


def apply(args: tuple[Value, ...]) -> Value:
    """(apply f xs) => f called with the elements of xs as its arguments."""
    _expect(args, 2)
    return try_call(args[0], list(_list_arg("apply", args[1])))


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "list": list_builtin,
    "cons": cons,
    "head": head,
    "tail": tail,
    "length": length,
    "apply": apply,
}


def register(env: GlobalEnvironment) -> None:
    """Register all builtin functions into the given top-level environment."""
    env.update({Name(name): Builtin(func, name) for name, func in BUILTINS.items()})
