"""Runtime values for Quill.

A value is something that can be passed around and stored in variables. The
variant set is closed: Number, Glyph, ListValue, Function and Builtin. All of
them are immutable, so duplicating a value (``copy.copy`` or ``copy.deepcopy``)
hands back the very same object; lists share structure through ``rpds.List``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from itertools import count
from typing import TYPE_CHECKING, Iterable, Iterator, Union

from rpds import List

from quill import NativeFn
from quill.errors import QuillTypeError

if TYPE_CHECKING:
    from quill.types.closure import Closure


# Synthetic identities for callables; stable within a process, never an address.
_callable_ids = count(1)


def _next_id() -> int:
    return next(_callable_ids)


class _Immutable:
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


@dataclass(frozen=True)
class Number(_Immutable):
    value: int | float | Fraction

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, Fraction)):
            raise QuillTypeError(f"Number requires an int, float or Fraction, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Glyph(_Immutable):
    """A glyph is basically a character. A string is a list of glyphs."""

    char: str

    def __post_init__(self):
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise QuillTypeError(f"Glyph requires exactly one character, got {self.char!r}")

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class ListValue(_Immutable):
    """Persistent list of values; derived lists share their tails."""

    items: List = field(default_factory=List)

    def __post_init__(self):
        if not isinstance(self.items, List):
            object.__setattr__(self, "items", List(list(self.items)))

    @classmethod
    def of(cls, *values: Value) -> ListValue:
        return cls(List(list(values)))

    @classmethod
    def from_text(cls, text: str) -> ListValue:
        return cls(List([Glyph(c) for c in text]))

    def prepend(self, value: Value) -> ListValue:
        """Return a new list with `value` in front; this list becomes its tail."""
        return ListValue(self.items.push_front(value))

    @property
    def first(self) -> Value:
        if not self.items:
            raise QuillTypeError("Cannot take the first element of an empty list")
        return self.items.first

    @property
    def rest(self) -> ListValue:
        if not self.items:
            raise QuillTypeError("Cannot take the rest of an empty list")
        return ListValue(self.items.rest)

    def as_text(self) -> str:
        chars = []
        for item in self.items:
            if not isinstance(item, Glyph):
                raise QuillTypeError(f"Cannot convert {display(item)} to text")
            chars.append(item.char)
        return "".join(chars)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __bool__(self) -> bool:
        return len(self.items) > 0

    def __str__(self) -> str:
        return display(self)


@dataclass(frozen=True, eq=False)
class Function(_Immutable):
    closure: Closure = field(repr=False)
    id: int = field(default_factory=_next_id, init=False)

    def __str__(self) -> str:
        return f"function@{self.id}"


@dataclass(frozen=True, eq=False)
class Builtin(_Immutable):
    """Native capability exposed as a value. Holds no environment."""

    func: NativeFn = field(repr=False)
    name: str | None = None
    id: int = field(default_factory=_next_id, init=False)

    def invoke(self, args: Iterable[Value]) -> Value:
        return self.func(tuple(args))

    def __str__(self) -> str:
        return f"builtin@{self.id}"


Value = Union[Number, Glyph, ListValue, Function, Builtin]

VALUE_TYPES = (Number, Glyph, ListValue, Function, Builtin)


def is_value(obj: object) -> bool:
    return isinstance(obj, VALUE_TYPES)


def display(value: Value) -> str:
    """Render a value as text, e.g. for REPL output."""
    match value:
        case Number(number):
            return str(number)
        case Glyph(char):
            return char
        case ListValue(items):
            return "[" + ", ".join(display(item) for item in items) + "]"
        case Function() | Builtin():
            return str(value)
    raise QuillTypeError(f"Cannot display non-value {value!r}")
