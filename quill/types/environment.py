"""Runtime environment for Quill.

An Environment is an immutable frame of Name -> value bindings plus an optional
`parent` link. Each closure call builds exactly one new frame on top of the
closure's captured frame and never alters ancestor frames, so sibling calls
cannot observe each other's bindings. Frames are shared by reference; a frame
stays alive for as long as any closure that captured it does.

GlobalEnvironment is the single mutable table, used as the root of the chain
by the program loop so that top-level assignments can accumulate.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional, Tuple, Union

from rpds import HashTrieMap

from quill import QuillValue
from quill.errors import UndefinedVariable
from quill.types.name import Name

Bindings = Union[Mapping[Name, QuillValue], Iterable[Tuple[Name, QuillValue]]]


def _check_name(name: object) -> Name:
    if not isinstance(name, Name):
        raise TypeError(f"Cannot bind {name!r}: bindings are keyed by Name")
    return name


class Environment:
    """Hierarchical, immutable mapping from Names to values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Environment] = None, bindings: Bindings = ()):
        if isinstance(bindings, Mapping):
            bindings = bindings.items()
        # Later pairs win when a name repeats.
        frame = {_check_name(name): value for name, value in bindings}
        self.vars = HashTrieMap(frame)
        self.parent: Environment | None = parent

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def get(self, name: Name) -> QuillValue:
        """Return the value bound to `name` in the nearest enclosing scope.

        Raises UndefinedVariable if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UndefinedVariable(name)
        return env.vars[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Name) and self.find(name) is not None

    def contains(self, name: Name) -> bool:
        return name in self

    def evaluate(self, expr):
        """Evaluate `expr` in this environment."""
        from quill.evaluation.evaluator import evaluate
        return evaluate(expr, self)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.parent
        return f"<{type(self).__name__} chain: {' -> '.join(chain)}>"


class GlobalEnvironment(Environment):
    """Top-level mutable binding table; the root of every chain in a program."""

    __slots__ = ()

    def __init__(self, bindings: Bindings = ()):
        super().__init__(None, bindings)
        self.vars = dict(self.vars.items())

    def define(self, name: Name, value: QuillValue) -> None:
        """Bind or rebind `name` in the top-level scope."""
        self.vars[_check_name(name)] = value

    def update(self, mapping: Mapping[Name, QuillValue]) -> None:
        """Bulk-define a mapping of Name -> value."""
        for k, v in mapping.items():
            self.define(k, v)
