from __future__ import annotations

import logging
from typing import Optional

from quill.builtin.core_builtin import register
from quill.errors import QuillTypeError
from quill.evaluation.evaluator import evaluate
from quill.types.environment import GlobalEnvironment
from quill.types.expressions import Assignment, ExpressionStatement, Program, Statement
from quill.types.name import Name
from quill.types.values import Value, is_value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs Quill programs against a persistent top-level scope.
    Assignments accumulate in `env` across calls to `run`; every closure call
    still gets its own immutable frame layered on top of it.
    """
    def __init__(self, builtins: bool = True):
        self.env = GlobalEnvironment()
        if builtins:
            register(self.env)

    def execute(self, statement: Statement) -> Optional[Value]:
        """Execute one statement; expression statements return their value."""
        match statement:
            case ExpressionStatement(expression):
                logger.debug("Evaluating %r", expression)
                return evaluate(expression, self.env)
            case Assignment(name, value):
                if not is_value(value):
                    value = evaluate(value, self.env)
                logger.debug("Assigning %s = %s", name, value)
                self.env.define(name, value)
                return None
        raise QuillTypeError(f"Cannot execute {statement!r}: not a statement")

    def run(self, program: Program) -> list[Value]:
        """Execute statements in order and collect the expression results.

        The first error aborts the run; assignments made before it stay bound.
        """
        results = []
        for statement in program:
            result = self.execute(statement)
            if isinstance(statement, ExpressionStatement):
                results.append(result)
        return results

    def lookup(self, name: Name | str) -> Value:
        if isinstance(name, str):
            name = Name(name)
        return self.env.get(name)
