import pytest

from quill.errors import CannotCallValue, QuillTypeError, UndefinedVariable
from quill.evaluation.evaluator import evaluate
from quill.types.closure import Closure
from quill.types.expressions import Application, Atomic, Lambda, Variable
from quill.types.name import Name
from quill.types.values import Builtin, Function, Glyph, ListValue, Number

a, b, x = Name("a"), Name("b"), Name("x")


@pytest.fixture
def env(top_level):
    top_level.define(x, Number(42))
    return top_level


@pytest.fixture
def tracer(env):
    """A builtin `trace` that records each argument it is called with."""
    calls = []

    def trace(args):
        calls.append(args[0])
        return args[0]

    env.define(Name("trace"), Builtin(trace, "trace"))
    return calls


def call(name, *args):
    return Application(Variable(Name(name)), args)


def num(n):
    return Atomic(Number(n))


def test_atomic_returns_value_unchanged(env):
    value = ListValue.of(Number(1))
    assert evaluate(Atomic(value), env) is value


def test_variable_lookup(env):
    assert evaluate(Variable(x), env) == Number(42)
    with pytest.raises(UndefinedVariable) as exc:
        evaluate(Variable(Name("missing")), env)
    assert exc.value.name == Name("missing")


def test_application_of_pre_resolved_values(env):
    # Application built from already-resolved values, the form where no
    # argument evaluation takes place.
    plus = env.get(Name("+"))
    expr = Application.of_values(plus, [Number(1), Number(2)])
    assert expr.args == (num(1), num(2))
    assert evaluate(expr, env) == Number(3)


def test_application_evaluates_nested_sub_expressions(env):
    # (+ (* 2 3) x)
    expr = call("+", call("*", num(2), num(3)), Variable(x))
    assert evaluate(expr, env) == Number(48)


def test_arguments_evaluate_left_to_right(env, tracer):
    expr = call("list", call("trace", num(1)), call("trace", num(2)), call("trace", num(3)))
    assert evaluate(expr, env) == ListValue.of(Number(1), Number(2), Number(3))
    assert tracer == [Number(1), Number(2), Number(3)]


def test_first_failing_argument_aborts_evaluation(env, tracer):
    expr = call("list", call("trace", num(1)), Variable(Name("nope")), call("trace", num(3)))
    with pytest.raises(UndefinedVariable) as exc:
        evaluate(expr, env)
    assert exc.value.name == Name("nope")
    assert tracer == [Number(1)]


def test_callee_is_evaluated_before_arguments(env, tracer):
    expr = Application(Variable(Name("nope")), (call("trace", num(1)),))
    with pytest.raises(UndefinedVariable):
        evaluate(expr, env)
    assert tracer == []


def test_calling_a_non_function_fails(env):
    with pytest.raises(CannotCallValue):
        evaluate(Application(Atomic(Glyph("q")), (num(1),)), env)


def test_lambda_captures_the_current_environment(env):
    fn = evaluate(Lambda((a,), Variable(x)), env)
    assert isinstance(fn, Function)
    assert fn.closure.env is env
    assert fn.closure.argnames == (a,)
    assert not fn.closure.variadic


def test_immediately_applied_lambda(env):
    # ((a, b) -> list(b, a))(1, 2)
    swap = Lambda([a, b], call("list", Variable(b), Variable(a)))
    expr = Application(swap, (num(1), num(2)))
    assert evaluate(expr, env) == ListValue.of(Number(2), Number(1))


def test_calling_the_result_of_an_application(env):
    # ((x) -> (a) -> list(x, a))(1)(2)
    curried = Lambda((x,), Lambda((a,), call("list", Variable(x), Variable(a))))
    expr = Application(Application(curried, (num(1),)), (num(2),))
    assert evaluate(expr, env) == ListValue.of(Number(1), Number(2))
    # the outer x is untouched
    assert env.get(x) == Number(42)


def test_closure_body_errors_propagate(env):
    broken = Function(Closure(env, [], Variable(Name("nope"))))
    with pytest.raises(UndefinedVariable):
        evaluate(Application.of_values(broken), env)


def test_unknown_node_is_rejected(env):
    with pytest.raises(QuillTypeError):
        evaluate(Number(1), env)
