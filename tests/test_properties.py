import functools
import math
import operator

from hypothesis import assume, given, strategies as st

from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.special_forms.reserved import RESERVED_WORDS
from minilisp.types.expression import structurally_equal
from minilisp.types.result import Error, Value
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol

names = st.from_regex(r"[a-z][a-z0-9_-]{0,8}", fullmatch=True)
numbers = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
expressions = st.recursive(
    numbers | names.map(Symbol),
    lambda children: st.lists(children, max_size=4).map(tuple),
    max_leaves=20,
)


@given(expressions)
def test_equality_is_reflexive_without_nan(expr):
    assert structurally_equal(expr, expr)


@given(expressions, expressions)
def test_equality_is_symmetric(a, b):
    assert structurally_equal(a, b) == structurally_equal(b, a)


@given(st.lists(st.just(math.nan), min_size=1, max_size=3).map(tuple))
def test_nan_is_never_equal(expr):
    assert not structurally_equal(expr, expr)


@given(numbers, names)
def test_variants_never_compare_equal(number, name):
    assert not structurally_equal(number, Symbol(name))
    assert not structurally_equal((), Symbol(name))
    assert not structurally_equal((number,), number)


@given(
    st.sampled_from([("+", operator.add), ("-", operator.sub), ("*", operator.mul)]),
    st.lists(numbers, min_size=1, max_size=6),
)
def test_arithmetic_is_a_left_fold(op, xs):
    name, fn = op
    expr = (Symbol(name), *xs)
    assert evaluate(expr, ScopeStack.default()) == Value(functools.reduce(fn, xs))


@given(names)
def test_unbound_symbols_are_truthy_and_self_evaluating(name):
    assume(name not in RESERVED_WORDS)
    scope = ScopeStack.default()
    assert evaluate(Symbol(name), scope) == Value(Symbol(name))
    assert evaluate((Symbol("if"), Symbol(name), 1.0, 2.0), scope) == Value(1.0)
    assert evaluate((Symbol("not"), Symbol(name)), scope) == Value(Symbol("False"))


@given(st.integers(min_value=0, max_value=4), st.integers(min_value=0, max_value=4))
def test_calls_restore_scope_depth(arity, supplied):
    scope = ScopeStack.default()
    params = tuple(Symbol(f"p{i}") for i in range(arity))
    evaluate((Symbol("fn"), Symbol("f"), params, (Symbol("+"), 1.0, *params)), scope)

    result = evaluate((Symbol("f"), *[float(i) for i in range(supplied)]), scope)

    assert scope.depth == 1
    assert all(scope.lookup(p.id) is None for p in params)
    if arity == 0:
        # no parameters: f is a value binding and arguments are ignored
        assert result == Value(1.0)
    elif arity == supplied:
        assert result == Value(1.0 + sum(range(supplied)))
    else:
        assert result == Error(f"Provided {supplied} arguments but expected {arity}!")
