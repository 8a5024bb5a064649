from __future__ import annotations

from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError
from minilisp.types.expression import structurally_equal
from minilisp.types.no_value import NoValue
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol, boolean_symbol


def _operands(
    tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn
) -> list[Expression]:
    if not tail:
        raise LispArityError("Equality operations must be performed on at least one value!")
    values = []
    for expr in tail:
        value = evaluate_fn(expr, scope)
        # A statement operand compares as its own source form.
        values.append(expr if value is NoValue else value)
    return values


def equals_form(tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn) -> Symbol:
    """(= a b ...) is True when every operand equals the first."""
    values = _operands(tail, scope, evaluate_fn)
    first = values[0]
    return boolean_symbol(all(structurally_equal(x, first) for x in values))


def not_equals_form(tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn) -> Symbol:
    """(!= a b ...) is True when any operand differs from the first.

    This is not pairwise distinctness: (!= 1 2 1) is True and so is (!= 1 2 2).
    """
    values = _operands(tail, scope, evaluate_fn)
    first = values[0]
    return boolean_symbol(any(not structurally_equal(x, first) for x in values))
