from __future__ import annotations

from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol, boolean_symbol


def is_truthy(value, error_message: str) -> bool:
    """Symbols are false only when spelled `False`; lists only when empty.

    Numbers and no-value have no truth value and raise LispTypeError with
    `error_message`.
    """
    if isinstance(value, Symbol):
        return value.id != "False"
    if isinstance(value, tuple):
        return len(value) > 0
    raise LispTypeError(error_message)


def _truth_values(
    tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn
) -> list[bool]:
    if not tail:
        raise LispArityError("Boolean operations must be performed on at least one value!")
    return [
        is_truthy(
            evaluate_fn(expr, scope),
            "Boolean operations must be performed on symbols or lists!",
        )
        for expr in tail
    ]


def or_form(tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn) -> Symbol:
    """(or a b ...) evaluates every operand, True if any is truthy."""
    result = False
    for flag in _truth_values(tail, scope, evaluate_fn):
        result |= flag
    return boolean_symbol(result)


def and_form(tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn) -> Symbol:
    """(and a b ...) evaluates every operand, True if all are truthy."""
    result = True
    for flag in _truth_values(tail, scope, evaluate_fn):
        result &= flag
    return boolean_symbol(result)


def not_form(tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn) -> Symbol:
    if len(tail) > 1:
        raise LispArityError("Negation must be performed on exactly one value!")
    (flag,) = _truth_values(tail, scope, evaluate_fn)
    return boolean_symbol(not flag)
