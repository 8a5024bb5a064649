"""Arithmetic special forms: + - * /.

Every operand must evaluate to a number. The fold starts from the first
operand, so (- 5) and (/ 5) return 5 unchanged. Division follows IEEE-754:
dividing by zero yields inf, -inf or nan rather than an error.
"""

from __future__ import annotations

import operator
from typing import Callable

import numpy as np

from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.scope import ScopeStack


def ieee_divide(a: float, b: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(a, b))


def _number(expr: Expression, scope: ScopeStack, evaluate_fn: EvaluatorFn) -> float:
    value = evaluate_fn(expr, scope)
    if not isinstance(value, float):
        raise LispTypeError("Mathematical operations must be performed on numbers!")
    return value


def _arithmetic_form(fold: Callable[[float, float], float]):
    def form(
        tail: list[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn
    ) -> float:
        if not tail:
            raise LispArityError(
                "Mathematical operations must be performed on at least one number!"
            )
        numbers = [_number(e, scope, evaluate_fn) for e in tail]
        result = numbers[0]
        for x in numbers[1:]:
            result = fold(result, x)
        return result

    return form


add_form = _arithmetic_form(operator.add)
sub_form = _arithmetic_form(operator.sub)
mul_form = _arithmetic_form(operator.mul)
div_form = _arithmetic_form(ieee_divide)
