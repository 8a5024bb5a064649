"""Core evaluator for the minilisp interpreter.

`evaluate0` walks the expression tree and raises LispError subclasses on
failure. `evaluate` is the public entry point: it turns the outcome into an
explicit Value / Error / NoValue result.
"""

from __future__ import annotations

import logging

from minilisp import Expression
from minilisp.errors import LispError, LispTypeError
from minilisp.evaluation.apply import apply_symbol
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.types.no_value import NoValue
from minilisp.types.result import Error, EvalResult, Value
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, scope: ScopeStack) -> EvalResult:
    """Evaluate `expr` against `scope` and report the outcome as a result object.

    Errors never escape as exceptions, with the exception of RecursionError:
    running out of Python stack is a fatal condition, not a language error.
    """
    try:
        result = evaluate0(expr, scope)
    except LispError as e:
        logger.debug("evaluation failed: %s", e)
        return Error(str(e))
    if result is NoValue:
        return NoValue
    return Value(result)


def evaluate0(expr: Expression, scope: ScopeStack):
    """
    Single recursive evaluation step.
    Returns an expression or NoValue; raises LispError on failure.
    """
    match expr:
        case Symbol():
            # A bare symbol is a call with no arguments.
            return apply_symbol(expr, (), scope, evaluate0)

        case float():
            return expr

        case ():
            return ()

        case (Symbol() as head, *tail_args) if head in SPECIAL_FORMS:
            logger.debug("special form %s", head)
            return SPECIAL_FORMS[head](tail_args, scope, evaluate0)

        case (Symbol() as head, *tail_args) if scope.contains(head.id):
            return apply_symbol(head, tail_args, scope, evaluate0)

        case tuple():
            return construct_list(expr, scope)

    raise LispTypeError(f"Cannot evaluate {expr!r}")


def construct_list(items: tuple, scope: ScopeStack) -> tuple:
    """Evaluate every element (head included), dropping no-value results."""
    values = []
    for item in items:
        value = evaluate0(item, scope)
        if value is not NoValue:
            values.append(value)
    return tuple(values)
