"""Application engine for minilisp.

Bare symbols and list-headed calls share one path:
- Unbound symbols evaluate to themselves.
- Value bindings re-evaluate their stored expression in the current scope
  (arguments, if any, are ignored).
- Function bindings check arity, evaluate arguments in the caller's scope,
  then run the body in a new frame that holds only the parameters. The new
  frame sits on top of the caller's frames, so free names in the body resolve
  dynamically.
"""

from __future__ import annotations

import logging
from typing import Sequence

from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError, LispValueError
from minilisp.types.no_value import NoValue
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate_arguments(
    args: Sequence[Expression], scope: ScopeStack, evaluate_fn: EvaluatorFn
) -> list[Expression]:
    """Evaluate call arguments left to right; no-value results are rejected."""
    values = []
    for arg in args:
        value = evaluate_fn(arg, scope)
        if value is NoValue:
            raise LispValueError("Cannot pass no-value as an argument to a function!")
        values.append(value)
    return values


def apply_symbol(
    symbol: Symbol,
    args: Sequence[Expression],
    scope: ScopeStack,
    evaluate_fn: EvaluatorFn,
):
    """Resolve `symbol` and apply it to the unevaluated `args`."""
    binding = scope.lookup(symbol.id)
    if binding is None:
        return symbol

    if not binding.is_function:
        return evaluate_fn(binding.body, scope)

    if len(args) != binding.arity:
        raise LispArityError(
            f"Provided {len(args)} arguments but expected {binding.arity}!"
        )

    values = evaluate_arguments(args, scope, evaluate_fn)

    logger.debug("apply %s%r at depth %d", symbol, tuple(values), scope.depth)
    with scope.frame():
        for name, value in zip(binding.params, values):
            scope.define_value(name, value)
        return evaluate_fn(binding.body, scope)
