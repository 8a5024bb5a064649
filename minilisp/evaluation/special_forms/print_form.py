from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError
from minilisp.printer import render
from minilisp.types.no_value import NoValue
from minilisp.types.scope import ScopeStack


def print_form(
    tail: list[Expression],
    scope: ScopeStack,
    evaluate_fn: EvaluatorFn,
):
    """(print a b ...) writes the operands' renderings on one line.

    Operands are rendered, not evaluated: (print (+ 1 2)) prints (+ 1 2).
    """
    if not tail:
        raise LispArityError("Missing values in print function!")
    print(" ".join(render(e, scope) for e in tail))
    return NoValue
