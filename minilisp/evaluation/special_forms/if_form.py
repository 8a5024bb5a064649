from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError, LispTypeError
from minilisp.evaluation.special_forms.logic_forms import is_truthy
from minilisp.types.no_value import NoValue
from minilisp.types.scope import ScopeStack


def if_form(
    tail: list[Expression],
    scope: ScopeStack,
    evaluate_fn: EvaluatorFn,
):
    """(if predicate then else): only the chosen branch is evaluated."""
    if len(tail) != 3:
        raise LispArityError(
            "Invalid if statement! Must be 'if (predicate) (then) (else)'"
        )

    predicate, then, otherwise = tail
    cond = evaluate_fn(predicate, scope)
    if cond is NoValue:
        raise LispTypeError("If statement predicate cannot return no-value!")

    if is_truthy(cond, "Invalid if statement predicate!"):
        return evaluate_fn(then, scope)
    return evaluate_fn(otherwise, scope)
