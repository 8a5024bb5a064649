from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError, LispTypeError, LispValueError
from minilisp.evaluation.special_forms.reserved import check_reserved
from minilisp.types.no_value import NoValue
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol


def let_form(
    tail: list[Expression],
    scope: ScopeStack,
    evaluate_fn: EvaluatorFn,
):
    """
    (let name expr)
    Binds the value of expr in the top frame, so a let inside a function body
    lasts only until that call returns.
    """
    if len(tail) != 2:
        raise LispArityError("Invalid variable definition! Must be 'let x expr'!")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispTypeError("Invalid variable definition! Must be 'let x expr'!")
    check_reserved(name.id)

    value = evaluate_fn(val_expr, scope)
    if value is NoValue:
        raise LispValueError("Cannot assign no-value to variable!")
    scope.define_value(name.id, value)
    return NoValue
