from minilisp import EvaluatorFn, Expression
from minilisp.errors import LispArityError, LispTypeError
from minilisp.evaluation.special_forms.reserved import check_reserved
from minilisp.printer import to_source
from minilisp.types.no_value import NoValue
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol

_USAGE = "Invalid function definition! Must be '(fn my-func (args) body)'!"


def fn_form(
    tail: list[Expression],
    scope: ScopeStack,
    evaluate_fn: EvaluatorFn,
):
    """
    (fn name (params...) body)
    The body is stored unevaluated. With no params the binding behaves like a
    variable whose body is re-evaluated on each reference.
    """
    if len(tail) != 3:
        raise LispArityError(_USAGE)

    name, params, body = tail
    if isinstance(name, Symbol):
        check_reserved(name.id)
    if not isinstance(name, Symbol) or not isinstance(params, tuple):
        raise LispTypeError(_USAGE)

    names = []
    for param in params:
        if not isinstance(param, Symbol):
            raise LispTypeError(f"Function parameters must be symbols, got {to_source(param)}!")
        names.append(param.id)

    scope.define_function(name.id, names, body)
    return NoValue
