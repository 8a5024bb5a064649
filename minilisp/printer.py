"""Textual rendering of expressions.

`to_source` writes an expression back as program text. `render` is what the
print form shows: symbols bound to values are replaced by the rendering of the
stored value, symbols bound to functions become an opaque placeholder.
"""

from __future__ import annotations

import math

import numpy as np

from minilisp import Expression
from minilisp.errors import LispTypeError
from minilisp.types.scope import ScopeStack
from minilisp.types.symbol import Symbol


def format_number(x: float) -> str:
    """Shortest positional decimal that reads back as `x`: 5, 0.5, 1e-7 -> 0.0000001."""
    if math.isnan(x):
        return "NaN"
    return np.format_float_positional(x, trim="-")


def to_source(expr: Expression) -> str:
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, float):
        return format_number(expr)
    if isinstance(expr, tuple):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    raise LispTypeError(f"Cannot render {expr!r}")


def render(expr: Expression, scope: ScopeStack) -> str:
    """Print form rendering; bound symbols are resolved without evaluation."""
    if isinstance(expr, Symbol):
        binding = scope.lookup(expr.id)
        if binding is None:
            return expr.id
        if binding.is_function:
            return f"<func-object: {expr.id}>"
        return render(binding.body, scope)
    if isinstance(expr, tuple):
        return "(" + " ".join(render(e, scope) for e in expr) + ")"
    return to_source(expr)
