# Core type aliases for minilisp's data model.
# Expressions are plain immutable Python values:
#   - Symbol -> minilisp.types.symbol.Symbol
#   - Number -> float
#   - List   -> tuple of expressions (the empty tuple is "false"/nil)
# They are shared freely between bindings and pending evaluations and never
# mutated after construction.

from typing import Callable, Union

from minilisp.types.symbol import Symbol

__version__ = "0.3.0"

Expression = Union[Symbol, float, tuple]

# Evaluator function type used by special forms to recurse into the evaluator
EvaluatorFn = Callable[..., object]
