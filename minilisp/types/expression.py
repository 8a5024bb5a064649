"""Structural equality over the expression tree."""

from __future__ import annotations

from minilisp import Expression
from minilisp.types.symbol import Symbol


def structurally_equal(a: Expression, b: Expression) -> bool:
    """Deep equality for expressions.

    Numbers compare with IEEE-754 semantics, so NaN is unequal to itself even
    when both sides are the same object. Lists compare element-wise; values of
    different variants are never equal.
    """
    if isinstance(a, tuple) and isinstance(b, tuple):
        if len(a) != len(b):
            return False
        return all(structurally_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, float) and isinstance(b, float):
        return a == b
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a.id == b.id
    return False
