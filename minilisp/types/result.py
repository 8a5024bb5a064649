"""Outcome of a top-level evaluation: Value, Error, or NoValue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from minilisp import Expression
from minilisp.types.expression import structurally_equal
from minilisp.types.no_value import NoValue, NoValueType


@dataclass(frozen=True)
class Value:
    expr: Expression

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Value) and structurally_equal(self.expr, other.expr)


@dataclass(frozen=True)
class Error:
    message: str

    def __str__(self) -> str:
        return self.message


EvalResult = Union[Value, Error, NoValueType]

__all__ = ["Value", "Error", "NoValue", "EvalResult"]
