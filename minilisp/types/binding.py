"""Named entries stored in scope frames."""

from __future__ import annotations

from io import StringIO

from minilisp import Expression


class Binding:
    """A value binding (no params) or a function binding (params + body).

    Value bindings hold an already-evaluated expression that is evaluated again
    on every reference. Function bindings hold the unevaluated body.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: tuple[str, ...], body: Expression):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body

    @property
    def is_function(self) -> bool:
        return bool(self.params)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Binding)
            and self.params == other.params
            and self.body == other.body
        )

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Binding")
            if self.params:
                buffer.write(" (")
                buffer.write(" ".join(self.params))
                buffer.write(")")
            buffer.write(f" {self.body!r}>")
            return buffer.getvalue()
