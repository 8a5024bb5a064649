from __future__ import annotations


class NoValueType:
    """Result of statement-like forms (let, fn, print): nothing printable."""

    __slots__ = ()

    def __repr__(self): return "NoValue"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NoValueType)

    def __hash__(self):
        return hash(NoValueType)


NoValue = NoValueType()
