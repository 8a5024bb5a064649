"""Runtime scope stack for minilisp.

The ScopeStack is an ordered list of frames, each a dict from name to
Binding. Lookups search from the most recently pushed frame outwards, so a
function body sees its own parameters first and then every frame that was live
at the call site. Nothing is captured at definition time: free names in a
function body resolve against the caller's frames.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterable, Iterator, Optional

from minilisp import Expression
from minilisp.errors import LispScopeError
from minilisp.types.binding import Binding

logger = logging.getLogger(__name__)


class ScopeStack:
    """Stack of binding frames owned by a single evaluation run."""

    __slots__ = ("frames",)

    def __init__(self):
        self.frames: list[dict[str, Binding]] = []

    # --- Construction ---
    @classmethod
    def empty(cls) -> ScopeStack:
        """A stack with no frames at all; definitions fail until one is pushed."""
        return cls()

    @classmethod
    def from_vars(cls, pairs: Iterable[tuple[str, Expression]]) -> ScopeStack:
        """One frame holding a value binding for each (name, expression) pair."""
        scope = cls()
        scope.push_frame()
        for name, expr in pairs:
            scope.define_value(name, expr)
        return scope

    @classmethod
    def default(cls) -> ScopeStack:
        """The stack every program starts with: `False` and `True` pre-bound."""
        return cls.from_vars([("False", ()), ("True", (1.0,))])

    # --- Frames ---
    def push_frame(self) -> None:
        self.frames.append({})
        logger.debug("push frame -> depth %d", len(self.frames))

    def pop_frame(self) -> None:
        self.frames.pop()
        logger.debug("pop frame -> depth %d", len(self.frames))

    @contextmanager
    def frame(self) -> Iterator[dict[str, Binding]]:
        """Push a frame for the duration of the block; popped on every exit path."""
        self.push_frame()
        try:
            yield self.frames[-1]
        finally:
            self.pop_frame()

    @property
    def depth(self) -> int:
        return len(self.frames)

    # --- Lookup ---
    def lookup(self, name: str) -> Optional[Binding]:
        """Innermost binding for `name`, or None if no frame binds it."""
        for frame in reversed(self.frames):
            binding = frame.get(name)
            if binding is not None:
                return binding
        return None

    def contains(self, name: str) -> bool:
        return any(name in frame for frame in self.frames)

    # --- Definition ---
    def _top(self) -> dict[str, Binding]:
        if not self.frames:
            raise LispScopeError("Environment has no frame!")
        return self.frames[-1]

    def define_value(self, name: str, expr: Expression) -> None:
        """Bind `name` to a value in the top frame, replacing any earlier entry."""
        self._top()[name] = Binding((), expr)

    def define_function(self, name: str, params: Iterable[str], body: Expression) -> None:
        """Bind `name` to a function in the top frame, replacing any earlier entry."""
        self._top()[name] = Binding(tuple(params), body)

    def __repr__(self) -> str:
        """Frame-by-frame view, outermost first."""
        with StringIO() as buffer:
            buffer.write("<ScopeStack: ")
            chain = []
            for frame in self.frames:
                chain.append("{" + ", ".join(f"{k}: {v!r}" for k, v in frame.items()) + "}")
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
