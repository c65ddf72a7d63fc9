"""Scope stack shared by the checker and the evaluator.

Each scope maps a variable name to a payload: an ``ExpressionType`` while
checking, a literal node while evaluating. Entering a style rule or a
conditional branch pushes a copy of the innermost scope; leaving pops it, so
bindings made inside a block never leak out and later changes to the parent
are never seen by an already-entered child.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyScopeError(IndexError):
    """Raised on ``pop()`` or ``peek()`` of an empty scope stack."""


class ScopeStack(Generic[T]):
    """An ordered stack of ``name -> payload`` mappings, innermost last."""

    def __init__(self) -> None:
        self._scopes: list[dict[str, T]] = []

    def push(self, scope: dict[str, T] | None = None) -> None:
        self._scopes.append({} if scope is None else scope)

    def pop(self) -> dict[str, T]:
        if not self._scopes:
            raise EmptyScopeError("pop from an empty scope stack")
        return self._scopes.pop()

    def peek(self) -> dict[str, T]:
        if not self._scopes:
            raise EmptyScopeError("peek at an empty scope stack")
        return self._scopes[-1]

    def is_empty(self) -> bool:
        return not self._scopes

    def clear(self) -> None:
        self._scopes.clear()

    def __len__(self) -> int:
        return len(self._scopes)

    def lookup(self, name: str) -> T | None:
        """Resolve *name* from the innermost scope outwards; ``None`` if unbound."""
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        return None

    def bind(self, name: str, value: T) -> None:
        """Introduce or overwrite *name* in the innermost scope."""
        self.peek()[name] = value

    @contextmanager
    def child(self) -> Iterator[dict[str, T]]:
        """Run a block inside a copy of the innermost scope."""
        scope = dict(self.peek())
        self.push(scope)
        try:
            yield scope
        finally:
            self.pop()
