"""Diagnostic model: findings produced by the checker and the evaluator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, TypeVar

if TYPE_CHECKING:
    from icss.model.ast import Node


@dataclass(frozen=True)
class Diagnostic:
    """A semantic rule violation found while checking a stylesheet.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        message: Human-readable description of the problem.
        node: The offending AST node. Compared by identity, not by value.
    """

    label: ClassVar[str] = "ERROR"

    rule: str
    message: str
    node: Node | None = field(default=None, compare=False, repr=False)

    @property
    def line(self) -> int | None:
        return getattr(self.node, "line", None)

    @property
    def column(self) -> int | None:
        return getattr(self.node, "column", None)

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line {self.line}:{self.column}]"
        return f"{self.label}{location}: {self.message}"


@dataclass(frozen=True)
class Defect(Diagnostic):
    """An evaluation failure that was replaced by a fallback value."""

    label: ClassVar[str] = "DEFECT"


F = TypeVar("F", bound=Diagnostic)


def findings_for(node: Node, findings: Iterable[F]) -> list[F]:
    """Return the findings bound to exactly *node* (identity, not equality)."""
    return [f for f in findings if f.node is node]
