"""ICSS abstract syntax tree: frozen dataclasses for every node kind.

Bodies are tuples so the shape of a tree cannot change after it is built.
The evaluator produces a new tree instead of rewriting this one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from icss.model.types import ExpressionType


@dataclass(frozen=True, kw_only=True)
class Node:
    """Base for all AST nodes; carries the source position, if known."""

    line: int | None = field(default=None, compare=False, repr=False)
    column: int | None = field(default=None, compare=False, repr=False)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TagSelector(Node):
    tag: str

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class ClassSelector(Node):
    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True)
class IdSelector(Node):
    id: str

    def __str__(self) -> str:
        return f"#{self.id}"


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PixelLiteral(Node):
    expression_type: ClassVar[ExpressionType] = ExpressionType.PIXEL

    value: int

    def __str__(self) -> str:
        return f"{self.value}px"


@dataclass(frozen=True)
class PercentageLiteral(Node):
    expression_type: ClassVar[ExpressionType] = ExpressionType.PERCENTAGE

    value: int

    def __str__(self) -> str:
        return f"{self.value}%"


@dataclass(frozen=True)
class ScalarLiteral(Node):
    expression_type: ClassVar[ExpressionType] = ExpressionType.SCALAR

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ColorLiteral(Node):
    expression_type: ClassVar[ExpressionType] = ExpressionType.COLOR

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BoolLiteral(Node):
    expression_type: ClassVar[ExpressionType] = ExpressionType.BOOL

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


# ---------------------------------------------------------------------------
# Variables and operations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VariableReference(Node):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AddOperation(Node):
    symbol: ClassVar[str] = "+"

    lhs: Expression
    rhs: Expression

    def __str__(self) -> str:
        return f"{self.lhs} + {self.rhs}"


@dataclass(frozen=True)
class SubtractOperation(Node):
    symbol: ClassVar[str] = "-"

    lhs: Expression
    rhs: Expression

    def __str__(self) -> str:
        return f"{self.lhs} - {self.rhs}"


@dataclass(frozen=True)
class MultiplyOperation(Node):
    symbol: ClassVar[str] = "*"

    lhs: Expression
    rhs: Expression

    def __str__(self) -> str:
        return f"{self.lhs} * {self.rhs}"


# ---------------------------------------------------------------------------
# Statements and containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Declaration(Node):
    """``property: expression;`` inside a style rule or a conditional body."""

    property: str
    expression: Expression


@dataclass(frozen=True)
class VariableAssignment(Node):
    """``Name := expression;``. Binds *name* in the current scope only."""

    name: str
    expression: Expression


@dataclass(frozen=True)
class IfClause(Node):
    """``if [condition] { body } else { else_body }``.

    *else_body* is ``None`` when the source has no ``else`` branch.
    """

    condition: Expression
    body: tuple[BodyItem, ...] = ()
    else_body: tuple[BodyItem, ...] | None = None


@dataclass(frozen=True)
class StyleRule(Node):
    selectors: tuple[Selector, ...]
    body: tuple[BodyItem, ...] = ()


@dataclass(frozen=True)
class Stylesheet(Node):
    """Root of the tree: top-level variable assignments and style rules."""

    items: tuple[Item, ...] = ()

    @property
    def rules(self) -> list[StyleRule]:
        return [item for item in self.items if isinstance(item, StyleRule)]


# ---------------------------------------------------------------------------
# Closed unions over the node kinds
# ---------------------------------------------------------------------------

Selector = Union[TagSelector, ClassSelector, IdSelector]
Literal = Union[PixelLiteral, PercentageLiteral, ScalarLiteral, ColorLiteral, BoolLiteral]
Operation = Union[AddOperation, SubtractOperation, MultiplyOperation]
Expression = Union[Literal, VariableReference, Operation]
BodyItem = Union[Declaration, VariableAssignment, IfClause]
Item = Union[StyleRule, VariableAssignment]

LITERAL_TYPES: tuple[type, ...] = (
    PixelLiteral,
    PercentageLiteral,
    ScalarLiteral,
    ColorLiteral,
    BoolLiteral,
)

_LITERAL_BY_TYPE: dict[ExpressionType, type] = {
    cls.expression_type: cls for cls in LITERAL_TYPES
}


def literal_of(expression_type: ExpressionType, value: object) -> Literal:
    """Build the literal node class belonging to *expression_type*."""
    return _LITERAL_BY_TYPE[expression_type](value)
