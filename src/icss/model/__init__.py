"""ICSS model layer -- public type re-exports."""

from icss.model.ast import (
    AddOperation,
    BodyItem,
    BoolLiteral,
    ClassSelector,
    ColorLiteral,
    Declaration,
    Expression,
    IdSelector,
    IfClause,
    Item,
    Literal,
    MultiplyOperation,
    Node,
    Operation,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    Selector,
    StyleRule,
    Stylesheet,
    SubtractOperation,
    TagSelector,
    VariableAssignment,
    VariableReference,
    literal_of,
)
from icss.model.diagnostic import Defect, Diagnostic, findings_for
from icss.model.types import ExpressionType

__all__ = [
    # ast
    "Node",
    "Stylesheet",
    "StyleRule",
    "TagSelector",
    "ClassSelector",
    "IdSelector",
    "Selector",
    "Declaration",
    "VariableAssignment",
    "VariableReference",
    "IfClause",
    "PixelLiteral",
    "PercentageLiteral",
    "ScalarLiteral",
    "ColorLiteral",
    "BoolLiteral",
    "Literal",
    "AddOperation",
    "SubtractOperation",
    "MultiplyOperation",
    "Operation",
    "Expression",
    "BodyItem",
    "Item",
    "literal_of",
    # types
    "ExpressionType",
    # diagnostic
    "Diagnostic",
    "Defect",
    "findings_for",
]
