"""Lark Transformer that converts an ICSS parse tree into the AST model."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError, VisitError
from lark.tree import Meta

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
    MultiplyOperation,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    StyleRule,
    Stylesheet,
    SubtractOperation,
    TagSelector,
    VariableAssignment,
    VariableReference,
)
from icss.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


def _pos(meta: Meta) -> dict[str, int | None]:
    """Source position keywords for a node; empty rules have no position."""
    return {"line": getattr(meta, "line", None), "column": getattr(meta, "column", None)}


@v_args(meta=True)
class IcssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into ICSS AST nodes."""

    # ---- literals ----

    def pixel(self, meta: Meta, items: list[Token]) -> PixelLiteral:
        return PixelLiteral(int(str(items[0])[:-2]), **_pos(meta))

    def percentage(self, meta: Meta, items: list[Token]) -> PercentageLiteral:
        return PercentageLiteral(int(str(items[0])[:-1]), **_pos(meta))

    def scalar(self, meta: Meta, items: list[Token]) -> ScalarLiteral:
        return ScalarLiteral(int(items[0]), **_pos(meta))

    def color(self, meta: Meta, items: list[Token]) -> ColorLiteral:
        return ColorLiteral(str(items[0]), **_pos(meta))

    def true_literal(self, meta: Meta, items: list[Token]) -> BoolLiteral:
        return BoolLiteral(True, **_pos(meta))

    def false_literal(self, meta: Meta, items: list[Token]) -> BoolLiteral:
        return BoolLiteral(False, **_pos(meta))

    def variable_reference(self, meta: Meta, items: list[Token]) -> VariableReference:
        return VariableReference(str(items[0]), **_pos(meta))

    # ---- operations ----

    def add(self, meta: Meta, items: list[Expression]) -> AddOperation:
        return AddOperation(items[0], items[1], **_pos(meta))

    def subtract(self, meta: Meta, items: list[Expression]) -> SubtractOperation:
        return SubtractOperation(items[0], items[1], **_pos(meta))

    def multiply(self, meta: Meta, items: list[Expression]) -> MultiplyOperation:
        return MultiplyOperation(items[0], items[1], **_pos(meta))

    # ---- selectors ----

    def tag_selector(self, meta: Meta, items: list[Token]) -> TagSelector:
        return TagSelector(str(items[0]), **_pos(meta))

    def class_selector(self, meta: Meta, items: list[Token]) -> ClassSelector:
        return ClassSelector(str(items[0])[1:], **_pos(meta))

    def id_selector(self, meta: Meta, items: list[Token]) -> IdSelector:
        return IdSelector(str(items[0])[1:], **_pos(meta))

    # ---- statements ----

    def declaration(self, meta: Meta, items: list[object]) -> Declaration:
        return Declaration(str(items[0]), items[1], **_pos(meta))  # type: ignore[arg-type]

    def variable_assignment(self, meta: Meta, items: list[object]) -> VariableAssignment:
        name = str(items[0])
        if "-" in name:
            pos = _pos(meta)
            raise ParseError(
                f"variable name '{name}' must not contain '-'", pos["line"], pos["column"]
            )
        return VariableAssignment(name, items[1], **_pos(meta))  # type: ignore[arg-type]

    def body(self, meta: Meta, items: list[BodyItem]) -> tuple[BodyItem, ...]:
        return tuple(items)

    def else_clause(self, meta: Meta, items: list[tuple[BodyItem, ...]]) -> tuple[BodyItem, ...]:
        return items[0]

    def if_clause(self, meta: Meta, items: list[object]) -> IfClause:
        # Items are: condition, body, optional else body
        else_body = items[2] if len(items) > 2 else None
        return IfClause(items[0], items[1], else_body, **_pos(meta))  # type: ignore[arg-type]

    def style_rule(self, meta: Meta, items: list[object]) -> StyleRule:
        # Items are: selector, selector, ..., body
        return StyleRule(tuple(items[:-1]), items[-1], **_pos(meta))  # type: ignore[arg-type]

    def stylesheet(self, meta: Meta, items: list[object]) -> Stylesheet:
        return Stylesheet(tuple(items), **_pos(meta))  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="stylesheet",
        propagate_positions=True,
    )


def parse_icss(source: str) -> Stylesheet:
    """Parse ICSS source text into a :class:`Stylesheet`."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        raise ParseError.from_lark(e) from e
    try:
        return IcssTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
