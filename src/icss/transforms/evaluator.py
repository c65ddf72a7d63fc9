"""Evaluator transform: folds expressions and removes variables and conditionals.

The result is a new stylesheet whose items are style rules, and whose rule
bodies hold only declarations with literal expressions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import assert_never

from icss.model.ast import (
    AddOperation,
    BodyItem,
    BoolLiteral,
    Declaration,
    Expression,
    IfClause,
    LITERAL_TYPES,
    Item,
    Literal,
    MultiplyOperation,
    Node,
    ScalarLiteral,
    StyleRule,
    Stylesheet,
    SubtractOperation,
    VariableAssignment,
    VariableReference,
    literal_of,
)
from icss.model.diagnostic import Defect
from icss.scope import ScopeStack
from icss.validation.rules import OperandTypeError, operation_type

logger = logging.getLogger(__name__)

# Fallback value substituted for anything that cannot be evaluated.
FALLBACK = ScalarLiteral(0)


class Evaluator:
    """Evaluate a stylesheet against nested lexical scopes.

    Meant to run on a stylesheet that passed checking, but never fails on a
    semantic problem: each one is recorded in :attr:`defects` and replaced by
    ``ScalarLiteral(0)`` so that a complete tree is still produced.
    """

    def __init__(self) -> None:
        self._scopes: ScopeStack[Literal] = ScopeStack()
        self.defects: list[Defect] = []

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        self._scopes.clear()
        self.defects = []
        self._scopes.push()
        try:
            items = self._transform_block(stylesheet.items)
        finally:
            self._scopes.clear()
        if self.defects:
            logger.debug("Evaluated stylesheet with %d defect(s)", len(self.defects))
        return replace(stylesheet, items=tuple(items))

    # ---- blocks ----

    def _transform_block(self, nodes: tuple[Item | BodyItem, ...]) -> list[Node]:
        out: list[Node] = []
        for node in nodes:
            if isinstance(node, VariableAssignment):
                self._scopes.bind(node.name, self._eval(node.expression))
            elif isinstance(node, IfClause):
                out.extend(self._transform_if_clause(node))
            elif isinstance(node, Declaration):
                out.append(replace(node, expression=self._eval(node.expression)))
            elif isinstance(node, StyleRule):
                with self._scopes.child():
                    body = self._transform_block(node.body)
                out.append(replace(node, body=tuple(body)))
            else:
                assert_never(node)
        return out

    def _transform_if_clause(self, clause: IfClause) -> list[Node]:
        condition = self._eval(clause.condition)
        if isinstance(condition, BoolLiteral):
            chosen = clause.body if condition.value else clause.else_body
        else:
            self._defect(
                "condition_type",
                f"if-condition must be bool, got {condition.expression_type}",
                clause,
            )
            chosen = clause.else_body
        if chosen is None:
            return []
        with self._scopes.child():
            return self._transform_block(chosen)

    # ---- expressions ----

    def _eval(self, expression: Expression) -> Literal:
        if isinstance(expression, LITERAL_TYPES):
            return expression
        if isinstance(expression, VariableReference):
            value = self._scopes.lookup(expression.name)
            if value is None:
                self._defect(
                    "unknown_variable", f"unknown variable: {expression.name}", expression
                )
                return FALLBACK
            return value
        if isinstance(expression, (AddOperation, SubtractOperation, MultiplyOperation)):
            left = self._eval(expression.lhs)
            right = self._eval(expression.rhs)
            try:
                result_type = operation_type(
                    expression, left.expression_type, right.expression_type
                )
            except OperandTypeError as exc:
                self._defect("operand_types", str(exc), expression)
                return FALLBACK
            return literal_of(result_type, _apply(expression, left.value, right.value))
        assert_never(expression)

    def _defect(self, rule: str, message: str, node: Node) -> None:
        self.defects.append(Defect(rule=rule, message=message, node=node))


def _apply(operation: AddOperation | SubtractOperation | MultiplyOperation, a, b) -> int:
    if isinstance(operation, AddOperation):
        return a + b
    if isinstance(operation, SubtractOperation):
        return a - b
    return a * b


@dataclass
class Evaluation:
    """The flattened stylesheet together with any defects found on the way."""

    stylesheet: Stylesheet
    defects: list[Defect] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.defects


def evaluate(stylesheet: Stylesheet) -> Evaluation:
    """Evaluate *stylesheet* with a fresh :class:`Evaluator`."""
    evaluator = Evaluator()
    result = evaluator.apply(stylesheet)
    return Evaluation(stylesheet=result, defects=evaluator.defects)
