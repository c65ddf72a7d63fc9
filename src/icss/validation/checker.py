"""Scoped static type checker for ICSS stylesheets."""

from __future__ import annotations

import logging
from typing import assert_never

from icss.model.ast import (
    AddOperation,
    BodyItem,
    BoolLiteral,
    ColorLiteral,
    Declaration,
    Expression,
    IfClause,
    Item,
    MultiplyOperation,
    Node,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    StyleRule,
    Stylesheet,
    SubtractOperation,
    VariableAssignment,
    VariableReference,
)
from icss.model.diagnostic import Diagnostic
from icss.model.types import ExpressionType
from icss.scope import ScopeStack
from icss.validation.rules import (
    OperandTypeError,
    describe_types,
    expected_types,
    is_allowed_property,
    operation_type,
)

logger = logging.getLogger(__name__)


class Checker:
    """Walks a stylesheet and reports every type and scoping violation.

    ``check`` never raises for an invalid program and never stops at the
    first problem: a node with a diagnostic is still descended into.
    Diagnostics are returned as a list; each one holds the offending node.
    """

    def __init__(self) -> None:
        self._scopes: ScopeStack[ExpressionType] = ScopeStack()
        self._diagnostics: list[Diagnostic] = []

    def check(self, stylesheet: Stylesheet) -> list[Diagnostic]:
        self._scopes.clear()
        self._diagnostics = []
        self._scopes.push()
        try:
            for item in stylesheet.items:
                self._check_node(item)
        finally:
            self._scopes.clear()
        logger.debug("Checked stylesheet: %d diagnostic(s)", len(self._diagnostics))
        return list(self._diagnostics)

    # ---- statements ----

    def _check_node(self, node: Item | BodyItem) -> None:
        if isinstance(node, StyleRule):
            self._check_style_rule(node)
        elif isinstance(node, VariableAssignment):
            self._check_variable_assignment(node)
        elif isinstance(node, Declaration):
            self._check_declaration(node)
        elif isinstance(node, IfClause):
            self._check_if_clause(node)
        else:
            assert_never(node)

    def _check_style_rule(self, rule: StyleRule) -> None:
        with self._scopes.child():
            for node in rule.body:
                self._check_node(node)

    def _check_variable_assignment(self, assignment: VariableAssignment) -> None:
        expression_type = self._infer(assignment.expression)
        if expression_type is None:
            self._report(
                "unresolved_assignment",
                f"cannot determine the type of the expression assigned to '{assignment.name}'",
                assignment,
            )
            return
        self._scopes.bind(assignment.name, expression_type)

    def _check_declaration(self, declaration: Declaration) -> None:
        expression_type = self._infer(declaration.expression)
        if not is_allowed_property(declaration.property):
            self._report(
                "property_not_allowed",
                f"property '{declaration.property}' is not allowed",
                declaration,
            )
            return
        allowed = expected_types(declaration.property)
        if expression_type in allowed or self._is_unknown_reference(
            declaration.expression, expression_type
        ):
            return
        self._report(
            "property_type",
            f"property '{declaration.property.lower()}' expects {describe_types(allowed)}, "
            f"got {expression_type or 'unknown'}",
            declaration,
        )

    def _check_if_clause(self, clause: IfClause) -> None:
        condition_type = self._infer(clause.condition)
        if condition_type is not ExpressionType.BOOL and not self._is_unknown_reference(
            clause.condition, condition_type
        ):
            self._report(
                "condition_type",
                f"if-condition must be bool, got {condition_type or 'unknown'}",
                clause,
            )
        with self._scopes.child():
            for node in clause.body:
                self._check_node(node)
        if clause.else_body is not None:
            with self._scopes.child():
                for node in clause.else_body:
                    self._check_node(node)

    # ---- expressions ----

    def _infer(self, expression: Expression) -> ExpressionType | None:
        """Infer the type of *expression*; ``None`` when it cannot be typed."""
        if isinstance(
            expression,
            (PixelLiteral, PercentageLiteral, ScalarLiteral, ColorLiteral, BoolLiteral),
        ):
            return expression.expression_type
        if isinstance(expression, VariableReference):
            resolved = self._scopes.lookup(expression.name)
            if resolved is None:
                self._report(
                    "unknown_variable", f"unknown variable: {expression.name}", expression
                )
            return resolved
        if isinstance(expression, (AddOperation, SubtractOperation, MultiplyOperation)):
            left = self._infer(expression.lhs)
            right = self._infer(expression.rhs)
            if left is None or right is None:
                self._report(
                    "operand_types",
                    f"invalid operand(s) for {expression.symbol}",
                    expression,
                )
                return None
            try:
                return operation_type(expression, left, right)
            except OperandTypeError as exc:
                self._report("operand_types", str(exc), expression)
                return None
        assert_never(expression)

    # ---- helpers ----

    @staticmethod
    def _is_unknown_reference(
        expression: Expression, expression_type: ExpressionType | None
    ) -> bool:
        # An unresolved bare reference already carries its own diagnostic.
        return expression_type is None and isinstance(expression, VariableReference)

    def _report(self, rule: str, message: str, node: Node) -> None:
        self._diagnostics.append(Diagnostic(rule=rule, message=message, node=node))
