"""CSS generator: renders an evaluated stylesheet to text.

The input must be the output of the evaluator. Every rule body may only
contain declarations, and every declaration value must be a literal.
"""

from __future__ import annotations

from icss.model.ast import LITERAL_TYPES, Declaration, StyleRule, Stylesheet

__all__ = ["Generator", "GeneratorError", "generate"]


class GeneratorError(Exception):
    """Raised when the tree still contains unevaluated nodes."""


class Generator:
    def __init__(self, indent: str = "  ") -> None:
        self.indent = indent

    def generate(self, stylesheet: Stylesheet) -> str:
        blocks = [self._render_rule(item) for item in stylesheet.items]
        return "\n".join(blocks)

    def _render_rule(self, rule: object) -> str:
        if not isinstance(rule, StyleRule):
            raise GeneratorError(
                f"Expected a style rule at top level, got {type(rule).__name__} "
                "(run the evaluator first)"
            )
        selectors = ", ".join(str(s) for s in rule.selectors)
        lines = [f"{selectors} {{"]
        for node in rule.body:
            lines.append(self.indent + self._render_declaration(node))
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _render_declaration(node: object) -> str:
        if not isinstance(node, Declaration):
            raise GeneratorError(
                f"Expected a declaration in rule body, got {type(node).__name__} "
                "(run the evaluator first)"
            )
        if not isinstance(node.expression, LITERAL_TYPES):
            raise GeneratorError(
                f"Declaration '{node.property}' has an unevaluated expression "
                f"{type(node.expression).__name__} (run the evaluator first)"
            )
        return f"{node.property}: {node.expression};"


def generate(stylesheet: Stylesheet, indent: str = "  ") -> str:
    """Render *stylesheet* as CSS."""
    return Generator(indent=indent).generate(stylesheet)
