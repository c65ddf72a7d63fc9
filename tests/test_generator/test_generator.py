"""Tests for the CSS generator."""

from pathlib import Path

import pytest

from icss.generator import Generator, GeneratorError, generate
from icss.model import (
    BoolLiteral,
    ClassSelector,
    ColorLiteral,
    Declaration,
    IdSelector,
    IfClause,
    PercentageLiteral,
    PixelLiteral,
    ScalarLiteral,
    StyleRule,
    Stylesheet,
    TagSelector,
    VariableAssignment,
    VariableReference,
)
from icss.parser import parse_icss
from icss.transforms import evaluate

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _rule(*body, selectors=(TagSelector("p"),)) -> StyleRule:
    return StyleRule(tuple(selectors), tuple(body))


class TestRendering:
    def test_empty_stylesheet(self):
        assert generate(Stylesheet(())) == ""

    def test_single_rule(self):
        sheet = Stylesheet((_rule(Declaration("color", ColorLiteral("#ff0000")), selectors=[TagSelector("a")]),))
        assert generate(sheet) == "a {\n  color: #ff0000;\n}\n"

    def test_literal_values(self):
        sheet = Stylesheet(
            (
                _rule(
                    Declaration("width", PixelLiteral(10)),
                    Declaration("height", PercentageLiteral(50)),
                    Declaration("x", ScalarLiteral(3)),
                    Declaration("y", BoolLiteral(False)),
                ),
            )
        )
        assert generate(sheet) == "p {\n  width: 10px;\n  height: 50%;\n  x: 3;\n  y: false;\n}\n"

    def test_multiple_selectors(self):
        sheet = Stylesheet((_rule(selectors=[TagSelector("p"), ClassSelector("a"), IdSelector("b")]),))
        assert generate(sheet) == "p, .a, #b {\n}\n"

    def test_rules_separated_by_blank_line(self):
        sheet = Stylesheet((_rule(), _rule(selectors=[TagSelector("a")])))
        assert generate(sheet) == "p {\n}\n\na {\n}\n"

    def test_custom_indent(self):
        sheet = Stylesheet((_rule(Declaration("width", PixelLiteral(1))),))
        assert Generator(indent="\t").generate(sheet) == "p {\n\twidth: 1px;\n}\n"

    def test_property_case_preserved(self):
        sheet = Stylesheet((_rule(Declaration("Width", PixelLiteral(1))),))
        assert "Width: 1px;" in generate(sheet)

    def test_level3_fixture(self):
        sheet = evaluate(parse_icss((FIXTURES / "level3.icss").read_text())).stylesheet
        assert generate(sheet) == (FIXTURES / "level3.css").read_text()


class TestContractViolations:
    def test_unevaluated_expression(self):
        sheet = Stylesheet((_rule(Declaration("width", VariableReference("X"))),))
        with pytest.raises(GeneratorError, match="unevaluated expression"):
            generate(sheet)

    def test_if_clause_in_body(self):
        sheet = Stylesheet((_rule(IfClause(BoolLiteral(True))),))
        with pytest.raises(GeneratorError, match="IfClause"):
            generate(sheet)

    def test_top_level_assignment(self):
        sheet = Stylesheet((VariableAssignment("X", PixelLiteral(1)),))
        with pytest.raises(GeneratorError, match="VariableAssignment"):
            generate(sheet)
