"""Compile pipeline: parse, check, evaluate, generate."""

from __future__ import annotations

import logging

from icss.config import IcssConfig
from icss.generator import Generator
from icss.model.ast import Stylesheet
from icss.model.diagnostic import Diagnostic
from icss.parser import parse_icss
from icss.transforms import evaluate
from icss.validation import check

logger = logging.getLogger(__name__)


class CompilationError(Exception):
    """Raised when a stylesheet has diagnostics and the compiler is strict."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        super().__init__(
            f"Compilation failed with {len(diagnostics)} error(s): "
            + "; ".join(str(d) for d in diagnostics)
        )


class Compiler:
    """Run the whole toolchain on ICSS source text.

    In strict mode (the default) a stylesheet with any diagnostic is rejected
    before evaluation. Otherwise it is evaluated anyway and each defect is
    logged as a warning.
    """

    def __init__(self, config: IcssConfig | None = None) -> None:
        self.config = config or IcssConfig()

    def compile(self, source: str) -> str:
        return self.compile_stylesheet(parse_icss(source))

    def compile_stylesheet(self, stylesheet: Stylesheet) -> str:
        logger.info("Checking stylesheet with %d top-level item(s)", len(stylesheet.items))
        diagnostics = check(stylesheet)
        for diagnostic in diagnostics:
            logger.debug("%s", diagnostic)
        if diagnostics and self.config.strict:
            raise CompilationError(diagnostics)

        evaluation = evaluate(stylesheet)
        for defect in evaluation.defects:
            logger.warning("%s", defect)

        css = Generator(indent=self.config.indent).generate(evaluation.stylesheet)
        logger.info("Generated %d rule(s)", len(evaluation.stylesheet.items))
        return css


def compile_icss(source: str, config: IcssConfig | None = None) -> str:
    """Compile ICSS *source* to CSS text."""
    return Compiler(config).compile(source)
