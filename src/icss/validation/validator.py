"""Stylesheet validator: runs the type checker and reports diagnostics."""

from __future__ import annotations

from icss.model.ast import Stylesheet
from icss.model.diagnostic import Diagnostic
from icss.validation.checker import Checker


class CheckError(Exception):
    """Raised when checking a stylesheet produces diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics]
        super().__init__(
            f"Check failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def check(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Type-check *stylesheet* with a fresh :class:`Checker`.

    Returns the full list of diagnostics; empty means the program is valid.
    """
    return Checker().check(stylesheet)


def check_or_raise(stylesheet: Stylesheet) -> None:
    """Run the checker; raises :class:`CheckError` if any diagnostic exists."""
    diagnostics = check(stylesheet)
    if diagnostics:
        raise CheckError(diagnostics)
