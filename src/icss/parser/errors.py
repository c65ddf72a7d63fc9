"""Parser error types."""

from __future__ import annotations

from lark.exceptions import LarkError


class ParseError(Exception):
    """Raised when ICSS source cannot be parsed.

    ``line`` and ``column`` are 1-based; either may be ``None`` when the
    position is unknown (for example at end of input).
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    @classmethod
    def from_lark(cls, error: LarkError) -> ParseError:
        """Wrap a Lark error, keeping only the headline of its message."""
        line = getattr(error, "line", None)
        column = getattr(error, "column", None)
        if line is not None and line < 1:
            line = column = None
        headline = str(error).strip().splitlines()[0] if str(error).strip() else "syntax error"
        return cls(headline, line=line, column=column)
