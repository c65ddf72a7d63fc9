"""Type domain for ICSS expressions."""

from __future__ import annotations

from enum import Enum


class ExpressionType(Enum):
    """The static type of an expression. No implicit coercion between members."""

    COLOR = "color"
    PIXEL = "pixel"
    PERCENTAGE = "percentage"
    SCALAR = "scalar"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value
