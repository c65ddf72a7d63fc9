"""Type rules for ICSS declarations and operations.

These are pure functions over ``ExpressionType`` values. The checker applies
them to inferred types and the evaluator applies them to the types of folded
literals, so both passes accept exactly the same operand combinations.
"""

from __future__ import annotations

from icss.model.ast import (
    AddOperation,
    MultiplyOperation,
    Operation,
    SubtractOperation,
)
from icss.model.types import ExpressionType


# ---------------------------------------------------------------------------
# Known value sets
# ---------------------------------------------------------------------------

_SIZE_TYPES = frozenset({ExpressionType.PIXEL, ExpressionType.PERCENTAGE})
_COLOR_TYPES = frozenset({ExpressionType.COLOR})

# Property name (lowercase) -> types its value may have.
PROPERTY_TYPES: dict[str, frozenset[ExpressionType]] = {
    "color": _COLOR_TYPES,
    "background-color": _COLOR_TYPES,
    "width": _SIZE_TYPES,
    "height": _SIZE_TYPES,
}

ALLOWED_PROPERTIES = frozenset(PROPERTY_TYPES)

# Types that support + and - against a value of the same type.
_ADDITIVE_TYPES = frozenset({
    ExpressionType.PIXEL,
    ExpressionType.PERCENTAGE,
    ExpressionType.SCALAR,
})


class OperandTypeError(ValueError):
    """The operand types of an operation do not combine."""


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


def is_allowed_property(name: str) -> bool:
    """Property names are matched case-insensitively."""
    return name.lower() in ALLOWED_PROPERTIES


def expected_types(name: str) -> frozenset[ExpressionType]:
    """Types accepted by property *name*; empty for unknown properties."""
    return PROPERTY_TYPES.get(name.lower(), frozenset())


def describe_types(types: frozenset[ExpressionType]) -> str:
    """Render an expected-type set as ``pixel or percentage``."""
    order = list(ExpressionType)
    return " or ".join(str(t) for t in sorted(types, key=order.index))


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def multiply_type(left: ExpressionType, right: ExpressionType) -> ExpressionType:
    if left is ExpressionType.SCALAR and right in _SIZE_TYPES:
        return right
    if left in _SIZE_TYPES and right is ExpressionType.SCALAR:
        return left
    if left is ExpressionType.SCALAR and right is ExpressionType.SCALAR:
        return ExpressionType.SCALAR
    if ExpressionType.COLOR in (left, right):
        raise OperandTypeError("multiplication with color is not allowed")
    raise OperandTypeError(f"invalid multiplication: {left} * {right}")


def additive_type(
    left: ExpressionType, right: ExpressionType, symbol: str = "+"
) -> ExpressionType:
    if ExpressionType.COLOR in (left, right):
        raise OperandTypeError("color is not allowed in addition or subtraction")
    if left is right and left in _ADDITIVE_TYPES:
        return left
    raise OperandTypeError(
        f"invalid addition/subtraction: {left} {symbol} {right} are not compatible"
    )


def operation_type(
    operation: Operation, left: ExpressionType, right: ExpressionType
) -> ExpressionType:
    """Result type of *operation* applied to operands of the given types.

    Raises :class:`OperandTypeError` when the combination is not allowed.
    """
    if isinstance(operation, MultiplyOperation):
        return multiply_type(left, right)
    if isinstance(operation, (AddOperation, SubtractOperation)):
        return additive_type(left, right, operation.symbol)
    raise TypeError(f"Not an operation: {type(operation).__name__}")
