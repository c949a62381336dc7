"""
Low-level node constructors.

One constructor per AST variant. Constructors assemble the token layout of a
node from already-built children; they never flatten, unwrap or parse. Use
``builder`` for the normalizing API.
"""

import math
from typing import Optional, Tuple, Union

from .ast import (
    CalcKeyword,
    CalcNode,
    CalcProduct,
    CalcProductNode,
    CalcSum,
    CalcSumNode,
    CalcValue,
    ClampNode,
    CustomPropertyNode,
    DimensionNode,
    DimensionNumberNode,
    DimensionUnitNode,
    ExpNode,
    FunctionNameNode,
    GroupNode,
    KeywordNode,
    MaxNode,
    MinNode,
    NumberNode,
    PercentageNode,
    PercentageNumberNode,
    PowNode,
    ProductOperator,
    RawNode,
    RoundingStrategyNode,
    RoundNode,
    RoundStrategy,
    SumOperator,
    TokenNode,
    VarNode,
)
from .errors import EmptyInputError, MissingArgumentError

Numeric = Union[int, float, str]

_OPEN = TokenNode("(")
_CLOSE = TokenNode(")")
_COMMA = TokenNode(",")
_PERCENT = TokenNode("%")
NONE_KEYWORD = KeywordNode("none")


def format_number(value: Numeric) -> str:
    """
    Converts a number to its CSS text.

    Strings are kept verbatim. Integral floats drop the trailing ``.0`` so
    that ``2.0`` renders as ``2``; other floats use the shortest repr.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


# ============================================================
# Values
# ============================================================


def number(value: Numeric) -> NumberNode:
    return NumberNode(format_number(value))


def dimension(value: Numeric, unit: str) -> DimensionNode:
    return DimensionNode(
        (DimensionNumberNode(format_number(value)), DimensionUnitNode(unit))
    )


def percentage(value: Numeric) -> PercentageNode:
    return PercentageNode((PercentageNumberNode(format_number(value)), _PERCENT))


def keyword(value: CalcKeyword) -> KeywordNode:
    return KeywordNode(value)


def raw(value: str) -> RawNode:
    """Wraps text that is emitted verbatim, e.g. ``var(--x)`` or ``env(...)``."""
    return RawNode(value)


def group(value: CalcSum) -> GroupNode:
    """Parenthesizes a sum so it can be used as a product operand."""
    return GroupNode((_OPEN, value, _CLOSE))


def var(name: str, fallback: Optional[CalcSum] = None) -> VarNode:
    """Creates ``var(name)`` or ``var(name,fallback)``."""
    return VarNode(
        (
            FunctionNameNode("var"),
            _OPEN,
            CustomPropertyNode(name),
            (_COMMA, fallback) if fallback is not None else None,
            _CLOSE,
        )
    )


# ============================================================
# Operator Chains
# ============================================================


def calc_sum(
    first: CalcProduct, *products: Tuple[SumOperator, CalcProduct]
) -> CalcSum:
    """
    Creates an addition/subtraction chain.

    Returns ``first`` unchanged when no further products are given, so a sum
    node always holds at least one operator.
    """
    if not products:
        return first
    return CalcSumNode(
        (
            first,
            tuple((TokenNode(f" {operator} "), product) for operator, product in products),
        )
    )


def calc_product(
    first: CalcValue, *values: Tuple[ProductOperator, CalcValue]
) -> CalcProduct:
    """
    Creates a multiplication/division chain.

    Returns ``first`` unchanged when no further values are given.
    """
    if not values:
        return first
    return CalcProductNode(
        (
            first,
            tuple((TokenNode(operator), value) for operator, value in values),
        )
    )


# ============================================================
# Math Functions
# ============================================================


def calc(sum: CalcSum) -> CalcNode:
    return CalcNode((FunctionNameNode("calc"), _OPEN, sum, _CLOSE))


def exp(sum: Optional[CalcSum]) -> ExpNode:
    if sum is None:
        raise MissingArgumentError("exp", "value")
    return ExpNode((FunctionNameNode("exp"), _OPEN, sum, _CLOSE))


def pow(base: Optional[CalcSum], exponent: Optional[CalcSum]) -> PowNode:
    if base is None:
        raise MissingArgumentError("pow", "base")
    if exponent is None:
        raise MissingArgumentError("pow", "exponent")
    return PowNode(
        (FunctionNameNode("pow"), _OPEN, base, _COMMA, exponent, _CLOSE)
    )


def round(
    strategy: Optional[RoundStrategy],
    value: Optional[CalcSum],
    interval: Optional[CalcSum] = None,
) -> RoundNode:
    """
    Creates ``round([strategy,] value[, interval])``.

    Strategy and interval are omitted from the output when None; CSS then
    applies its own defaults (``nearest`` and ``1``).
    """
    if value is None:
        raise MissingArgumentError("round", "value")
    return RoundNode(
        (
            FunctionNameNode("round"),
            _OPEN,
            (RoundingStrategyNode(strategy), _COMMA) if strategy is not None else None,
            value,
            (_COMMA, interval) if interval is not None else None,
            _CLOSE,
        )
    )


def _comma_separated(items: Tuple[CalcSum, ...]):
    first, rest = items[0], items[1:]
    return (first, tuple((_COMMA, item) for item in rest))


def min(*items: CalcSum) -> MinNode:
    if not items:
        raise EmptyInputError("min")
    return MinNode((FunctionNameNode("min"), _OPEN, _comma_separated(items), _CLOSE))


def max(*items: CalcSum) -> MaxNode:
    if not items:
        raise EmptyInputError("max")
    return MaxNode((FunctionNameNode("max"), _OPEN, _comma_separated(items), _CLOSE))


def clamp(
    min: Union[CalcSum, KeywordNode],
    preferred: CalcSum,
    max: Union[CalcSum, KeywordNode],
) -> ClampNode:
    """Creates ``clamp(min,preferred,max)``; pass ``NONE_KEYWORD`` for an open bound."""
    return ClampNode(
        (
            FunctionNameNode("clamp"),
            _OPEN,
            min,
            _COMMA,
            preferred,
            _COMMA,
            max,
            _CLOSE,
        )
    )
