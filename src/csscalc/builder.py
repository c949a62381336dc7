"""
High-level, normalizing expression builder.

The functions here accept any mix of numbers, strings, previously built nodes
and ``None`` placeholders, and fold them into a single minimal AST node:

- nested sums and products are flattened into one operator chain,
- nested ``calc()`` wrappers are unwrapped so only the outermost survives,
- a sum used as a product operand is parenthesized,
- subtracting a merged sum distributes the minus over its terms.

``None`` items are dropped so that optional terms can be composed inline::

    add("100%", "-1px" if bordered else None)

Builders never mutate their inputs; every call returns new nodes.
"""

import logging
import re
from typing import List, Literal, Optional, Tuple, Union, cast

from . import create
from .ast import (
    CalcNode,
    CalcProduct,
    CalcProductNode,
    CalcSum,
    CalcSumNode,
    CalcValue,
    ClampNode,
    ExpNode,
    KeywordNode,
    MaxNode,
    MinNode,
    PowNode,
    ProductOperator,
    RoundNode,
    RoundStrategy,
    SumOperator,
)
from .errors import EmptyInputError, MissingArgumentError

logger = logging.getLogger(__name__)

AnyExpression = Union[CalcSum, int, float, str]
AnyMaybeExpression = Optional[AnyExpression]

# Leading CSS number: sign, decimal or integer mantissa, optional exponent.
# The decimal alternative comes first so "12.5" is not cut at "12".
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d*\.\d+|\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _is_scalar(item: object) -> bool:
    return isinstance(item, (str, int, float))


def _flip(operator: SumOperator) -> SumOperator:
    return "-" if operator == "+" else "+"


def _unwrap_calc(item: CalcSum) -> CalcSum:
    while item.kind == "calc":
        item = cast(CalcNode, item).sum
    return item


# ============================================================
# Value Parsing
# ============================================================


def value(item: Union[int, float, str]) -> CalcValue:
    """
    Converts a bare number or string into a leaf node.

    Numbers become ``number`` nodes. Strings are scanned for a leading CSS
    number; the remainder decides the variant: nothing for ``number``, ``%``
    for ``percentage``, anything else is taken verbatim as a unit. Strings
    without a leading number (``var(--x)``, ``auto``) become ``raw`` nodes.
    """
    if not isinstance(item, str):
        return create.number(item)

    match = _NUMBER_PREFIX.match(item)
    if match is None:
        return create.raw(item)

    number_part = match.group(0)
    unit = item[match.end():]
    if unit == "":
        return create.number(number_part)
    if unit == "%":
        return create.percentage(number_part)
    return create.dimension(number_part, unit)


def resolve_operand(item: AnyMaybeExpression) -> Optional[CalcSum]:
    """
    Resolves a single function argument.

    Scalars are parsed with ``value``, a ``calc()`` node is replaced by the
    sum it wraps, None stays None and any other node is used as is.
    """
    if item is None:
        return None
    if _is_scalar(item):
        return value(cast(Union[int, float, str], item))
    node = cast(CalcSum, item)
    if node.kind == "calc":
        return cast(CalcNode, node).sum
    return node


def _require_operand(item: AnyMaybeExpression, function_name: str, argument: str) -> CalcSum:
    resolved = resolve_operand(item)
    if resolved is None:
        logger.debug(
            "missing_required_argument",
            extra={"function_name": function_name, "argument": argument},
        )
        raise MissingArgumentError(function_name, argument)
    return resolved


def _resolve_operands(items: Tuple[AnyMaybeExpression, ...], function_name: str) -> List[CalcSum]:
    resolved = [r for r in (resolve_operand(item) for item in items) if r is not None]
    if not resolved:
        logger.debug("empty_input", extra={"function_name": function_name})
        raise EmptyInputError(function_name)
    return resolved


# ============================================================
# Sums and Products
# ============================================================


def _add_or_subtract(
    operator: SumOperator,
    items: Tuple[AnyMaybeExpression, ...],
    function_name: str,
) -> CalcNode:
    resolved: List[Tuple[SumOperator, CalcProduct]] = []

    for item in items:
        if item is None:
            continue
        if _is_scalar(item):
            resolved.append((operator, value(cast(Union[int, float, str], item))))
            continue

        node = _unwrap_calc(cast(CalcSum, item))
        if node.kind == "calc-sum":
            sum_node = cast(CalcSumNode, node)
            # The first contributed term only takes the outer sign; later
            # subtracted sums distribute the minus over their own terms.
            is_first = not resolved
            resolved.append((operator, sum_node.first))
            for inner_operator, product in sum_node.operations:
                if operator == "-" and not is_first:
                    inner_operator = _flip(inner_operator)
                resolved.append((inner_operator, product))
            continue

        resolved.append((operator, cast(CalcProduct, node)))

    if not resolved:
        logger.debug("empty_input", extra={"function_name": function_name})
        raise EmptyInputError(function_name)

    (_, first), rest = resolved[0], resolved[1:]
    logger.debug(
        "calc_sum_merged",
        extra={"function_name": function_name, "terms": len(resolved)},
    )
    return create.calc(create.calc_sum(first, *rest))


def add(*items: AnyMaybeExpression) -> CalcNode:
    """Creates ``calc(a + b + ...)``, merging nested sums and calc() wrappers."""
    return _add_or_subtract("+", items, "add")


def subtract(*items: AnyMaybeExpression) -> CalcNode:
    """
    Creates ``calc(a - b - ...)``.

    A sum passed after the first operand has its inner signs flipped, so
    ``subtract(10, sum(5 + 2 - 1))`` yields ``calc(10 - 5 - 2 + 1)``.
    """
    return _add_or_subtract("-", items, "subtract")


def _multiply_or_divide(
    operator: ProductOperator,
    items: Tuple[AnyMaybeExpression, ...],
    function_name: str,
) -> CalcNode:
    resolved: List[Tuple[ProductOperator, CalcValue]] = []

    for item in items:
        if item is None:
            continue
        if _is_scalar(item):
            resolved.append((operator, value(cast(Union[int, float, str], item))))
            continue

        node = _unwrap_calc(cast(CalcSum, item))
        if node.kind == "calc-product":
            product_node = cast(CalcProductNode, node)
            resolved.append((operator, product_node.first))
            resolved.extend(product_node.operations)
            continue
        if node.kind == "calc-sum":
            resolved.append((operator, create.group(cast(CalcSumNode, node))))
            continue

        resolved.append((operator, cast(CalcValue, node)))

    if not resolved:
        logger.debug("empty_input", extra={"function_name": function_name})
        raise EmptyInputError(function_name)

    (_, first), rest = resolved[0], resolved[1:]
    logger.debug(
        "calc_product_merged",
        extra={"function_name": function_name, "factors": len(resolved)},
    )
    return create.calc(create.calc_product(first, *rest))


def multiply(*items: AnyMaybeExpression) -> CalcNode:
    """Creates ``calc(a*b*...)``; sum operands are parenthesized."""
    return _multiply_or_divide("*", items, "multiply")


def divide(*items: AnyMaybeExpression) -> CalcNode:
    """Creates ``calc(a/b/...)``; sum operands are parenthesized."""
    return _multiply_or_divide("/", items, "divide")


# ============================================================
# Comparison Functions
# ============================================================


def min(*items: AnyMaybeExpression) -> MinNode:
    return create.min(*_resolve_operands(items, "min"))


def max(*items: AnyMaybeExpression) -> MaxNode:
    return create.max(*_resolve_operands(items, "max"))


def _resolve_bound(
    item: Union[AnyMaybeExpression, Literal["none"]], argument: str
) -> Union[CalcSum, KeywordNode]:
    if item == "none":
        return create.NONE_KEYWORD
    return _require_operand(item, "clamp", argument)


def clamp(
    min: Union[AnyExpression, Literal["none"]],
    preferred: AnyExpression,
    max: Union[AnyExpression, Literal["none"]],
) -> ClampNode:
    """
    Creates ``clamp(min,preferred,max)``.

    Either bound may be the string ``"none"`` to leave that side open.
    """
    return create.clamp(
        _resolve_bound(min, "min"),
        _require_operand(preferred, "clamp", "preferred"),
        _resolve_bound(max, "max"),
    )


# ============================================================
# Exponential and Stepped-Value Functions
# ============================================================


def exp(item: AnyMaybeExpression) -> ExpNode:
    return create.exp(_require_operand(item, "exp", "value"))


def pow(base: AnyMaybeExpression, exponent: AnyMaybeExpression) -> PowNode:
    return create.pow(
        _require_operand(base, "pow", "base"),
        _require_operand(exponent, "pow", "exponent"),
    )


def round(
    strategy: Optional[RoundStrategy],
    item: AnyMaybeExpression,
    interval: AnyMaybeExpression = None,
) -> RoundNode:
    """
    Creates ``round([strategy,] value[, interval])``.

    No default strategy is filled in: with ``strategy=None`` the output
    omits it and CSS rounds to nearest.
    """
    return create.round(
        strategy,
        _require_operand(item, "round", "value"),
        resolve_operand(interval),
    )


def round_nearest(item: AnyMaybeExpression, interval: AnyMaybeExpression = None) -> RoundNode:
    return round("nearest", item, interval)


def round_up(item: AnyMaybeExpression, interval: AnyMaybeExpression = None) -> RoundNode:
    return round("up", item, interval)


def round_down(item: AnyMaybeExpression, interval: AnyMaybeExpression = None) -> RoundNode:
    return round("down", item, interval)


def round_to_zero(item: AnyMaybeExpression, interval: AnyMaybeExpression = None) -> RoundNode:
    return round("to-zero", item, interval)
