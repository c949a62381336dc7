"""
CSS math expression builder.

This module builds ``calc()``, ``min()``, ``max()``, ``clamp()``, ``exp()``,
``pow()``, ``round()`` and ``var()`` expressions as immutable trees and
serializes them back to CSS text.
"""

from . import ast, create

# Normalizing builder
from .builder import (
    AnyExpression,
    AnyMaybeExpression,
    add,
    clamp,
    divide,
    exp,
    max,
    min,
    multiply,
    pow,
    resolve_operand,
    round,
    round_down,
    round_nearest,
    round_to_zero,
    round_up,
    subtract,
    value,
)
from .errors import (
    CalcError,
    EmptyInputError,
    LimitExceededError,
    MissingArgumentError,
)
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    check_ast_depth,
    check_ast_node_count,
    check_tree,
)
from .serialize import serialize

# min, max, pow and round shadow builtins, so they are left out of __all__
# and reachable as csscalc.min etc.
__all__ = [
    # Modules
    "ast",
    "create",
    # Builder
    "AnyExpression",
    "AnyMaybeExpression",
    "add",
    "subtract",
    "multiply",
    "divide",
    "clamp",
    "exp",
    "round_nearest",
    "round_up",
    "round_down",
    "round_to_zero",
    "resolve_operand",
    "value",
    # Serializer
    "serialize",
    # Errors
    "CalcError",
    "EmptyInputError",
    "MissingArgumentError",
    "LimitExceededError",
    # Limits
    "ExpressionLimits",
    "DEFAULT_EXPRESSION_LIMITS",
    "check_ast_depth",
    "check_ast_node_count",
    "check_tree",
]
