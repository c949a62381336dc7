"""
Size limits for expression trees.

Builders and the serializer accept trees of any size. Callers that compose
expressions from untrusted input can guard with ``check_tree`` before
serializing.
"""

from dataclasses import dataclass
from typing import Optional

from .ast import AstNodeBase, calculate_ast_depth, count_ast_nodes
from .errors import LimitExceededError


@dataclass(frozen=True)
class ExpressionLimits:
    """Expression limits configuration."""

    # Maximum AST depth (nesting level), syntax tokens included
    max_ast_depth: int = 256

    # Maximum number of AST nodes, syntax tokens included
    max_ast_nodes: int = 4096


DEFAULT_EXPRESSION_LIMITS = ExpressionLimits()


def check_ast_depth(depth: int, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates AST depth."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if depth > limits.max_ast_depth:
        raise LimitExceededError("max_ast_depth", limits.max_ast_depth, depth)


def check_ast_node_count(
    count: int, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates AST node count."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if count > limits.max_ast_nodes:
        raise LimitExceededError("max_ast_nodes", limits.max_ast_nodes, count)


def check_tree(node: AstNodeBase, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates both node count and depth of a tree."""
    check_ast_node_count(count_ast_nodes(node), limits)
    check_ast_depth(calculate_ast_depth(node), limits)
