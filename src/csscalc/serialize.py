"""
Serializer for CSS math expression trees.

Produces the CSS text of a node by concatenating its string tokens in source
order. Separators and spacing live in the tokens themselves, so the walk
inserts nothing of its own.
"""

from typing import List

from .ast import AstNodeBase, AstValue


def serialize(node: AstNodeBase) -> str:
    """
    Serializes an AST node to CSS.

    The walk uses an explicit stack instead of recursion, so arbitrarily deep
    trees serialize without hitting the interpreter's recursion limit.
    """
    parts: List[str] = []
    stack: List[AstValue] = [node]

    while stack:
        current = stack.pop()
        if current is None:
            continue
        if isinstance(current, tuple):
            stack.extend(reversed(current))
            continue
        value = getattr(current, "value")
        if isinstance(value, str):
            parts.append(value)
            continue
        stack.append(value)

    return "".join(parts)
