"""
Abstract Syntax Tree (AST) node types for CSS math expressions.

The AST is produced by the constructors in ``create`` (directly or through the
normalizing ``builder``) and consumed by ``serialize``.

Every node has a ``kind`` label and a ``value``. The value is either a string
token or a tuple of children, possibly nested, possibly holding ``None`` where
optional syntax is absent. Serializing a node is a left-to-right
concatenation of its string tokens, so the tuple layout doubles as the CSS
grammar: separators and parentheses are token nodes of their own.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Iterator, List, Literal, Optional, Tuple, Union

# ============================================================
# Operator and Keyword Types
# ============================================================

SumOperator = Literal["+", "-"]

ProductOperator = Literal["*", "/"]

CalcKeyword = Literal["e", "pi", "infinity", "-infinity", "NaN"]

RoundStrategy = Literal["nearest", "up", "down", "to-zero"]


# ============================================================
# Syntax Nodes
# ============================================================


@dataclass(frozen=True)
class AstNodeBase(ABC):
    """Base class for all AST nodes."""

    @property
    def kind(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class TokenNode(AstNodeBase):
    """Punctuation or operator token, e.g. ``(``, ``,`` or `` + ``."""

    value: str

    @property
    def kind(self) -> Literal["token"]:
        return "token"


@dataclass(frozen=True)
class FunctionNameNode(AstNodeBase):
    """Name of a CSS function, without the opening parenthesis."""

    value: str

    @property
    def kind(self) -> Literal["function"]:
        return "function"


@dataclass(frozen=True)
class CustomPropertyNode(AstNodeBase):
    """Custom property name referenced by ``var()``, e.g. ``--gap``."""

    value: str

    @property
    def kind(self) -> Literal["custom-property"]:
        return "custom-property"


@dataclass(frozen=True)
class DimensionNumberNode(AstNodeBase):
    value: str

    @property
    def kind(self) -> Literal["dimension-number"]:
        return "dimension-number"


@dataclass(frozen=True)
class DimensionUnitNode(AstNodeBase):
    value: str

    @property
    def kind(self) -> Literal["dimension-unit"]:
        return "dimension-unit"


@dataclass(frozen=True)
class PercentageNumberNode(AstNodeBase):
    value: str

    @property
    def kind(self) -> Literal["percentage-number"]:
        return "percentage-number"


@dataclass(frozen=True)
class RoundingStrategyNode(AstNodeBase):
    value: RoundStrategy

    @property
    def kind(self) -> Literal["rounding-strategy"]:
        return "rounding-strategy"


# ============================================================
# Value Nodes
# ============================================================


@dataclass(frozen=True)
class NumberNode(AstNodeBase):
    """Unitless number, e.g. ``1.5``."""

    value: str

    @property
    def kind(self) -> Literal["number"]:
        return "number"


@dataclass(frozen=True)
class DimensionNode(AstNodeBase):
    """Number with a unit, e.g. ``10px``."""

    value: Tuple[DimensionNumberNode, DimensionUnitNode]

    @property
    def kind(self) -> Literal["dimension"]:
        return "dimension"

    @property
    def number(self) -> str:
        return self.value[0].value

    @property
    def unit(self) -> str:
        return self.value[1].value


@dataclass(frozen=True)
class PercentageNode(AstNodeBase):
    """Percentage, e.g. ``50%``."""

    value: Tuple[PercentageNumberNode, TokenNode]

    @property
    def kind(self) -> Literal["percentage"]:
        return "percentage"

    @property
    def number(self) -> str:
        return self.value[0].value


@dataclass(frozen=True)
class KeywordNode(AstNodeBase):
    """Math constant, or ``none`` in a ``clamp()`` bound."""

    value: Union[CalcKeyword, Literal["none"]]

    @property
    def kind(self) -> Literal["keyword"]:
        return "keyword"


@dataclass(frozen=True)
class RawNode(AstNodeBase):
    """Opaque text passed through to the output verbatim."""

    value: str

    @property
    def kind(self) -> Literal["raw"]:
        return "raw"


@dataclass(frozen=True)
class GroupNode(AstNodeBase):
    """Parenthesized sum, e.g. ``(1px + 2px)``."""

    value: Tuple[TokenNode, "CalcSum", TokenNode]

    @property
    def kind(self) -> Literal["group"]:
        return "group"

    @property
    def sum(self) -> "CalcSum":
        return self.value[1]


@dataclass(frozen=True)
class VarNode(AstNodeBase):
    """Custom property reference, e.g. ``var(--gap,4px)``."""

    value: Tuple[
        FunctionNameNode,
        TokenNode,
        CustomPropertyNode,
        Optional[Tuple[TokenNode, "CalcSum"]],
        TokenNode,
    ]

    @property
    def kind(self) -> Literal["var"]:
        return "var"

    @property
    def name(self) -> str:
        return self.value[2].value

    @property
    def fallback(self) -> Optional["CalcSum"]:
        fallback = self.value[3]
        return fallback[1] if fallback is not None else None


# ============================================================
# Math Function Nodes
# ============================================================


@dataclass(frozen=True)
class CalcNode(AstNodeBase):
    """``calc()`` wrapper around a sum."""

    value: Tuple[FunctionNameNode, TokenNode, "CalcSum", TokenNode]

    @property
    def kind(self) -> Literal["calc"]:
        return "calc"

    @property
    def sum(self) -> "CalcSum":
        return self.value[2]


@dataclass(frozen=True)
class ExpNode(AstNodeBase):
    """``exp()`` of a sum."""

    value: Tuple[FunctionNameNode, TokenNode, "CalcSum", TokenNode]

    @property
    def kind(self) -> Literal["exp"]:
        return "exp"

    @property
    def sum(self) -> "CalcSum":
        return self.value[2]


@dataclass(frozen=True)
class PowNode(AstNodeBase):
    """``pow()`` of a base and an exponent."""

    value: Tuple[
        FunctionNameNode, TokenNode, "CalcSum", TokenNode, "CalcSum", TokenNode
    ]

    @property
    def kind(self) -> Literal["pow"]:
        return "pow"

    @property
    def base(self) -> "CalcSum":
        return self.value[2]

    @property
    def exponent(self) -> "CalcSum":
        return self.value[4]


@dataclass(frozen=True)
class RoundNode(AstNodeBase):
    """``round()`` with optional strategy and optional interval."""

    value: Tuple[
        FunctionNameNode,
        TokenNode,
        Optional[Tuple[RoundingStrategyNode, TokenNode]],
        "CalcSum",
        Optional[Tuple[TokenNode, "CalcSum"]],
        TokenNode,
    ]

    @property
    def kind(self) -> Literal["round"]:
        return "round"

    @property
    def strategy(self) -> Optional[RoundStrategy]:
        strategy = self.value[2]
        return strategy[0].value if strategy is not None else None

    @property
    def sum(self) -> "CalcSum":
        return self.value[3]

    @property
    def interval(self) -> Optional["CalcSum"]:
        interval = self.value[4]
        return interval[1] if interval is not None else None


@dataclass(frozen=True)
class MinNode(AstNodeBase):
    """``min()`` over one or more comma-separated sums."""

    value: Tuple[
        FunctionNameNode,
        TokenNode,
        Tuple["CalcSum", Tuple[Tuple[TokenNode, "CalcSum"], ...]],
        TokenNode,
    ]

    @property
    def kind(self) -> Literal["min"]:
        return "min"

    @property
    def items(self) -> Tuple["CalcSum", ...]:
        first, rest = self.value[2]
        return (first,) + tuple(item for _, item in rest)


@dataclass(frozen=True)
class MaxNode(AstNodeBase):
    """``max()`` over one or more comma-separated sums."""

    value: Tuple[
        FunctionNameNode,
        TokenNode,
        Tuple["CalcSum", Tuple[Tuple[TokenNode, "CalcSum"], ...]],
        TokenNode,
    ]

    @property
    def kind(self) -> Literal["max"]:
        return "max"

    @property
    def items(self) -> Tuple["CalcSum", ...]:
        first, rest = self.value[2]
        return (first,) + tuple(item for _, item in rest)


@dataclass(frozen=True)
class ClampNode(AstNodeBase):
    """``clamp()`` with optional (``none``) bounds."""

    value: Tuple[
        FunctionNameNode,
        TokenNode,
        Union["CalcSum", KeywordNode],
        TokenNode,
        "CalcSum",
        TokenNode,
        Union["CalcSum", KeywordNode],
        TokenNode,
    ]

    @property
    def kind(self) -> Literal["clamp"]:
        return "clamp"

    @property
    def min(self) -> Union["CalcSum", KeywordNode]:
        return self.value[2]

    @property
    def preferred(self) -> "CalcSum":
        return self.value[4]

    @property
    def max(self) -> Union["CalcSum", KeywordNode]:
        return self.value[6]


# ============================================================
# Operator Chains
# ============================================================


@dataclass(frozen=True)
class CalcProductNode(AstNodeBase):
    """Multiplication/division chain, e.g. ``100vw*0.5/2``."""

    value: Tuple["CalcValue", Tuple[Tuple[TokenNode, "CalcValue"], ...]]

    @property
    def kind(self) -> Literal["calc-product"]:
        return "calc-product"

    @property
    def first(self) -> "CalcValue":
        return self.value[0]

    @property
    def operations(self) -> Tuple[Tuple[ProductOperator, "CalcValue"], ...]:
        return tuple((token.value, operand) for token, operand in self.value[1])  # type: ignore[misc]


@dataclass(frozen=True)
class CalcSumNode(AstNodeBase):
    """Addition/subtraction chain, e.g. ``100% - 20px + 1em``."""

    value: Tuple["CalcProduct", Tuple[Tuple[TokenNode, "CalcProduct"], ...]]

    @property
    def kind(self) -> Literal["calc-sum"]:
        return "calc-sum"

    @property
    def first(self) -> "CalcProduct":
        return self.value[0]

    @property
    def operations(self) -> Tuple[Tuple[SumOperator, "CalcProduct"], ...]:
        # Sum tokens carry the surrounding spaces required by CSS
        return tuple((token.value.strip(), operand) for token, operand in self.value[1])  # type: ignore[misc]


# Union types for the expression levels
CalcValue = Union[
    NumberNode,
    DimensionNode,
    PercentageNode,
    KeywordNode,
    RawNode,
    GroupNode,
    MinNode,
    MaxNode,
    ClampNode,
    CalcNode,
    ExpNode,
    PowNode,
    RoundNode,
    VarNode,
]

CalcProduct = Union[CalcValue, CalcProductNode]

CalcSum = Union[CalcProduct, CalcSumNode]

SyntaxNode = Union[
    TokenNode,
    FunctionNameNode,
    CustomPropertyNode,
    DimensionNumberNode,
    DimensionUnitNode,
    PercentageNumberNode,
    RoundingStrategyNode,
]

AstNode = Union[CalcSum, SyntaxNode]

# Any value slot: a node, an absent optional part, or a nested sequence
AstValue = Union[AstNodeBase, None, Tuple["AstValue", ...]]


# ============================================================
# AST Utilities
# ============================================================


def iter_child_nodes(node: AstNodeBase) -> Iterator[AstNodeBase]:
    """Yields the direct child nodes of a node in source order."""
    value = getattr(node, "value")
    if isinstance(value, str):
        return
    stack: List[AstValue] = [value]
    while stack:
        current = stack.pop()
        if current is None:
            continue
        if isinstance(current, tuple):
            stack.extend(reversed(current))
            continue
        yield current


def count_ast_nodes(node: AstNodeBase) -> int:
    """Counts the total number of nodes in an AST, syntax tokens included."""
    count = 0
    stack: List[AstNodeBase] = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(iter_child_nodes(current))
    return count


def calculate_ast_depth(node: AstNodeBase) -> int:
    """Calculates the maximum depth of an AST. A leaf has depth 1."""
    max_depth = 0
    stack: List[Tuple[AstNodeBase, int]] = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        if depth > max_depth:
            max_depth = depth
        for child in iter_child_nodes(current):
            stack.append((child, depth + 1))
    return max_depth


def ast_to_string(node: AstNodeBase, indent: int = 0) -> str:
    """Returns a human-readable representation of an AST node for debugging."""
    lines: List[str] = []
    stack: List[Tuple[AstNodeBase, int]] = [(node, indent)]
    while stack:
        current, level = stack.pop()
        prefix = "  " * level
        value = getattr(current, "value")
        if isinstance(value, str):
            lines.append(f'{prefix}{current.kind}: "{value}"')
            continue
        lines.append(f"{prefix}{current.kind}")
        children = list(iter_child_nodes(current))
        for child in reversed(children):
            stack.append((child, level + 1))
    return "\n".join(lines)
