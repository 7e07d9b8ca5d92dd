"""Expression Tree Module

Expression trees over a repeated digit: nodes, the operator catalog,
evaluation and description.
"""

from .expression import Expression, evaluate, describe, whole_number
from .core.node import (
    Node,
    LiteralNode,
    UnaryOpNode,
    BinaryOpNode
)
from .core.operators import (
    NodeType,
    OpType,
    Operator,
    OperatorCatalog,
    UNDEFINED,
    BINARY_OPERATORS,
    UNARY_OPERATORS,
    BINARY_CATALOG,
    UNARY_CATALOG,
    OPERATORS_BY_NAME,
    apply_binary_op,
    apply_unary_op
)
from .utils import ExpressionParseError, ExpressionValidator, parse_description

__all__ = [
    "Expression", "evaluate", "describe", "whole_number",
    "Node", "LiteralNode", "UnaryOpNode", "BinaryOpNode",
    "NodeType", "OpType", "Operator", "OperatorCatalog", "UNDEFINED",
    "BINARY_OPERATORS", "UNARY_OPERATORS", "BINARY_CATALOG", "UNARY_CATALOG",
    "OPERATORS_BY_NAME", "apply_binary_op", "apply_unary_op",
    "ExpressionParseError", "ExpressionValidator", "parse_description"
]
