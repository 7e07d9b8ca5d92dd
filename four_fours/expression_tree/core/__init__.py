"""Core expression tree components."""

from .node import Node, LiteralNode, UnaryOpNode, BinaryOpNode
from .operators import (
    NodeType, OpType, Operator, OperatorCatalog, UNDEFINED,
    BINARY_OPERATORS, UNARY_OPERATORS, BINARY_CATALOG, UNARY_CATALOG, OPERATORS_BY_NAME,
    apply_binary_op, apply_unary_op
)

__all__ = [
    'Node', 'LiteralNode', 'UnaryOpNode', 'BinaryOpNode',
    'NodeType', 'OpType', 'Operator', 'OperatorCatalog', 'UNDEFINED',
    'BINARY_OPERATORS', 'UNARY_OPERATORS', 'BINARY_CATALOG', 'UNARY_CATALOG', 'OPERATORS_BY_NAME',
    'apply_binary_op', 'apply_unary_op'
]
