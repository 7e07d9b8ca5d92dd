"""Utilities for expression trees."""

from .parser import ExpressionParseError, parse_description, literal_digits, tokenize
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, count_literals,
    operator_sequence, literal_sequence, shape_bits
)

__all__ = [
    'ExpressionParseError', 'parse_description', 'literal_digits', 'tokenize',
    'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'count_literals',
    'operator_sequence', 'literal_sequence', 'shape_bits'
]
