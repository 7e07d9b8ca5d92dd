"""
Tree Utility Functions

Traversal and inspection helpers for expression trees.
"""

from typing import List, Tuple

from ..core.node import Node, LiteralNode, UnaryOpNode, BinaryOpNode


def get_all_nodes(node: Node, traversal_order: str = 'depth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'depth_first' (pre-order, default) or 'breadth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Leaf nodes have depth 1.
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def count_literals(node: Node) -> int:
    return sum(1 for n in _depth_first_traversal(node) if isinstance(n, LiteralNode))


def operator_sequence(node: Node) -> Tuple[str, ...]:
    """Operator names in pre-order, the order the assigner fills them in"""
    return tuple(n.operator.name for n in _depth_first_traversal(node)
                 if isinstance(n, (UnaryOpNode, BinaryOpNode)))


def literal_sequence(node: Node) -> Tuple[str, ...]:
    """Literal texts left to right"""
    return tuple(n.text for n in _depth_first_traversal(node) if isinstance(n, LiteralNode))


def shape_bits(node: Node) -> str:
    """
    Prefix bit string of the binary skeleton (1 = binary node, 0 = leaf).

    Unary wrappers are leaf decorations, so they are skipped over.
    """
    while isinstance(node, UnaryOpNode):
        node = node.operand
    if isinstance(node, BinaryOpNode):
        return '1' + shape_bits(node.left) + shape_bits(node.right)
    return '0'
