import math
from typing import Optional
from ..core.node import Node, LiteralNode, BinaryOpNode, UnaryOpNode
from ..core.operators import OPERATORS_BY_NAME


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, n_digits: Optional[int] = None) -> bool:
    if not ExpressionValidator._is_structurally_valid(node):
      return False

    if n_digits is not None:
      return node.cost() == n_digits

    return True

  @staticmethod
  def _is_structurally_valid(node: Node) -> bool:
    if isinstance(node, LiteralNode):
      return math.isfinite(node.value) and node.digits >= 1

    elif isinstance(node, BinaryOpNode):
      if node.operator.arity != 2 or OPERATORS_BY_NAME.get(node.operator.name) != node.operator:
        return False
      return (ExpressionValidator._is_structurally_valid(node.left) and
              ExpressionValidator._is_structurally_valid(node.right))

    elif isinstance(node, UnaryOpNode):
      if node.operator.arity != 1 or OPERATORS_BY_NAME.get(node.operator.name) != node.operator:
        return False
      return ExpressionValidator._is_structurally_valid(node.operand)

    return False
