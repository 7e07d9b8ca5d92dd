import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .operators import NodeType, OpType, Operator, UNDEFINED, Value


class Node(ABC):
  """Base node class with size and description caching"""

  __slots__ = ('_size_cache', '_description_cache')

  node_type: NodeType

  def __init__(self):
    self._size_cache: Optional[int] = None
    self._description_cache: Optional[str] = None

  @abstractmethod
  def evaluate(self) -> Value:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _compute_description(self) -> str:
    pass

  def describe(self) -> str:
    """Canonical text: operator name with comma-separated operands"""
    if self._description_cache is None:
      self._description_cache = self._compute_description()
    return self._description_cache

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def cost(self) -> int:
    """Digits spent by the leaves of this subtree"""
    return sum(child.cost() for child in self.children())

  def __str__(self) -> str:
    return self.describe()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.describe()!r})"


class LiteralNode(Node):
  __slots__ = ('value', 'text', 'digits')

  node_type = NodeType.LITERAL

  def __init__(self, value: float, text: Optional[str] = None, digits: int = 1):
    super().__init__()
    self.value = float(value)
    self.text = text if text is not None else _format_literal(self.value)
    self.digits = digits

  @classmethod
  def for_digit(cls, digit: int) -> 'LiteralNode':
    return cls(digit, str(digit), 1)

  def evaluate(self) -> Value:
    return self.value

  def children(self) -> Tuple[Node, ...]:
    return ()

  def cost(self) -> int:
    return self.digits

  def _compute_description(self) -> str:
    return self.text

  def to_sympy(self) -> sp.Expr:
    return sp.Rational(self.text)


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator: Operator, operand: Node):
    super().__init__()
    if operator.arity != 1:
      raise ValueError(f"{operator.name} is not a unary operator")
    self.operator = operator
    self.operand = operand

  def evaluate(self) -> Value:
    value = self.operand.evaluate()
    if value is UNDEFINED:
      return UNDEFINED
    return self.operator.apply(value)

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def _compute_description(self) -> str:
    return f"{self.operator.name}({self.operand.describe()})"

  def to_sympy(self) -> sp.Expr:
    operand_sympy = self.operand.to_sympy()
    op_type = self.operator.op_type

    if op_type == OpType.NEGATE:
      return sp.Mul(-1, operand_sympy, evaluate=False)
    elif op_type == OpType.BAR:
      return sp.Mul(operand_sympy, sp.Rational(1, 9), evaluate=False)
    elif op_type == OpType.FACTORIAL:
      return sp.factorial(operand_sympy, evaluate=False)
    else:
      raise RuntimeWarning(f"to_sympy reached unexpected unary operation: {self.operator.name}")


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: Operator, left: Node, right: Node):
    super().__init__()
    if operator.arity != 2:
      raise ValueError(f"{operator.name} is not a binary operator")
    self.operator = operator
    self.left = left
    self.right = right

  def evaluate(self) -> Value:
    left_val = self.left.evaluate()
    if left_val is UNDEFINED:
      return UNDEFINED
    right_val = self.right.evaluate()
    if right_val is UNDEFINED:
      return UNDEFINED
    return self.operator.apply(left_val, right_val)

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _compute_description(self) -> str:
    return f"{self.operator.name}({self.left.describe()},{self.right.describe()})"

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    op_type = self.operator.op_type

    if op_type == OpType.ADD:
      return sp.Add(left, right, evaluate=False)
    elif op_type == OpType.SUBTRACT:
      return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
    elif op_type == OpType.MULTIPLY:
      return sp.Mul(left, right, evaluate=False)
    elif op_type == OpType.EXPONENT:
      return sp.Pow(left, right, evaluate=False)
    elif op_type == OpType.DIVIDE:
      return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    elif op_type == OpType.MODULUS:
      return sp.Mod(left, right, evaluate=False)
    elif op_type == OpType.LOG:
      return sp.Mul(sp.log(left, evaluate=False),
                    sp.Pow(sp.log(right, evaluate=False), -1, evaluate=False),
                    evaluate=False)
    elif op_type == OpType.ROOT:
      return sp.Pow(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    else:
      raise RuntimeWarning(f"to_sympy reached unexpected operation at node {type(self)}")


def _format_literal(value: float) -> str:
  if value == int(value):
    return str(int(value))
  return repr(value)
