from typing import Optional
import sympy as sp
from .core.node import Node
from .core.operators import UNDEFINED, Value
from .utils.parser import parse_description


class Expression:
  """Expression class with description caching"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self) -> Value:
    return self.root.evaluate()

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.describe()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def cost(self) -> int:
    """Digits spent"""
    return self.root.cost()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def to_infix(self) -> str:
    return str(self.to_sympy())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  @classmethod
  def from_string(cls, expr_str: str, digit: Optional[int] = None) -> 'Expression':
    return cls(parse_description(expr_str, digit))


def evaluate(tree: Node) -> Value:
  """Numeric value of a tree, or UNDEFINED when any subexpression is undefined"""
  return tree.evaluate()


def describe(tree: Node) -> str:
  return tree.describe()


def whole_number(value: Value) -> Optional[int]:
  """Integer key for a well-defined whole-number result, else None"""
  if value is UNDEFINED:
    return None
  if value != int(value):
    return None
  return int(value)
