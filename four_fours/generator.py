"""
Expression assignment.

Turns a tree shape plus a choice of operator per branch into an expression
tree. Operator choices for a shape are enumerated with an odometer, so the
K**(n-1) combinations are never held in memory at once.
"""
import math
from typing import Iterator, List, Optional, Sequence, Tuple

from .expression_tree import BINARY_CATALOG, BinaryOpNode, LiteralNode, Node, OperatorCatalog
from .shapes import LEAF, TreeShape


class Odometer:
  """Mixed-radix counter; position 0 turns fastest and carries into position 1"""

  __slots__ = ('radices', 'digits', 'exhausted')

  def __init__(self, radices: Sequence[int]):
    self.radices: Tuple[int, ...] = tuple(int(r) for r in radices)
    if any(r < 0 for r in self.radices):
      raise ValueError(f"Odometer radices must be non-negative: {self.radices}")
    self.reset()

  def reset(self):
    self.digits: List[int] = [0] * len(self.radices)
    self.exhausted = any(r == 0 for r in self.radices)

  def advance(self) -> bool:
    """Step once; returns False when the most significant position overflows"""
    if self.exhausted:
      return False
    for position, radix in enumerate(self.radices):
      self.digits[position] += 1
      if self.digits[position] < radix:
        return True
      self.digits[position] = 0
    self.exhausted = True
    return False

  def __iter__(self) -> Iterator[Tuple[int, ...]]:
    self.reset()
    while not self.exhausted:
      yield tuple(self.digits)
      self.advance()

  def __len__(self) -> int:
    return math.prod(self.radices)


def decode_combination(index: int, radices: Sequence[int]) -> Tuple[int, ...]:
  """Odometer reading after ``index`` steps from all zeros"""
  total = math.prod(radices)
  if not 0 <= index < total:
    raise IndexError(f"Combination index {index} outside [0, {total})")
  digits = []
  for radix in radices:
    index, digit = divmod(index, radix)
    digits.append(digit)
  return tuple(digits)


def combination_count(shape: TreeShape, catalog: OperatorCatalog = BINARY_CATALOG) -> int:
  return len(catalog) ** shape.branch_count


def assign_operators(shape: TreeShape, operator_indices: Sequence[int],
                     leaves: Sequence[Node],
                     catalog: OperatorCatalog = BINARY_CATALOG) -> Node:
  """Fill the shape in pre-order: branches take operators, leaves take operands"""
  if len(operator_indices) != shape.branch_count:
    raise ValueError(f"Shape {shape.bits} has {shape.branch_count} branches, "
                     f"got {len(operator_indices)} operator indices")
  if len(leaves) != shape.leaf_count:
    raise ValueError(f"Shape {shape.bits} has {shape.leaf_count} leaves, got {len(leaves)} operands")

  operators = iter(operator_indices)
  operands = iter(leaves)

  def _build(structure: tuple) -> Node:
    if structure == LEAF:
      return next(operands)
    operator = catalog[next(operators)]
    left = _build(structure[0])
    right = _build(structure[1])
    return BinaryOpNode(operator, left, right)

  return _build(shape.structure)


def assign(shape: TreeShape, combination_index: int, digit_value: int,
           catalog: OperatorCatalog = BINARY_CATALOG,
           leaves: Optional[Sequence[Node]] = None) -> Node:
  indices = decode_combination(combination_index, (len(catalog),) * shape.branch_count)
  if leaves is None:
    leaves = [LiteralNode.for_digit(digit_value) for _ in range(shape.leaf_count)]
  return assign_operators(shape, indices, leaves, catalog)


class ExpressionAssigner:
  """Populates one tree shape with every operator combination in odometer order"""

  def __init__(self, shape: TreeShape, catalog: OperatorCatalog = BINARY_CATALOG):
    self.shape = shape
    self.catalog = catalog

  def combinations(self) -> Odometer:
    return Odometer((len(self.catalog),) * self.shape.branch_count)

  def combination_count(self) -> int:
    return combination_count(self.shape, self.catalog)

  def trees(self, leaves: Sequence[Node]) -> Iterator[Tuple[int, Node]]:
    for index, operator_indices in enumerate(self.combinations()):
      yield index, assign_operators(self.shape, operator_indices, leaves, self.catalog)
