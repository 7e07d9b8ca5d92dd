"""
Operand pool.

The leaves of an expression are drawn from this pool. By default it holds the
bare digit. Optionally it also holds concatenations (44, 444), decimal forms
(.4, 4.4, .44), and unary operators applied to them (negate(4), factorial(4),
bar(4)). Each operand records how many repetitions of the digit it spends.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

from .expression_tree import LiteralNode, Node, Operator, UnaryOpNode, UNARY_CATALOG, UNDEFINED
from .logging_system import log_debug


@dataclass(frozen=True)
class Operand:
  node: Node
  cost: int
  value: float

  @property
  def description(self) -> str:
    return self.node.describe()


class OperandPool:
  """Insertion-ordered operands, unique by description"""

  def __init__(self):
    self._operands: Dict[str, Operand] = {}
    self._by_cost: Dict[int, List[Operand]] = {}

  def add(self, node: Node, cost: int):
    """Add a node unless it is undefined or already present; returns the new Operand or None"""
    description = node.describe()
    if description in self._operands:
      return None
    value = node.evaluate()
    if value is UNDEFINED:
      return None
    operand = Operand(node, cost, value)
    self._operands[description] = operand
    self._by_cost.setdefault(cost, []).append(operand)
    log_debug(f"Caching {description} as {value}")
    return operand

  def by_cost(self, cost: int) -> Tuple[Operand, ...]:
    return tuple(self._by_cost.get(cost, ()))

  def costs(self) -> Tuple[int, ...]:
    return tuple(sorted(self._by_cost))

  def descriptions(self) -> List[str]:
    return list(self._operands)

  def __contains__(self, description: str) -> bool:
    return description in self._operands

  def __len__(self) -> int:
    return len(self._operands)

  def __iter__(self) -> Iterator[Operand]:
    return iter(self._operands.values())


def concatenation_literals(digit: int, length: int, decimals: bool = False) -> List[LiteralNode]:
  """The digit repeated ``length`` times, then every decimal-point placement of it"""
  text = str(digit) * length
  literals = [LiteralNode(int(text), text, length)]
  if decimals:
    for places in range(1, len(text) + 1):
      decimal_text = f"{text[:len(text) - places]}.{text[len(text) - places:]}"
      literals.append(LiteralNode(float(decimal_text), decimal_text, length))
  return literals


def digit_compositions(total: int, parts: int) -> Iterator[Tuple[int, ...]]:
  """Ordered ways to split ``total`` digits across ``parts`` leaves, lexicographically"""
  if parts < 1 or total < parts:
    return
  if parts == 1:
    yield (total,)
    return
  for first in range(1, total - parts + 2):
    for rest in digit_compositions(total - first, parts - 1):
      yield (first,) + rest


def _resolve_unary(operators: Iterable[Union[str, Operator]]) -> List[Operator]:
  resolved = []
  for operator in operators:
    if isinstance(operator, str):
      operator = UNARY_CATALOG.by_name(operator)
    elif operator.arity != 1:
      raise ValueError(f"{operator.name} is not a unary operator")
    resolved.append(operator)
  return resolved


def build_operand_pool(digit: int, n: int,
                       concatenate: bool = False,
                       decimals: bool = False,
                       unary_operators: Sequence[Union[str, Operator]] = (),
                       unary_depth: int = 1) -> OperandPool:
  if n < 1:
    raise ValueError(f"n must be at least 1, got {n}")
  if unary_depth < 0:
    raise ValueError(f"unary_depth must be non-negative, got {unary_depth}")

  pool = OperandPool()
  max_length = n if concatenate else 1
  for length in range(1, max_length + 1):
    for literal in concatenation_literals(digit, length, decimals):
      pool.add(literal, length)

  operators = _resolve_unary(unary_operators)
  frontier = list(pool)
  for _ in range(unary_depth if operators else 0):
    produced = []
    for operator in operators:
      for operand in frontier:
        added = pool.add(UnaryOpNode(operator, operand.node), operand.cost)
        if added is not None:
          produced.append(added)
    if not produced:
      break
    frontier = produced

  return pool
