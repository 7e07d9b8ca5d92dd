import math
import numpy as np
import numba
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Iterator, Tuple, Union


class NodeType(IntEnum):
  LITERAL = 0
  BINARY_OP = 1
  UNARY_OP = 2

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUBTRACT = 1
  MULTIPLY = 2
  EXPONENT = 3
  DIVIDE = 4
  MODULUS = 5
  LOG = 6
  ROOT = 7
  # Unary ops
  NEGATE = 8
  BAR = 9
  FACTORIAL = 10


class _Undefined:
  """Result of an operator applied outside its domain"""

  __slots__ = ()
  _instance = None

  def __new__(cls):
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self) -> str:
    return 'Undefined'

  def __bool__(self) -> bool:
    return False

  def __reduce__(self):
    return (_Undefined, ())


UNDEFINED = _Undefined()

Value = Union[float, _Undefined]


@numba.njit(cache=True, inline='always')
def _power(base, exponent):
  # Complex results and division by zero are not real numbers
  if base == 0.0 and exponent < 0.0:
    return np.nan
  if base < 0.0 and exponent != np.floor(exponent):
    return np.nan
  return base ** exponent

@numba.njit(cache=True)
def apply_binary_op(op_type, a, b):
  if op_type == OpType.ADD:
    return a + b
  elif op_type == OpType.SUBTRACT:
    return a - b
  elif op_type == OpType.MULTIPLY:
    return a * b
  elif op_type == OpType.EXPONENT:
    return _power(a, b)
  elif op_type == OpType.DIVIDE:
    if b == 0.0:
      return np.nan
    return a / b
  elif op_type == OpType.MODULUS:
    if b == 0.0 or b != np.floor(b):
      return np.nan
    # Integer modulus: the dividend is truncated, the sign follows the divisor
    return np.trunc(a) % b
  elif op_type == OpType.LOG:
    if a <= 0.0 or b <= 0.0 or b == 1.0:
      return np.nan
    return np.log(a) / np.log(b)
  elif op_type == OpType.ROOT:
    if b == 0.0:
      return np.nan
    return _power(a, 1.0 / b)
  return np.nan

@numba.njit(cache=True)
def apply_unary_op(op_type, a):
  if op_type == OpType.NEGATE:
    return -a
  elif op_type == OpType.BAR:
    # 0.444... only exists for a single repeated digit
    if a < 0.0 or a > 9.0 or a != np.floor(a):
      return np.nan
    return a / 9.0
  elif op_type == OpType.FACTORIAL:
    if a <= 0.0 or a >= 50.0 or a != np.floor(a):
      return np.nan
    product = 1.0
    k = a
    while k > 1.0:
      product *= k
      k -= 1.0
    return product
  return np.nan


@dataclass(frozen=True)
class Operator:
  """Named operator with a fixed arity and a compiled evaluation rule"""

  name: str
  arity: int
  op_type: OpType

  def apply(self, *operands: float) -> Value:
    if len(operands) != self.arity:
      raise TypeError(f"{self.name} takes {self.arity} operand(s), got {len(operands)}")
    if self.arity == 2:
      result = apply_binary_op(self.op_type, float(operands[0]), float(operands[1]))
    else:
      result = apply_unary_op(self.op_type, float(operands[0]))
    if not math.isfinite(result):
      return UNDEFINED
    return result


class OperatorCatalog:
  """Fixed, ordered operator table. Order is enumeration order."""

  __slots__ = ('_operators', '_by_name')

  def __init__(self, operators: Iterable[Operator]):
    self._operators: Tuple[Operator, ...] = tuple(operators)
    self._by_name: Dict[str, Operator] = {op.name: op for op in self._operators}
    if len(self._by_name) != len(self._operators):
      raise ValueError("Operator names in a catalog must be unique")

  def __len__(self) -> int:
    return len(self._operators)

  def __iter__(self) -> Iterator[Operator]:
    return iter(self._operators)

  def __getitem__(self, index: int) -> Operator:
    if not 0 <= index < len(self._operators):
      raise IndexError(f"Operator index {index} outside catalog of size {len(self._operators)}")
    return self._operators[index]

  def __contains__(self, name: str) -> bool:
    return name in self._by_name

  def by_name(self, name: str) -> Operator:
    try:
      return self._by_name[name]
    except KeyError:
      raise KeyError(f"Unknown operator: {name}") from None

  def index(self, name: str) -> int:
    return self._operators.index(self.by_name(name))

  @property
  def names(self) -> Tuple[str, ...]:
    return tuple(op.name for op in self._operators)

  def __repr__(self) -> str:
    return f"OperatorCatalog({', '.join(self.names)})"


BINARY_OPERATORS: Tuple[Operator, ...] = (
  Operator('add', 2, OpType.ADD),
  Operator('subtract', 2, OpType.SUBTRACT),
  Operator('multiply', 2, OpType.MULTIPLY),
  Operator('exponent', 2, OpType.EXPONENT),
  Operator('divide', 2, OpType.DIVIDE),
  Operator('modulus', 2, OpType.MODULUS),
  Operator('log', 2, OpType.LOG),
  Operator('root', 2, OpType.ROOT),
)

UNARY_OPERATORS: Tuple[Operator, ...] = (
  Operator('negate', 1, OpType.NEGATE),
  Operator('bar', 1, OpType.BAR),
  Operator('factorial', 1, OpType.FACTORIAL),
)

BINARY_CATALOG = OperatorCatalog(BINARY_OPERATORS)
UNARY_CATALOG = OperatorCatalog(UNARY_OPERATORS)

# Name lookup across both tables, used when parsing descriptions
OPERATORS_BY_NAME: Dict[str, Operator] = {op.name: op for op in BINARY_OPERATORS + UNARY_OPERATORS}
