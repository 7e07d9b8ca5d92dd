from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from .expression_tree import OperatorCatalog, whole_number, UNDEFINED
from .generator import ExpressionAssigner, Odometer
from .logging_system import LogLevel, configure_logging, get_logger
from .operands import OperandPool
from .shapes import TreeShape

if TYPE_CHECKING:
  from .game import GameConfig


@dataclass
class PartialBoard:
  """Solutions found in one work unit (a shape and a digit split), in discovery order"""

  unit_index: int
  bits: str
  solutions: Dict[int, List[str]] = field(default_factory=dict)
  trees: int = 0
  undefined: int = 0
  fractional: int = 0
  whole: int = 0


def enumerate_unit(unit_index: int, shape: TreeShape, composition: Sequence[int],
                   pool: OperandPool, catalog: OperatorCatalog) -> PartialBoard:
  """
  Evaluate every tree for one shape and one split of the digits across its leaves.

  Operand choices run in the outer odometer, operator choices in the inner one.
  """
  partial = PartialBoard(unit_index, shape.bits)
  assigner = ExpressionAssigner(shape, catalog)
  choices = [pool.by_cost(cost) for cost in composition]
  show_expressions = get_logger().should_log(LogLevel.DETAILED)

  for operand_indices in Odometer([len(c) for c in choices]):
    leaves = [choices[position][i].node for position, i in enumerate(operand_indices)]
    for _, tree in assigner.trees(leaves):
      partial.trees += 1
      value = tree.evaluate()
      if value is UNDEFINED:
        partial.undefined += 1
        continue
      key = whole_number(value)
      if key is None:
        partial.fractional += 1
        continue
      partial.whole += 1
      description = tree.describe()
      if show_expressions:
        get_logger().info(f"   Tree {description} represents {value}", LogLevel.DETAILED)
      partial.solutions.setdefault(key, []).append(description)

  return partial


@lru_cache(maxsize=8)
def _operand_pool_for(config: 'GameConfig') -> OperandPool:
  return config.operand_pool()


def play_partition(task: Tuple) -> PartialBoard:
  """
  Worker function for multiprocessing. Each process rebuilds the operand pool
  from the config and enumerates one unit independently. Spawned processes
  start with a default logger, so the parent's level travels with the task.
  """
  config, catalog, log_level, unit_index, bits, composition = task
  if get_logger().log_level != log_level:
    configure_logging(log_level)
  shape = TreeShape.from_bits(bits)
  return enumerate_unit(unit_index, shape, composition, _operand_pool_for(config), catalog)
