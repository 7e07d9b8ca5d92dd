# game_stats.py
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .expression_tree import Expression, ExpressionParseError


@dataclass
class GameStats:
  """Enumeration counters for one game"""

  trees_enumerated: int = 0
  undefined: int = 0
  fractional: int = 0
  whole: int = 0
  units: int = 0
  trees_per_shape: Dict[str, int] = field(default_factory=dict)

  @property
  def shapes(self) -> int:
    return len(self.trees_per_shape)


def get_game_stats(stats: GameStats, duration: float, distinct_results: int) -> Dict[str, Any]:
  """Get summary statistics for a finished game"""
  return {
    'trees_enumerated': stats.trees_enumerated,
    'undefined_results': stats.undefined,
    'fractional_results': stats.fractional,
    'whole_number_results': stats.whole,
    'distinct_integers': distinct_results,
    'tree_shapes': stats.shapes,
    'work_units': stats.units,
    'duration_seconds': duration
  }


def get_detailed_solutions(board, numbers: Iterable[int], infix: bool = False) -> List[Dict]:
  """Get count and first-found details for each requested number"""
  detailed = []
  for number in numbers:
    info = {
      'number': number,
      'count': board.count(number),
      'first_found': board.first_found(number),
      'infix': None
    }

    if infix and info['first_found'] is not None:
      info['infix'] = to_infix(info['first_found'])

    detailed.append(info)

  return detailed


def to_infix(description: str) -> str:
  """Render a description as conventional infix notation via SymPy"""
  try:
    return Expression.from_string(description).to_infix()
  except ExpressionParseError:
    return description
