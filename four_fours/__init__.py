# Python

"""Four Fours Package

Enumerates every expression built from N copies of a digit and a fixed
operator palette, and tabulates which integers each game can reach.
"""

from .expression_tree import (
  Expression, Node, LiteralNode, UnaryOpNode, BinaryOpNode,
  Operator, OperatorCatalog, UNDEFINED, BINARY_CATALOG, UNARY_CATALOG,
  evaluate, describe
)
from .shapes import TreeShape, generate_shapes, parse_shape, count_leaves, catalan
from .generator import Odometer, ExpressionAssigner, assign, assign_operators, decode_combination, combination_count
from .operands import Operand, OperandPool, build_operand_pool, digit_compositions
from .game import (
  GameConfig, GameBoard, GameResult, GameState, FourFoursGame, BoardIntegrityError,
  play_game, work_units
)
from .game_stats import GameStats, get_game_stats, get_detailed_solutions
from .report import format_line, format_report, solution_counts, format_scores_row
from .logging_system import LogLevel, configure_logging, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "LiteralNode", "UnaryOpNode", "BinaryOpNode",
  "Operator", "OperatorCatalog", "UNDEFINED", "BINARY_CATALOG", "UNARY_CATALOG",
  "evaluate", "describe",
  "TreeShape", "generate_shapes", "parse_shape", "count_leaves", "catalan",
  "Odometer", "ExpressionAssigner", "assign", "assign_operators", "decode_combination",
  "combination_count",
  "Operand", "OperandPool", "build_operand_pool", "digit_compositions",
  "GameConfig", "GameBoard", "GameResult", "GameState", "FourFoursGame", "BoardIntegrityError",
  "play_game", "work_units",
  "GameStats", "get_game_stats", "get_detailed_solutions",
  "format_line", "format_report", "solution_counts", "format_scores_row",
  "LogLevel", "configure_logging", "get_logger"
]
