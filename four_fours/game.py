"""
Four Fours game engine.

Plays one game: every expression that spends exactly n copies of the digit,
over every tree shape and every operator combination, evaluated and filed
under its whole-number result. The resulting board is immutable and is the
only output of a run.

Enumeration order (this decides "first found"), outermost first:
leaf count from n down to 1, shapes in ascending bit-string order, digit
splits in lexicographic order, operand odometer, operator odometer.
"""
import multiprocessing
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from tqdm import tqdm

from .expression_tree import BINARY_CATALOG, Expression, ExpressionParseError, OperatorCatalog, whole_number
from .game_stats import GameStats, get_game_stats
from .game_worker import PartialBoard, enumerate_unit, play_partition
from .logging_system import get_logger, log_info, log_milestone, log_tree_step, log_warning
from .operands import OperandPool, build_operand_pool, digit_compositions
from .shapes import TreeShape, generate_shapes

# Beyond this the 2**(2n-1) shape scan and K**(n-1) operator space get slow
TRACTABLE_N = 7


class BoardIntegrityError(ValueError):
    """A recorded description does not evaluate to the number it is filed under"""


@dataclass(frozen=True)
class GameConfig:
    digit: int
    n: int
    concatenate: bool = False
    decimals: bool = False
    unary_operators: Tuple[str, ...] = ()
    unary_depth: int = 1
    dedupe: bool = False
    workers: int = 1
    show_progress: bool = False

    def __post_init__(self):
        if isinstance(self.unary_operators, str):
            object.__setattr__(self, 'unary_operators', (self.unary_operators,))
        else:
            object.__setattr__(self, 'unary_operators', tuple(self.unary_operators))

        if not isinstance(self.digit, int) or self.digit < 1:
            raise ValueError(f"digit must be a positive integer, got {self.digit!r}")
        if not isinstance(self.n, int) or self.n < 1:
            raise ValueError(f"n must be a positive integer, got {self.n!r}")
        if self.unary_depth < 0:
            raise ValueError(f"unary_depth must be non-negative, got {self.unary_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    def operand_pool(self) -> OperandPool:
        return build_operand_pool(self.digit, self.n,
                                  concatenate=self.concatenate,
                                  decimals=self.decimals,
                                  unary_operators=self.unary_operators,
                                  unary_depth=self.unary_depth)


class GameBoard(Mapping):
    """Read-only mapping of integer result -> descriptions in discovery order"""

    def __init__(self, solutions: Dict[int, Sequence[str]], digit: int, n: int):
        self._solutions: Dict[int, Tuple[str, ...]] = {
            key: tuple(descriptions) for key, descriptions in solutions.items()
        }
        self.digit = digit
        self.n = n

    def __getitem__(self, key: int) -> Tuple[str, ...]:
        return self._solutions[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._solutions)

    def __len__(self) -> int:
        return len(self._solutions)

    def count(self, key: int) -> int:
        return len(self._solutions.get(key, ()))

    def first_found(self, key: int) -> Optional[str]:
        descriptions = self._solutions.get(key)
        return descriptions[0] if descriptions else None

    def total_solutions(self) -> int:
        return sum(len(descriptions) for descriptions in self._solutions.values())

    def reachable(self, start: int, end: int) -> List[int]:
        """Numbers in [start, end] with at least one solution"""
        return [number for number in range(start, end + 1) if number in self._solutions]

    def to_dict(self) -> Dict[int, List[str]]:
        return {key: list(descriptions) for key, descriptions in self._solutions.items()}

    def verify(self):
        """Re-parse and re-evaluate every description; raises BoardIntegrityError on a mismatch"""
        for key, descriptions in self._solutions.items():
            for description in descriptions:
                try:
                    expression = Expression.from_string(description, self.digit)
                except ExpressionParseError as e:
                    raise BoardIntegrityError(f"{key}: cannot parse {description!r}: {e}") from e
                if expression.cost() != self.n:
                    raise BoardIntegrityError(
                        f"{key}: {description} spends {expression.cost()} digits, expected {self.n}")
                if whole_number(expression.evaluate()) != key:
                    raise BoardIntegrityError(
                        f"{key}: {description} evaluates to {expression.evaluate()!r}")

    def __repr__(self) -> str:
        return f"GameBoard(digit={self.digit}, n={self.n}, results={len(self)})"


class GameState(Enum):
    IDLE = 'idle'
    ENUMERATING = 'enumerating'
    DONE = 'done'


@dataclass
class GameResult:
    config: GameConfig
    board: GameBoard
    stats: GameStats
    duration: float

    def summary(self) -> Dict:
        return get_game_stats(self.stats, self.duration, len(self.board))


class _BoardBuilder:
    """Merges partial boards in unit order"""

    def __init__(self, dedupe: bool = False):
        self.dedupe = dedupe
        self.solutions: Dict[int, List[str]] = {}
        self.stats = GameStats()
        self._seen: Dict[int, Set[str]] = {}

    def merge(self, partial: PartialBoard):
        self.stats.units += 1
        self.stats.trees_enumerated += partial.trees
        self.stats.undefined += partial.undefined
        self.stats.fractional += partial.fractional
        self.stats.whole += partial.whole
        self.stats.trees_per_shape[partial.bits] = (
            self.stats.trees_per_shape.get(partial.bits, 0) + partial.trees)

        for key, descriptions in partial.solutions.items():
            bucket = self.solutions.setdefault(key, [])
            if not self.dedupe:
                bucket.extend(descriptions)
                continue
            seen = self._seen.setdefault(key, set())
            for description in descriptions:
                if description not in seen:
                    seen.add(description)
                    bucket.append(description)


def work_units(n: int, pool: OperandPool) -> List[Tuple[TreeShape, Tuple[int, ...]]]:
    """(shape, digit split) pairs in enumeration order"""
    costs = set(pool.costs())
    units = []
    for leaf_count in range(n, 0, -1):
        splits = [split for split in digit_compositions(n, leaf_count)
                  if all(part in costs for part in split)]
        if not splits:
            continue
        for shape in generate_shapes(leaf_count):
            for split in splits:
                units.append((shape, split))
    return units


class FourFoursGame:
    """Enumerates one game: Idle -> Enumerating -> Done"""

    def __init__(self, config: GameConfig, catalog: OperatorCatalog = BINARY_CATALOG):
        self.config = config
        self.catalog = catalog
        self.state = GameState.IDLE

    def play(self) -> GameResult:
        if self.state != GameState.IDLE:
            raise RuntimeError(f"Game already {self.state.value}; create a new game to replay")

        config = self.config
        if config.n > TRACTABLE_N:
            log_warning(f"n={config.n} is above {TRACTABLE_N}; enumeration may take very long")

        started_at = time.time()
        pool = config.operand_pool()
        units = work_units(config.n, pool)
        log_milestone(f"Playing game with {config.n} x {config.digit}: "
                      f"{len(units)} work units, {len(pool)} operands, {len(self.catalog)} operators")

        self.state = GameState.ENUMERATING
        builder = _BoardBuilder(config.dedupe)
        for partial in self._partials(units, pool):
            builder.merge(partial)
            log_tree_step(partial.bits, partial.trees, partial.whole)

        board = GameBoard(builder.solutions, config.digit, config.n)
        duration = time.time() - started_at
        self.state = GameState.DONE

        log_info(f"All variations of game {config.n} exhausted in {duration:.2f} seconds.")
        result = GameResult(config, board, builder.stats, duration)
        get_logger().result_summary(result.summary())
        return result

    def _partials(self, units, pool: OperandPool) -> Iterator[PartialBoard]:
        progress = dict(total=len(units), desc=f"game {self.config.n}",
                        disable=not self.config.show_progress)

        if self.config.workers > 1 and len(units) > 1:
            log_level = get_logger().log_level
            tasks = [(self.config, self.catalog, log_level, index, shape.bits, split)
                     for index, (shape, split) in enumerate(units)]
            with multiprocessing.Pool(processes=self.config.workers) as worker_pool:
                # imap keeps task order, so first-found is the same as a serial run
                for partial in tqdm(worker_pool.imap(play_partition, tasks), **progress):
                    yield partial
            return

        for index, (shape, split) in enumerate(tqdm(units, **progress)):
            yield enumerate_unit(index, shape, split, pool, self.catalog)


def play_game(digit: int, n: int, catalog: OperatorCatalog = BINARY_CATALOG, **options) -> GameResult:
    """Convenience wrapper: build a config, play it, return the result"""
    return FourFoursGame(GameConfig(digit=digit, n=n, **options), catalog).play()
