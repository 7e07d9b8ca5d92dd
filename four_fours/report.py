"""
Report formatting for finished games.

The line format is shared with earlier text reports and must not change:
``<n>: <count> solutions available. First found: <description>`` or
``<n>: No solution available.``
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from .game import GameBoard
from .game_stats import to_infix

CONSOLE_REPORT_RANGE = (-10, 25)
FILE_REPORT_RANGE = (-10000, 10000)


def format_line(board: GameBoard, number: int, infix: bool = False) -> str:
    count = board.count(number)
    if count == 0:
        return f"{number}: No solution available."
    first = board.first_found(number)
    line = f"{number}: {count} solutions available. First found: {first}"
    if infix:
        line += f"  [{to_infix(first)}]"
    return line


def format_report(board: GameBoard, start: int, end: int, infix: bool = False) -> List[str]:
    return [format_line(board, number, infix) for number in range(start, end + 1)]


def solution_counts(board: GameBoard, start: int, end: int) -> np.ndarray:
    """Solution count for every number in [start, end]"""
    return np.array([board.count(number) for number in range(start, end + 1)], dtype=np.int64)


def format_scores_row(counts: Sequence[int]) -> str:
    return ', '.join(str(int(count)) for count in counts)


def coverage(counts: np.ndarray) -> float:
    """Fraction of the range with at least one solution"""
    if counts.size == 0:
        return 0.0
    return float(np.count_nonzero(counts)) / counts.size


def game_report_path(output_dir: Union[str, Path], n: int) -> Path:
    return Path(output_dir) / f"game_{n}.txt"


def write_game_report(board: GameBoard, path: Union[str, Path],
                      start: Optional[int] = None, end: Optional[int] = None,
                      infix: bool = False) -> Path:
    if start is None:
        start = FILE_REPORT_RANGE[0]
    if end is None:
        end = FILE_REPORT_RANGE[1]
    path = Path(path)
    with open(path, 'w') as f:
        for line in format_report(board, start, end, infix):
            f.write(line + "\n")
    return path


def append_scores_row(path: Union[str, Path], counts: Sequence[int]) -> Path:
    path = Path(path)
    with open(path, 'a') as f:
        f.write(format_scores_row(counts) + "\n")
    return path
