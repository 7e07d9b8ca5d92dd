import numpy as np
import pytest

from four_fours.game import play_game
from four_fours.game_stats import get_detailed_solutions, to_infix
from four_fours.logging_system import LogLevel, configure_logging
from four_fours.report import (
    append_scores_row, coverage, format_line, format_report, format_scores_row, game_report_path,
    solution_counts, write_game_report
)


@pytest.fixture(scope="module")
def board():
    configure_logging(LogLevel.SILENT)
    return play_game(2, 2).board


def test_format_line(board):
    assert format_line(board, 4) == "4: 3 solutions available. First found: add(2,2)"
    assert format_line(board, 3) == "3: No solution available."


def test_format_line_with_infix(board):
    line = format_line(board, 4, infix=True)
    assert line.startswith("4: 3 solutions available. First found: add(2,2)  [")
    assert line.endswith("]")


def test_format_report_covers_range(board):
    lines = format_report(board, -1, 5)
    assert len(lines) == 7
    assert lines[0] == "-1: No solution available."
    assert lines[1] == "0: 2 solutions available. First found: subtract(2,2)"


def test_solution_counts_and_scores_row(board):
    counts = solution_counts(board, 0, 5)
    assert counts.tolist() == [2, 2, 0, 0, 3, 0]
    assert format_scores_row(counts) == "2, 2, 0, 0, 3, 0"
    assert coverage(counts) == pytest.approx(0.5)
    assert coverage(np.array([], dtype=np.int64)) == 0.0


def test_write_game_report(board, tmp_path):
    path = write_game_report(board, game_report_path(tmp_path, 2), 0, 4)
    assert path.name == "game_2.txt"
    assert path.read_text().splitlines() == format_report(board, 0, 4)


def test_append_scores_row(tmp_path):
    path = tmp_path / "game_scores.txt"
    append_scores_row(path, [1, 0])
    append_scores_row(path, [2, 3])
    assert path.read_text() == "1, 0\n2, 3\n"


def test_detailed_solutions(board):
    details = get_detailed_solutions(board, [3, 4], infix=True)
    assert details[0] == {'number': 3, 'count': 0, 'first_found': None, 'infix': None}
    assert details[1]['count'] == 3
    assert details[1]['infix'] == to_infix("add(2,2)")


def test_to_infix():
    assert to_infix("add(2,2)") == "2 + 2"
    assert to_infix("not an expression(") == "not an expression("
