#!/usr/bin/env python3
"""
Play the four fours game (and its relatives) from the command line.

Example:
    four-fours --games 4 4
    four-fours --games 1 6 --logging --output-dir results
"""
import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from .expression_tree import UNARY_CATALOG
from .game import FourFoursGame, GameConfig, GameResult
from .logging_system import LogLevel, configure_logging, log_info
from .report import (
    CONSOLE_REPORT_RANGE, FILE_REPORT_RANGE, append_scores_row, format_report,
    game_report_path, solution_counts, write_game_report
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enumerate expressions built from N copies of a digit")
    parser.add_argument("--games", nargs=2, type=int, default=[4, 4], metavar=("FIRST", "LAST"),
                        help="Play every game from FIRST to LAST (game N uses N copies)")
    parser.add_argument("--digit", type=int, default=None,
                        help="Digit to repeat (defaults to the game number)")
    parser.add_argument("--start", type=int, default=None, help="First number to report")
    parser.add_argument("--end", type=int, default=None, help="Last number to report")
    parser.add_argument("--verbose", type=int, default=1, choices=range(0, 4),
                        help="0 = results only, 1 = tree level, 2 = expression level, 3 = operand level")
    parser.add_argument("--quiet", action="store_true", help="Suppress all log output")
    parser.add_argument("--logging", action="store_true",
                        help="Write game_<n>.txt and game_scores.txt instead of printing")
    parser.add_argument("--output-dir", default=".", help="Directory for report files")
    parser.add_argument("--concatenate", action="store_true", help="Allow 44, 444, ... as operands")
    parser.add_argument("--decimals", action="store_true", help="Allow .4, 4.4, .44, ... as operands")
    parser.add_argument("--unary", nargs="*", default=[], choices=list(UNARY_CATALOG.names),
                        help="Unary operators applied to operands")
    parser.add_argument("--unary-depth", type=int, default=1, help="Layers of unary operators on an operand")
    parser.add_argument("--dedupe", action="store_true",
                        help="Record each description only once per number")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--infix", action="store_true", help="Append infix notation to report lines")
    return parser


def build_configs(args: argparse.Namespace) -> List[GameConfig]:
    first, last = args.games
    return [
        GameConfig(
            digit=args.digit if args.digit is not None else game,
            n=game,
            concatenate=args.concatenate,
            decimals=args.decimals,
            unary_operators=tuple(args.unary),
            unary_depth=args.unary_depth,
            dedupe=args.dedupe,
            workers=args.workers,
            show_progress=args.progress,
        )
        for game in range(first, last + 1)
    ]


def report_range(args: argparse.Namespace):
    start, end = FILE_REPORT_RANGE if args.logging else CONSOLE_REPORT_RANGE
    if args.start is not None:
        start = args.start
    if args.end is not None:
        end = args.end
    return start, end


def run_games(args: argparse.Namespace, configs: List[GameConfig]) -> List[GameResult]:
    start, end = report_range(args)
    output_dir = Path(args.output_dir)
    scores_path = output_dir / "game_scores.txt"
    if args.logging:
        output_dir.mkdir(parents=True, exist_ok=True)
        scores_path.write_text("")

    playing_started_at = time.time()
    results = []
    for config in configs:
        result = FourFoursGame(config).play()
        results.append(result)

        if args.logging:
            write_game_report(result.board, game_report_path(output_dir, config.n), start, end, args.infix)
            append_scores_row(scores_path, solution_counts(result.board, start, end))
        else:
            for line in format_report(result.board, start, end, args.infix):
                print(line)

    playing_duration = time.time() - playing_started_at
    log_info(f"All available games exhausted in {playing_duration:.2f} seconds.")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    first, last = args.games
    if first < 1 or last < first:
        parser.error(f"--games needs 1 <= FIRST <= LAST, got {first} {last}")
    start, end = report_range(args)
    if end < start:
        parser.error("--end must not be below --start")

    try:
        configs = build_configs(args)
    except ValueError as e:
        parser.error(str(e))

    level = LogLevel.SILENT if args.quiet else LogLevel.from_verbosity(args.verbose)
    configure_logging(log_level=level)

    run_games(args, configs)
    return 0


if __name__ == "__main__":
    sys.exit(main())
