"""Command-line harness: load a puzzle, solve it, print the board before and after with the step counts."""

# demo_cli.py
# Usage:
#   python -m apps.cli.demo_cli --puzzle very-hard-17-clue
#   python -m apps.cli.demo_cli --file board.txt --ranker incremental --max-steps 100000
#   python -m apps.cli.demo_cli --puzzle hard --config configs/default.yaml --json

import argparse
import json
import logging
import sys

import yaml

from sudoku_search.board_io import format_grid, format_value_summary, load_grid_file, rows_to_triples
from sudoku_search.checks import is_valid_solution
from sudoku_search.config import RANKERS, VALUE_ORDERS, load_config
from sudoku_search.grid import Grid
from sudoku_search.puzzles import PUZZLES, get_puzzle
from sudoku_search.search import Solver, SolveStatus

EXIT_CODES = {
    SolveStatus.SOLVED: 0,
    SolveStatus.UNSOLVABLE: 1,
    SolveStatus.BUDGET_EXCEEDED: 2,
}
EXIT_LOAD_ERROR = 3


def load_seed(args) -> Grid:
    if args.file:
        return Grid.from_triples(rows_to_triples(load_grid_file(args.file)))
    return Grid.from_triples(get_puzzle(args.puzzle))


def build_parser():
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by backtracking search.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--puzzle", type=str, default="easy", choices=sorted(PUZZLES))
    src.add_argument("--file", type=str, default=None, help="text board: 9 lines of 9 digits, 0 or . for empty")
    ap.add_argument("--config", type=str, default=None, help="YAML solver config")
    ap.add_argument("--ranker", type=str, default=None, choices=sorted(RANKERS))
    ap.add_argument("--value-order", type=str, default=None, choices=list(VALUE_ORDERS))
    ap.add_argument("--max-steps", type=int, default=None)
    ap.add_argument("--precheck", action="store_true", default=None, help="reject seeds with duplicate digits")
    ap.add_argument("--progress-every", type=int, default=None)
    ap.add_argument("--json", action="store_true", help="print a JSON payload instead of text")
    ap.add_argument("--show-heuristics", action="store_true", help="print the initial ranked set")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = load_config(
            args.config,
            ranker=args.ranker,
            value_order=args.value_order,
            max_steps=args.max_steps,
            precheck=args.precheck,
            progress_every=args.progress_every,
        )
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        print(f"error: could not load config: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    try:
        seed = load_seed(args)
    except (OSError, ValueError) as exc:
        print(f"error: could not load puzzle: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    original = seed.to_rows()
    solver = Solver(seed, config)
    heuristics = solver.ranked_entries() if args.show_heuristics else []

    outcome = solver.solve()

    if args.json:
        payload = {
            "source": args.file or args.puzzle,
            "config": config.to_dict(),
            "original": original,
            "result": outcome.as_dict(),
            "valid": is_valid_solution(outcome.grid.to_rows()),
        }
        if args.show_heuristics:
            payload["heuristics"] = [{"cell": str(e.cell), "score": e.score} for e in heuristics]
        print(json.dumps(payload, indent=2))
    else:
        print(format_grid(original))
        print()
        for entry in heuristics:
            print(f"{entry.cell} score={entry.score}")
        if heuristics:
            print()
        print(format_grid(outcome.grid))
        print()
        print(format_value_summary(outcome.grid))
        print()
        print(
            f"{outcome.status.value}: forward={outcome.forward_count} "
            f"backward={outcome.backward_count} lateral={outcome.lateral_count}"
        )
    return EXIT_CODES[outcome.status]


if __name__ == "__main__":
    sys.exit(main())
