"""Command-line interface: solve one length sequence or search for solvable ones."""

from __future__ import annotations

import argparse
import logging

from .config import DEFAULT_LENGTHS, PROGRESS_EVERY
from .core.solver import search
from .explorer.sharding import run_workers
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return n


def _cmd_solve(args: argparse.Namespace) -> int:
    lengths = args.lengths or list(DEFAULT_LENGTHS)
    result = search(lengths, turns_only=args.turns_only)
    logger.info(
        "validations = %d, max_depth = %d/%d",
        result["validations"],
        result["max_depth"],
        len(lengths),
    )
    solution = result["solution"]
    if solution is None:
        print("unsatisfiable")
    else:
        print(" ".join(d.name for d in solution))
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    run_workers(args.threads, limit=args.limit, progress_every=args.progress_every)
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="snake-cube", description="Snake cube solver")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Solve one segment-length sequence")
    p_solve.add_argument("lengths", nargs="*", type=_positive_int, help="Segment lengths (default: reference snake)")
    p_solve.add_argument("--turns-only", action="store_true", help="Require every segment to turn")
    p_solve.set_defaults(func=_cmd_solve)

    p_search = sub.add_parser("search", help="Enumerate length sequences and print the solvable ones")
    p_search.add_argument("--threads", type=_positive_int, default=None, help="Worker threads (default: CPU count)")
    p_search.add_argument("--limit", type=_positive_int, default=None, help="Candidates per worker (default: unbounded)")
    p_search.add_argument("--progress-every", type=_positive_int, default=PROGRESS_EVERY)
    p_search.set_defaults(func=_cmd_search)

    args = ap.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
