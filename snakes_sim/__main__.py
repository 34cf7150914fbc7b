"""CLI entry point: python -m snakes_sim {run,chart}."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from snakes_sim.chart import make_summary_chart
from snakes_sim.config import DEFAULT_CONFIG, load_config
from snakes_sim.errors import SimulationError
from snakes_sim.render import format_summary, result_to_dict
from snakes_sim.runner import run_batch
from snakes_sim.stats import MultiSimResult


def _simulate(args: argparse.Namespace) -> MultiSimResult:
    """Load the config named on the command line and run the batch."""
    cfg = load_config(args.config)
    board = cfg.build_board()
    iterations = cfg.iterations if args.iterations is None else args.iterations
    print(f"Loaded {board.size}-square board from {args.config}", file=sys.stderr)
    return run_batch(board, iterations, seed=args.seed, workers=args.workers)


# ── run ──────────────────────────────────────────────────────────────

def cmd_run(args: argparse.Namespace) -> None:
    """Simulate and print the summary."""
    result = _simulate(args)
    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        print(format_summary(result))


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Simulate and save a min/avg/max chart."""
    result = _simulate(args)
    out = args.output or "simulation_summary.png"
    make_summary_chart(result, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def _add_sim_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("config", nargs="?", default=str(DEFAULT_CONFIG),
                   help="Board config JSON (default config.json)")
    p.add_argument("--iterations", "-n", type=int, help="Override the config's iteration count")
    p.add_argument("--seed", type=int, help="Base seed for reproducible runs")
    p.add_argument("--workers", "-w", type=int, default=1, help="Worker processes (default 1)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_sim",
        description="Snakes & Ladders Monte-Carlo simulator",
    )
    sub = parser.add_subparsers(dest="command")

    p_run = sub.add_parser("run", help="Simulate games and print statistics")
    _add_sim_args(p_run)
    p_run.add_argument("--json", action="store_true", help="Print statistics as JSON")

    p_chart = sub.add_parser("chart", help="Simulate games and save a chart")
    _add_sim_args(p_chart)
    p_chart.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "run":
            cmd_run(args)
        elif args.command == "chart":
            cmd_chart(args)
    except SimulationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
