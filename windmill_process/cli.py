"""Command-line tool for running the windmill process.

Usage:
    # Random plane from defaults:
    windmill-process --size 8 --density 0.4 --seed 7 --steps 10

    # Everything from a config file, JSON on stdout:
    windmill-process --config config/default_config.json --json

    # Save the full run next to the text summary:
    windmill-process --seed 3 --output run.json

Returns:
    Prints a short summary (or JSON with --json).
    Exit code 0 on success, 1 if the config is unreadable or the run could
    not be played. On failure an "Error: ..." line goes to stderr; with
    --json an {"error": "..."} object is also printed to stdout.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .core.errors import WindmillError
from .core.models import RunConfig
from .simulator.windmill_run import WindmillRun, run_from_config, save_run_result

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> RunConfig:
    """Merge command-line overrides on top of the config file (if any)."""
    config = RunConfig.from_json_file(args.config) if args.config else RunConfig()
    data = config.to_dict()
    overrides = {
        "size": args.size,
        "density": args.density,
        "seed": args.seed,
        "max_steps": args.steps,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return RunConfig.from_dict(data)


def format_summary(run: WindmillRun) -> str:
    """Render a run as a few human-readable lines."""
    lines = [
        f"Plane: {len(run.plane)} points",
        f"Start pivot: {tuple(run.start_pivot)}",
    ]
    for step in run.steps:
        lines.append(
            f"  step {step.index:>3}: {tuple(step.pivot)} -> {tuple(step.next_pivot)}"
            f"  (front={step.points_in_front}, behind={step.points_behind})"
        )
    lines.append(f"Final pivot: {tuple(run.final_pivot)}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the windmill process over a point set")
    parser.add_argument("--config", type=str, help="Path to config file")
    parser.add_argument("--size", type=int, help="Grid side length")
    parser.add_argument("--density", type=float, help="Point density in [0, 1]")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--steps", type=int, help="Number of rotation steps")
    parser.add_argument("--json", action="store_true", help="Output JSON format")
    parser.add_argument("--output", type=str, help="Also write the full run to this JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        run = run_from_config(config)
    except WindmillError as e:
        logger.debug("Run failed", exc_info=True)
        if args.json:
            print(json.dumps({"error": str(e)}))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        save_run_result(run, args.output)

    if args.json:
        print(json.dumps(run.to_dict()))
    else:
        print(format_summary(run))
    return 0


if __name__ == "__main__":
    sys.exit(main())
