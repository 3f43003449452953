#!/usr/bin/env python3
"""Example script demonstrating the windmill process.

This script shows how to:
1. Load configuration and build a plane
2. Run a single rotation step by hand
3. Run a multi-step windmill simulation
4. Save the run to JSON

Usage:
    python examples/run_windmill.py
"""

from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from windmill_process.core import (
    RunConfig,
    generate_random_plane,
    get_line_points_from_pivot,
    get_next_intersection_point,
    get_number_of_points_behind_line,
    get_number_of_points_in_front_of_line,
    get_pivot_point,
)
from windmill_process.simulator.windmill_run import save_run_result, simulate_windmill

import numpy as np


def main():
    """Run example simulation."""
    project_root = Path(__file__).parent.parent
    config_path = project_root / "config" / "default_config.json"

    print("=" * 60)
    print("Windmill Process - Example")
    print("=" * 60)

    # Load configuration
    print("\n1. Loading configuration...")
    config = RunConfig.from_json_file(config_path)
    rng = np.random.default_rng(config.seed)
    plane = generate_random_plane(config.size, config.density, rng)
    print(f"   - Grid {config.size}x{config.size}, density {config.density}")
    print(f"   - Generated {len(plane)} points")

    # Single step
    print("\n2. Running a single step...")
    pivot = get_pivot_point(plane, rng)
    line = get_line_points_from_pivot(plane, pivot)
    next_pivot = get_next_intersection_point(plane, pivot, line)
    print(f"   - Pivot: {tuple(pivot)}")
    print(f"   - Line: {tuple(line.near)} -> {tuple(line.far)}")
    print(f"   - Points in front: {get_number_of_points_in_front_of_line(plane, pivot, line)}")
    print(f"   - Points behind: {get_number_of_points_behind_line(plane, pivot, line)}")
    print(f"   - Next pivot: {tuple(next_pivot)}")

    # Multi-step run
    print(f"\n3. Running {config.max_steps} steps...")
    run = simulate_windmill(plane, pivot=pivot, max_steps=config.max_steps)
    for point, count in run.visit_counts.most_common(3):
        print(f"   - {tuple(point)} was the pivot {count} time(s)")
    print(f"   - Final pivot: {tuple(run.final_pivot)}")

    # Save
    print("\n4. Saving run...")
    output_path = project_root / "examples" / "windmill_run.json"
    save_run_result(run, output_path)
    print(f"   - Saved run to: {output_path}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
