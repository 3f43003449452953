"""Windmill run simulation module."""

from .windmill_run import (
    simulate_windmill,
    run_from_config,
    save_run_result,
    WindmillRun,
    WindmillStep,
)

__all__ = [
    "simulate_windmill",
    "run_from_config",
    "save_run_result",
    "WindmillRun",
    "WindmillStep",
]
