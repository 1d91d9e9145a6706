"""Process-wide option sets of the simulation runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SchedulerPolicy(Enum):
    SEQUENTIAL = "sequential"
    MULTITHREADED = "multithreaded"


@dataclass
class SimulationOptions:
    debug: bool = False
    profiling: bool = False
    start_time: float = 0.0
    end_time: float = 10.0
    # Partitions each thread should process when all equations are
    # independent and of equal cost.
    equations_partitioning_factor: int = 10
    # Steps run first sequentially and then multithreaded to choose the
    # scheduler's execution strategy.
    scheduler_calibration_runs: int = 10
    scheduler_policy: Optional[SchedulerPolicy] = None


@dataclass
class PrintOptions:
    scientific_notation: bool = False
    precision: int = 9
    buffer_size: int = 10 * 1024 * 1024  # bytes


@dataclass
class EulerForwardOptions:
    time_step: float = 0.1


@dataclass
class RungeKuttaOptions:
    time_step: float = 0.1
    tolerance: float = 1e-6
    max_iterations: int = 10


def _hardware_threads() -> int:
    return os.cpu_count() or 0


@dataclass
class MultithreadingOptions:
    enable_multithreading: bool = True
    num_of_threads: int = field(default_factory=_hardware_threads)


_SIMULATION = SimulationOptions()
_PRINT = PrintOptions()
_EULER_FORWARD = EulerForwardOptions()
_RUNGE_KUTTA = RungeKuttaOptions()
_MULTITHREADING = MultithreadingOptions()


def simulation_options() -> SimulationOptions:
    """The shared simulation options."""
    return _SIMULATION


def print_options() -> PrintOptions:
    """The shared printing options."""
    return _PRINT


def euler_forward_options() -> EulerForwardOptions:
    """The shared forward Euler solver options."""
    return _EULER_FORWARD


def runge_kutta_options() -> RungeKuttaOptions:
    """The shared Runge-Kutta solver options."""
    return _RUNGE_KUTTA


def multithreading_options() -> MultithreadingOptions:
    """The shared multithreading options."""
    return _MULTITHREADING