import os

from marcort.options import (
    EulerForwardOptions,
    MultithreadingOptions,
    PrintOptions,
    RungeKuttaOptions,
    SchedulerPolicy,
    SimulationOptions,
    euler_forward_options,
    multithreading_options,
    print_options,
    runge_kutta_options,
    simulation_options,
)


def test_accessors_return_shared_instances(monkeypatch):
    monkeypatch.setattr(simulation_options(), "start_time", 2.5)
    monkeypatch.setattr(print_options(), "precision", 3)
    monkeypatch.setattr(euler_forward_options(), "time_step", 0.25)
    monkeypatch.setattr(runge_kutta_options(), "max_iterations", 42)
    monkeypatch.setattr(multithreading_options(), "num_of_threads", 7)
    assert simulation_options().start_time == 2.5
    assert print_options().precision == 3
    assert euler_forward_options().time_step == 0.25
    assert runge_kutta_options().max_iterations == 42
    assert multithreading_options().num_of_threads == 7


def test_simulation_defaults():
    options = SimulationOptions()
    assert options.debug is False
    assert options.profiling is False
    assert options.scheduler_policy is None
    assert options.end_time > options.start_time


def test_print_defaults():
    options = PrintOptions()
    assert options.scientific_notation is False
    assert options.precision == 9
    assert options.buffer_size == 10 * 1024 * 1024


def test_solver_defaults():
    assert EulerForwardOptions().time_step == RungeKuttaOptions().time_step
    assert RungeKuttaOptions().tolerance == 1e-6


def test_multithreading_defaults():
    options = MultithreadingOptions()
    assert options.enable_multithreading is True
    assert options.num_of_threads == (os.cpu_count() or 0)


def test_shared_options_start_at_defaults():
    assert euler_forward_options() == EulerForwardOptions()
    assert runge_kutta_options() == RungeKuttaOptions()
    assert print_options() == PrintOptions()


def test_changes_to_shared_options_are_visible(monkeypatch):
    monkeypatch.setattr(simulation_options(), "end_time", 5.0)
    monkeypatch.setattr(
        simulation_options(), "scheduler_policy", SchedulerPolicy.SEQUENTIAL
    )
    assert simulation_options().end_time == 5.0
    assert simulation_options().scheduler_policy is SchedulerPolicy.SEQUENTIAL


def test_instances_are_independent():
    first = RungeKuttaOptions()
    second = RungeKuttaOptions()
    first.max_iterations += 1
    assert second.max_iterations == RungeKuttaOptions().max_iterations
    assert first.max_iterations == second.max_iterations + 1