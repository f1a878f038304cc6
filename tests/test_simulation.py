import pytest

from epi_scenarios import (
    SimulationState,
    identity,
    iter_simulate,
    make_initial_state,
    population_average_parameters,
    simulate,
)
from epi_scenarios.state import trajectory_to_array
from epi_scenarios.utils import array_fully_equal


def unit_step(state, params, sample):
    return SimulationState(
        time=state.time + 1,
        susceptible=state.susceptible - sample(1),
        recovered=state.recovered + sample(1),
    )


def test_includes_initial_state():
    initial = SimulationState(time=0, susceptible=10)
    trajectory = simulate(initial, identity, None, 3, step=unit_step)
    assert trajectory[0] is initial
    assert [s.time for s in trajectory] == [0, 1, 2, 3]


def test_stops_at_first_state_past_end():
    initial = SimulationState(time=0, susceptible=10)
    trajectory = simulate(initial, identity, None, 2.5, step=unit_step)
    assert [s.time for s in trajectory] == [0, 1, 2, 3]


def test_end_equal_to_start():
    initial = SimulationState(time=5, susceptible=10)
    assert simulate(initial, identity, None, 5, step=unit_step) == [initial]


def test_start_before_end():
    initial = SimulationState(time=10)
    with pytest.raises(ValueError, match="End time 0 before start 10"):
        simulate(initial, identity, None, 0, step=unit_step)


def test_start_before_end_iter_simulate():
    initial = SimulationState(time=10)
    with pytest.raises(ValueError, match="End time 0 before start 10"):
        next(iter_simulate(initial, identity, None, 0, step=unit_step))


def test_sample_is_passed_to_step():
    initial = SimulationState(time=0, susceptible=10)
    trajectory = simulate(initial, lambda x: 2 * x, None, 2, step=unit_step)
    assert trajectory[-1].susceptible == 6
    assert trajectory[-1].recovered == 4


def test_params_passed_to_step():
    seen = []

    def step(state, params, sample):
        seen.append(params)
        return SimulationState(time=state.time + 1)

    marker = object()
    simulate(SimulationState(time=0), identity, marker, 3, step=step)
    assert seen == [marker] * 3


def test_step_error_propagates():
    def step(state, params, sample):
        raise ZeroDivisionError("bad parameters")

    with pytest.raises(ZeroDivisionError, match="bad parameters"):
        simulate(SimulationState(time=0), identity, None, 1, step=step)


def test_monotonic_time_with_model(params, severity, age_distribution):
    model_params = population_average_parameters(
        params, severity, age_distribution, lambda t: 0.0
    )
    initial = make_initial_state(0, model_params.population_served, 10)
    trajectory = simulate(initial, identity, model_params, 30 * model_params.time_delta)
    times = [s.time for s in trajectory]
    assert all(a < b for a, b in zip(times, times[1:]))
    assert times[-1] >= 30 * model_params.time_delta


def test_deterministic_reproducible(params, severity, age_distribution):
    model_params = population_average_parameters(
        params, severity, age_distribution, lambda t: 0.25
    )
    initial = make_initial_state(0, model_params.population_served, 10)
    end_time = 100 * model_params.time_delta
    first = simulate(initial, identity, model_params, end_time)
    second = simulate(initial, identity, model_params, end_time)
    assert first == second
    assert array_fully_equal(trajectory_to_array(first), trajectory_to_array(second))
