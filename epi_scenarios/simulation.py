from typing import Callable, Iterator

from epi_scenarios.advance import advance_state
from epi_scenarios.sampling import SampleTransform
from epi_scenarios.state import ModelParams, SimulationState, Trajectory

# Must return a state with a strictly later time than the one it is given,
# otherwise the integration never reaches its end time.
StepFunction = Callable[[SimulationState, ModelParams, SampleTransform], SimulationState]


def iter_simulate(
    initial_state: SimulationState,
    sample: SampleTransform,
    params: ModelParams,
    end_time: float,
    step: StepFunction = advance_state,
) -> Iterator[SimulationState]:
    """
    Yields the initial state and then every state produced by `step` until
    one at or past `end_time` has been yielded.

    Args:
        initial_state (SimulationState): Where the trajectory starts
        sample (SampleTransform): identity, or a PoissonSampler
        params (ModelParams): Passed unchanged to every step
        end_time (float): Horizon in epoch ms
        step (StepFunction, optional): Transition function. Defaults to advance_state.

    Yields:
        Iterator[SimulationState]: states in time order
    """
    if end_time < initial_state.time:
        raise ValueError(f"End time {end_time} before start {initial_state.time}")

    state = initial_state
    yield state
    while state.time < end_time:
        state = step(state, params, sample)
        yield state


def simulate(
    initial_state: SimulationState,
    sample: SampleTransform,
    params: ModelParams,
    end_time: float,
    step: StepFunction = advance_state,
) -> Trajectory:
    return list(iter_simulate(initial_state, sample, params, end_time, step))
