import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from tqdm import tqdm

from epi_scenarios.advance import advance_state
from epi_scenarios.containment import TimeSeries, interpolate
from epi_scenarios.sampling import PoissonSampler, identity, make_generators
from epi_scenarios.simulation import StepFunction, simulate
from epi_scenarios.state import (
    AgeDistribution,
    ModelParams,
    Params,
    SeverityRow,
    Trajectory,
    make_initial_state,
    population_average_parameters,
)

logger = logging.getLogger(__name__)


class SimulationCancelled(RuntimeError):
    pass


@dataclass
class SimulationResult:
    deterministic_trajectory: Trajectory
    params: ModelParams
    stochastic_trajectories: list[Trajectory] = field(default_factory=list)


def parse_initial_cases(suspected_cases_today: str) -> float:
    try:
        return float(suspected_cases_today)
    except ValueError:
        raise ValueError(
            f"Suspected cases today must be numeric, got {suspected_cases_today!r}"
        ) from None


async def run(
    params: Params,
    severity: Sequence[SeverityRow],
    age_distribution: AgeDistribution,
    containment: TimeSeries,
    *,
    step: StepFunction = advance_state,
    should_stop: Optional[Callable[[], bool]] = None,
    verbose: bool = False,
) -> SimulationResult:
    """
    Entry point for the algorithm.

    Runs one deterministic trajectory and `number_stochastic_runs` Poisson
    sampled ones, all from the same initial state. The numeric work does not
    yield to the event loop once started.

    Args:
        params (Params): Scenario parameters
        severity (Sequence[SeverityRow]): Severity table by age group
        age_distribution (AgeDistribution): Head count per age group
        containment (TimeSeries): Containment samples, ascending in time
        step (StepFunction, optional): Transition function. Defaults to advance_state.
        should_stop (Optional[Callable[[], bool]], optional): Checked before each
            stochastic run, a True result aborts the whole run.
        verbose (bool, optional): Show progress over the stochastic runs.

    Raises:
        ValueError: If the suspected cases are not numeric, or the containment
            series is not strictly ascending in time
        SimulationCancelled: If should_stop returned True

    Returns:
        SimulationResult: The deterministic and stochastic trajectories
    """
    logger.info("Running simulation with params %s", params.model_dump_json(indent=2))

    model_params = population_average_parameters(
        params, severity, age_distribution, interpolate(containment)
    )
    t_min = params.simulation.t_min
    t_max = params.simulation.t_max
    initial_cases = parse_initial_cases(params.population.suspected_cases_today)
    initial_state = make_initial_state(
        t_min, model_params.population_served, initial_cases
    )

    start = time.perf_counter()
    result = SimulationResult(
        deterministic_trajectory=simulate(
            initial_state, identity, model_params, t_max, step
        ),
        params=model_params,
    )

    generators = make_generators(
        params.simulation.seed, model_params.number_stochastic_runs
    )
    for numpy_bit_generator in tqdm(generators, disable=not verbose):
        if should_stop is not None and should_stop():
            raise SimulationCancelled(
                f"Cancelled after {len(result.stochastic_trajectories)} of "
                f"{model_params.number_stochastic_runs} stochastic runs"
            )
        result.stochastic_trajectories.append(
            simulate(
                initial_state,
                PoissonSampler(numpy_bit_generator),
                model_params,
                t_max,
                step,
            )
        )

    logger.debug(
        "Simulated %d trajectories of %d steps in %.3fs",
        1 + len(result.stochastic_trajectories),
        len(result.deterministic_trajectory),
        time.perf_counter() - start,
    )
    return result
