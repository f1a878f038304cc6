from epi_scenarios.sampling import SampleTransform
from epi_scenarios.state import ModelParams, SimulationState


def _flow(sample: SampleTransform, expected: float, available: float) -> float:
    """A sampled flow out of a compartment, never more than the compartment holds"""
    return min(sample(expected), max(available, 0.0))


def advance_state(
    state: SimulationState, params: ModelParams, sample: SampleTransform
) -> SimulationState:
    """
    Advance the state forward one time step from t to t + dt.

    Every flow between compartments is an expected count over the step which
    is passed through `sample`, so the same function drives both the
    deterministic and the stochastic trajectories.

    Args:
        state (SimulationState): The state at time t
        params (ModelParams): Population averaged parameters
        sample (SampleTransform): Turns an expected count into a realised one

    Returns:
        SimulationState: The state at time t + dt
    """
    dt = params.time_delta_days
    new_time = state.time + params.time_delta
    fraction_infected = (
        state.infectious / params.population_served
        if params.population_served
        else 0.0
    )

    imported = sample(params.imports_per_day * dt)
    infected = _flow(
        sample,
        params.infection_rate(new_time) * state.susceptible * fraction_infected * dt,
        state.susceptible - imported,
    )
    new_cases = min(imported + infected, max(state.susceptible, 0.0))

    new_infectious = _flow(
        sample, state.exposed * dt / params.incubation_time, state.exposed
    )

    new_recovered = _flow(
        sample, state.infectious * dt * params.recovery_rate, state.infectious
    )
    new_hospitalized = _flow(
        sample,
        state.infectious * dt * params.hospitalized_rate,
        state.infectious - new_recovered,
    )

    new_discharged = _flow(
        sample, state.hospitalized * dt * params.discharge_rate, state.hospitalized
    )
    new_critical = _flow(
        sample,
        state.hospitalized * dt * params.critical_rate,
        state.hospitalized - new_discharged,
    )

    new_stabilized = _flow(
        sample, state.critical * dt * params.stabilization_rate, state.critical
    )
    new_dead = _flow(
        sample,
        state.critical * dt * params.death_rate,
        state.critical - new_stabilized,
    )

    return SimulationState(
        time=new_time,
        susceptible=state.susceptible - new_cases,
        exposed=state.exposed + new_cases - new_infectious,
        infectious=state.infectious + new_infectious - new_recovered - new_hospitalized,
        hospitalized=state.hospitalized
        + new_hospitalized
        + new_stabilized
        - new_discharged
        - new_critical,
        critical=state.critical + new_critical - new_stabilized - new_dead,
        discharged=state.discharged + new_discharged,
        recovered=state.recovered + new_recovered,
        dead=state.dead + new_dead,
    )
