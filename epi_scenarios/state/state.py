from dataclasses import asdict, astuple, dataclass, fields

import numpy as np

from epi_scenarios.types import Array

COMPARTMENTS = (
    "susceptible",
    "exposed",
    "infectious",
    "hospitalized",
    "critical",
    "discharged",
    "recovered",
    "dead",
)


@dataclass(frozen=True)
class SimulationState:
    """
    The population split into compartments at a single instant.

    `time` is in epoch milliseconds. Compartments are expected to be
    non-negative, which is the responsibility of the step function producing
    the state.
    """

    time: float
    susceptible: float = 0.0
    exposed: float = 0.0
    infectious: float = 0.0
    hospitalized: float = 0.0
    critical: float = 0.0
    discharged: float = 0.0
    recovered: float = 0.0
    dead: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def as_array(self) -> Array.General.Float:
        return np.array(astuple(self), dtype=float)

    def total_population(self) -> float:
        return sum(getattr(self, name) for name in COMPARTMENTS)


Trajectory = list[SimulationState]

FIELD_NAMES = tuple(f.name for f in fields(SimulationState))


def make_initial_state(
    time: float, population_served: float, initial_cases: float
) -> SimulationState:
    """
    Everyone is susceptible apart from the initial infectious cases.
    """
    return SimulationState(
        time=time,
        susceptible=population_served - initial_cases,
        infectious=initial_cases,
    )


def trajectory_to_array(trajectory: Trajectory) -> Array.Time.General.Float:
    """Stack a trajectory into an array with one row per state, columns in FIELD_NAMES order"""
    return np.array([astuple(s) for s in trajectory], dtype=float).reshape(
        len(trajectory), len(FIELD_NAMES)
    )
