from .advance import advance_state
from .containment import TimePoint, TimeSeries, interpolate
from .run import SimulationCancelled, SimulationResult, run
from .sampling import PoissonSampler, SampleTransform, identity, make_generators
from .simulation import StepFunction, iter_simulate, simulate
from .state import (
    COMPARTMENTS,
    AgeDistribution,
    EpidemiologicalParams,
    ModelParams,
    Params,
    PopulationParams,
    SeverityRow,
    SimulationParams,
    SimulationState,
    Trajectory,
    make_initial_state,
    population_average_parameters,
)
from .tools import ensemble_quantiles, export_simulation, trajectory_to_dataframe
from .types import Array
