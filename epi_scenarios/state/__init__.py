from .derived_params import ContainmentFunction, ModelParams, population_average_parameters
from .params import (
    AgeDistribution,
    EpidemiologicalParams,
    Params,
    PopulationParams,
    SeverityRow,
    SimulationParams,
)
from .state import (
    COMPARTMENTS,
    FIELD_NAMES,
    SimulationState,
    Trajectory,
    make_initial_state,
    trajectory_to_array,
)
